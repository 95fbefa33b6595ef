"""
Tests for lifegrid configuration.
"""

import argparse

import pytest
from lifegrid.config import Config


class TestConfig:
    """Tests for Config dataclass."""

    def test_defaults(self):
        """Config defaults reproduce the classic demo."""
        config = Config()

        assert config.rows == 10
        assert config.cols == 10
        assert config.generations == 100
        assert config.delay_ms == 50
        assert config.pattern == "glider"
        assert config.style == "numeric"
        assert config.stop_when == "never"

    def test_custom_values(self):
        """Config accepts custom values."""
        config = Config(rows=20, cols=30, generations=5, pattern="blinker")

        assert config.shape == (20, 30)
        assert config.generations == 5
        assert config.pattern == "blinker"

    def test_delay_seconds(self):
        """Delay is converted to seconds."""
        assert Config(delay_ms=50).delay_seconds == pytest.approx(0.05)
        assert Config(delay_ms=0).delay_seconds == 0.0

    def test_invalid_rows(self):
        """Config rejects rows < 1."""
        with pytest.raises(ValueError, match="rows"):
            Config(rows=0)

    def test_invalid_cols(self):
        """Config rejects cols < 1."""
        with pytest.raises(ValueError, match="cols"):
            Config(cols=-3)

    def test_invalid_generations(self):
        """Config rejects negative generations."""
        with pytest.raises(ValueError, match="generations"):
            Config(generations=-1)

    def test_zero_generations_allowed(self):
        """Zero generations is a valid (seed-only) run."""
        assert Config(generations=0).generations == 0

    def test_invalid_delay(self):
        """Config rejects negative delay."""
        with pytest.raises(ValueError, match="delay_ms"):
            Config(delay_ms=-10)

    def test_invalid_pattern(self):
        """Config rejects unknown patterns."""
        with pytest.raises(ValueError, match="pattern"):
            Config(pattern="spaceship")

    def test_invalid_style(self):
        """Config rejects unknown render styles."""
        with pytest.raises(ValueError, match="style"):
            Config(style="emoji")

    def test_invalid_stop_policy(self):
        """Config rejects unknown stop policies."""
        with pytest.raises(ValueError, match="stop_when"):
            Config(stop_when="sometimes")

    def test_serialization_roundtrip(self):
        """Config serializes and deserializes correctly."""
        config = Config(rows=12, cols=8, delay_ms=0, style="bool")

        restored = Config.from_dict(config.to_dict())

        assert restored == config

    def test_from_args_ignores_unknown_and_none(self):
        """from_args keeps only known fields that were given."""
        args = argparse.Namespace(rows=7, cols=None, verbose=True)

        config = Config.from_args(args)

        assert config.rows == 7
        assert config.cols == 10
