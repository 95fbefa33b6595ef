"""
Configuration dataclass for lifegrid runs.

Defaults reproduce the classic console demo: a glider on a 10x10 board,
100 generations printed 50 ms apart.
"""

from dataclasses import dataclass, asdict
from typing import Any

from .grid import PATTERNS


RENDER_STYLES = ("numeric", "bool")
STOP_POLICIES = ("never", "empty", "static")


@dataclass
class Config:
    """
    Complete configuration for a console run.

    Attributes:
        rows: Number of grid rows (fixed for the lifetime of the engine)
        cols: Number of grid columns (fixed for the lifetime of the engine)
        generations: Number of updates applied after the seed is shown
        delay_ms: Pause between rendered generations, in milliseconds
        pattern: Name of the seed pattern placed at the top-left corner
        style: Cell markers used by the renderer ("numeric" -> 1/0, "bool" -> true/false)
        stop_when: Early-stop policy ("never", "empty", "static")
    """

    # Grid
    rows: int = 10
    cols: int = 10

    # Loop
    generations: int = 100
    delay_ms: int = 50
    stop_when: str = "never"

    # Seed and output
    pattern: str = "glider"
    style: str = "numeric"

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        self._validate()

    def _validate(self) -> None:
        """Check that all parameters are in valid ranges."""
        if self.rows < 1:
            raise ValueError(f"rows must be >= 1, got {self.rows}")

        if self.cols < 1:
            raise ValueError(f"cols must be >= 1, got {self.cols}")

        if self.generations < 0:
            raise ValueError(f"generations must be >= 0, got {self.generations}")

        if self.delay_ms < 0:
            raise ValueError(f"delay_ms must be >= 0, got {self.delay_ms}")

        if self.pattern not in PATTERNS:
            raise ValueError(f"pattern must be one of {sorted(PATTERNS)}, got {self.pattern}")

        if self.style not in RENDER_STYLES:
            raise ValueError(f"style must be one of {RENDER_STYLES}, got {self.style}")

        if self.stop_when not in STOP_POLICIES:
            raise ValueError(f"stop_when must be one of {STOP_POLICIES}, got {self.stop_when}")

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "Config":
        """Create config from dictionary."""
        return cls(**d)

    @classmethod
    def from_args(cls, args: Any) -> "Config":
        """Create config from argparse namespace."""
        # Extract only known fields
        known_fields = {f.name for f in cls.__dataclass_fields__.values()}
        config_dict = {k: v for k, v in vars(args).items() if k in known_fields and v is not None}
        return cls(**config_dict)

    @property
    def shape(self) -> tuple[int, int]:
        """Grid dimensions (rows, cols)."""
        return (self.rows, self.cols)

    @property
    def delay_seconds(self) -> float:
        """Pause between generations in seconds, as expected by time.sleep."""
        return self.delay_ms / 1000.0
