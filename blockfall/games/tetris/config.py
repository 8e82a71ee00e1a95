"""
Tetris game configuration.
"""

from dataclasses import dataclass
from typing import Dict, Any, Optional


@dataclass
class TetrisConfig:
    """Tuning for gravity and level progression.

    The board is always 10 x 20 and is not part of the configuration.
    """

    # Gravity
    initial_fall_interval_ms: float = 800.0  # Time between automatic drops at level 1
    min_fall_interval_ms: float = 100.0      # Floor for the fall interval
    speed_factor: float = 0.8                # Interval multiplier per level gained

    # Progression
    lines_per_level: int = 10

    # Piece randomizer seed (None = nondeterministic)
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Reject values that would stall or reverse the game clock."""
        if self.initial_fall_interval_ms <= 0:
            raise ValueError(
                f"initial_fall_interval_ms must be positive, got {self.initial_fall_interval_ms}"
            )
        if self.min_fall_interval_ms <= 0:
            raise ValueError(
                f"min_fall_interval_ms must be positive, got {self.min_fall_interval_ms}"
            )
        if not 0 < self.speed_factor <= 1:
            raise ValueError(f"speed_factor must be in (0, 1], got {self.speed_factor}")
        if self.lines_per_level < 1:
            raise ValueError(f"lines_per_level must be at least 1, got {self.lines_per_level}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return {
            "initial_fall_interval_ms": self.initial_fall_interval_ms,
            "min_fall_interval_ms": self.min_fall_interval_ms,
            "speed_factor": self.speed_factor,
            "lines_per_level": self.lines_per_level,
            "seed": self.seed,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TetrisConfig":
        """Create config from dictionary, ignoring unknown keys.

        Raises:
            ValueError: If data is not a mapping or holds values of the wrong type
        """
        if not isinstance(data, dict):
            raise ValueError(f"Expected a mapping for TetrisConfig, got {type(data).__name__}")

        lines_per_level = data.get("lines_per_level", 10)
        if isinstance(lines_per_level, bool) or not isinstance(lines_per_level, int):
            raise ValueError(f"lines_per_level must be an integer, got {lines_per_level!r}")

        seed = data.get("seed")
        if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
            raise ValueError(f"seed must be an integer or null, got {seed!r}")

        try:
            return cls(
                initial_fall_interval_ms=float(data.get("initial_fall_interval_ms", 800.0)),
                min_fall_interval_ms=float(data.get("min_fall_interval_ms", 100.0)),
                speed_factor=float(data.get("speed_factor", 0.8)),
                lines_per_level=lines_per_level,
                seed=seed,
            )
        except TypeError as e:
            raise ValueError(f"Invalid game config value: {e}") from e
