"""
Snake game configuration.
"""

import numbers
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from .food import FOOD_STRATEGIES, MAX_FOOD_ATTEMPTS, STRATEGY_RETRY


class ConfigError(ValueError):
    """Configuration values that cannot describe a valid game session."""


@dataclass
class GameConfig:
    """Game session configuration, immutable once an engine is built."""

    start_index: int = 20
    num_rows: int = 20
    num_cols: int = 20
    cell_size: int = 30           # Rendering only
    tick_interval_ms: int = 100   # Driver only
    food_strategy: str = STRATEGY_RETRY
    max_food_attempts: int = MAX_FOOD_ATTEMPTS
    seed: Optional[int] = None

    @property
    def num_cells(self) -> int:
        return self.num_rows * self.num_cols

    def validate(self) -> "GameConfig":
        """
        Check that the configuration describes a playable session.

        Returns:
            self, for chaining

        Raises:
            ConfigError: If any value is out of range
        """
        for name in ("num_rows", "num_cols", "cell_size", "tick_interval_ms", "max_food_attempts"):
            value = getattr(self, name)
            if not _is_int(value) or value <= 0:
                raise ConfigError(f"{name} must be a positive integer, got {value!r}")

        if not _is_int(self.start_index):
            raise ConfigError(f"start_index must be an integer, got {self.start_index!r}")
        if not 0 <= self.start_index < self.num_cells:
            raise ConfigError(
                f"start_index {self.start_index} outside grid of {self.num_cells} cells"
            )

        if self.food_strategy not in FOOD_STRATEGIES:
            raise ConfigError(
                f"food_strategy must be one of {FOOD_STRATEGIES}, got {self.food_strategy!r}"
            )

        if self.seed is not None and not _is_int(self.seed):
            raise ConfigError(f"seed must be an integer or null, got {self.seed!r}")

        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameConfig":
        """Create config from dictionary, ignoring unknown keys."""
        if not data:
            return cls()
        known = cls.__dataclass_fields__.keys()
        return cls(**{k: v for k, v in data.items() if k in known})


def _is_int(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)
