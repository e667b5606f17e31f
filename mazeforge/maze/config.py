import os
import random
from dataclasses import dataclass, field
from typing import Optional, Tuple

from .cells import Cell, Dim, Size
from .errors import MazeConfigError

# env var -> (attribute, parser)
ENV_OVERRIDES = {
    "MAZE_DIMENSION": ("dimension", int),
    "MAZE_HALF_SIZE": ("half_size", int),
    "MAZE_PERCENT": ("percent", float),
    "MAZE_SEED": ("seed", int),
    "MAZE_ENABLE_METRICS": ("enable_metrics", lambda v: v.lower() not in {"0", "false", "no", ""}),
}


@dataclass
class MazeConfig:
    dimension: int = 3
    half_size: int = 5
    percent: float = 100.0
    shifts: Tuple[bool, ...] = field(default=(False, False, False))
    seed: Optional[int] = None
    border_width: int = 1
    enable_metrics: bool = True

    def __post_init__(self):
        Dim.of(self.dimension)
        if self.half_size < 1:
            raise MazeConfigError(f"half_size must be at least 1, got {self.half_size}")
        if self.border_width < 1:
            raise MazeConfigError(f"border_width must be at least 1, got {self.border_width}")
        if not 0 <= self.percent <= 100:
            raise MazeConfigError(f"percent must be within [0, 100], got {self.percent}")
        # 0 is a valid deterministic seed; None => random
        if self.seed is None:
            self.seed = random.randint(0, 2**31 - 1)

    @property
    def size(self) -> Size:
        return (self.half_size * 2 + 1,) * self.dimension

    @property
    def bug(self) -> Cell:
        shifts = tuple(self.shifts) + (False,) * self.dimension
        return tuple(1 if s else 0 for s in shifts[: self.dimension])

    @classmethod
    def from_env(cls, **overrides) -> "MazeConfig":
        """Build a config from MAZE_* environment variables; explicit kwargs win."""
        values = {}
        for env_key, (attr, parse) in ENV_OVERRIDES.items():
            raw = os.environ.get(env_key)
            if raw is None:
                continue
            try:
                values[attr] = parse(raw)
            except ValueError:
                raise MazeConfigError(f"invalid value for {env_key}: {raw!r}") from None
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


__all__ = ["MazeConfig", "ENV_OVERRIDES"]
