"""Pipeline orchestration for maze generation.

``MazeBuilder`` carves a maze from a ``MazeConfig`` and then applies an
ordered list of named pruning steps. The step list is a plain value so the
level order can be inspected, reordered and tested on its own.

Default level order:
    reduce(1) -> circle -> fill_smallests -> fill_dead_corridors (fixed point) -> reduce(1)
"""
from __future__ import annotations

import random
import time
from typing import Any, Callable, Dict, List, NamedTuple, Optional

from ..logging_utils import get_logger
from .carving import KruskalCarver
from .config import MazeConfig
from .errors import MazeConfigError, UnknownStepError
from .maze import Maze
from .metrics import init_metrics
from . import pruning

_log = get_logger("pipeline")


class Step(NamedTuple):
    name: str
    params: Dict[str, Any]

    @property
    def label(self) -> str:
        if not self.params:
            return self.name
        args = ",".join(f"{k}={v}" for k, v in sorted(self.params.items()))
        return f"{self.name}({args})"


# name -> callable(maze, **params); return value (if bool) records whether the step changed the maze
STEPS: Dict[str, Callable[..., Any]] = {
    "reduce": pruning.reduce,
    "extend": pruning.extend,
    "circle": pruning.circle,
    "fill_smallests": pruning.fill_smallests,
    "fill_dead_rooms": pruning.fill_dead_rooms,
    "fill_dead_corridors": pruning.fill_dead_corridors,
}


class MazeBuilder:
    def __init__(self, config: Optional[MazeConfig] = None, rng: Optional[random.Random] = None, steps: Optional[List[Step]] = None):
        self.config = config if config is not None else MazeConfig()
        # Local RNG so external random usage does not affect generation
        self.rng = rng if rng is not None else random.Random(self.config.seed)
        self.steps: List[Step] = []
        self.metrics: Dict[str, Any] = {}
        for step in steps or []:
            self.add_step(step.name, **step.params)

    @classmethod
    def default(cls, config: Optional[MazeConfig] = None, rng: Optional[random.Random] = None) -> "MazeBuilder":
        """Level order; the grid loses two borders so at least 3 cells per axis must remain."""
        builder = cls(config, rng)
        width = builder.config.border_width
        remaining = builder.config.half_size * 2 + 1 - 4 * width
        if remaining < 3:
            raise MazeConfigError(
                f"half_size {builder.config.half_size} too small for two borders of {width}; "
                f"need half_size >= {2 * width + 1}"
            )
        return (
            builder.add_step("reduce", border_width=width)
            .add_step("circle")
            .add_step("fill_smallests")
            .add_step("fill_dead_corridors", until_fixed_point=True)
            .add_step("reduce", border_width=width)
        )

    def add_step(self, name: str, **params) -> "MazeBuilder":
        if name not in STEPS:
            raise UnknownStepError(f"unknown pipeline step {name!r}; known: {', '.join(sorted(STEPS))}")
        self.steps.append(Step(name, params))
        return self

    def carve(self) -> Maze:
        cfg = self.config
        out = KruskalCarver(cfg.size, cfg.percent, cfg.bug, self.rng).run()
        if cfg.enable_metrics:
            self.metrics['wall_candidates'] = out.candidates
            self.metrics['walls_kept'] = out.kept
            self.metrics['walls_carved'] = out.processed - out.kept
        return Maze(cfg.size, out.walls)

    def build(self) -> Maze:
        """Carve then run every step in order, timing each one when metrics are enabled."""
        self.metrics = init_metrics() if self.config.enable_metrics else {}
        if self.config.enable_metrics:
            start = time.perf_counter()
            phase_times = {}
            def _phase(label, fn, *a, **k):
                ps = time.perf_counter(); r = fn(*a, **k); pe = time.perf_counter()
                phase_times[label] = int((pe-ps)*1000)
                return r
        else:
            def _phase(label, fn, *a, **k):
                return fn(*a, **k)

        maze = _phase('carve', self.carve)
        for i, step in enumerate(self.steps):
            label = f"{i}:{step.label}"
            result = _phase(label, STEPS[step.name], maze, **step.params)
            _log.debug(event="maze_step", step=step.label, walls=len(maze.walls), size=maze.size)
            if self.config.enable_metrics and isinstance(result, bool):
                self.metrics['steps_changed'][label] = result
        maze.check()

        if self.config.enable_metrics:
            self.metrics['walls_final'] = len(maze.walls)
            self.metrics['free_cells'] = maze.free_count()
            self.metrics['free_zones'] = len(maze.compute_free_zones())
            self.metrics['room_zones'] = len(maze.compute_room_zones())
            self.metrics['corridor_zones'] = len(maze.compute_corridor_zones())
            self.metrics['runtime_ms'] = int((time.perf_counter() - start) * 1000)
            self.metrics['phase_ms'] = phase_times
        _log.info(event="maze_built", seed=self.config.seed, size=maze.size, walls=len(maze.walls), steps=len(self.steps))
        return maze


def build_maze(config: Optional[MazeConfig] = None, rng: Optional[random.Random] = None) -> Maze:
    """Carve and prune a level maze with the default step order."""
    return MazeBuilder.default(config, rng).build()


__all__ = ["MazeBuilder", "Step", "STEPS", "build_maze"]
