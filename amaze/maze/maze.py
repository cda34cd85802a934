"""Maze facade: config validation, grid allocation, carving and goal selection.

Public contract consumed elsewhere:
    Maze(MazeConfig(...)) OR Maze(seed=..., size=(W, H))
    Attributes: grid, goal, seed, config, metrics (dict), width, height
    Cell states: '#' (WALL), '*' (ROOM), ' ' (TRAIL), '!' (GOAL_ORIGIN)
"""

from __future__ import annotations

import dataclasses
import random
import time
import weakref
from typing import Any, Dict, Optional, Tuple

from ..logging_utils import get_logger
from .config import ENTRY, Coord, MazeConfig
from .generator import Generator
from .grid import Grid
from .navigator import Navigator

log = get_logger("amaze.maze")


class Maze:
    def __init__(
        self,
        config: MazeConfig | None = None,
        *,
        seed: int | None = None,
        size: Tuple[int, int] | None = None,
    ):
        # Accept either a config object or the (seed, size) call style.
        # The maze owns a private copy; the caller's config is never written.
        config = MazeConfig() if config is None else dataclasses.replace(config)
        if seed is not None:
            config.seed = seed
        if size is not None:
            config.width, config.height = size
        self.config = config.validate()
        self._navigators: weakref.WeakSet[Navigator] = weakref.WeakSet()
        self.seed = self.config.resolve_seed()
        self.entry: Coord = ENTRY
        self.grid = Grid.allocate(self.config.width, self.config.height)
        log.debug(event="initialized", width=self.width, height=self.height, seed=self.seed)
        self.goal: Coord = ENTRY
        self.max_depth = 0
        self.metrics: Dict[str, Any] = {}
        self._generate()

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    def _generate(self) -> None:
        start = time.perf_counter()
        # Local RNG so external random usage does not affect generation
        rng = random.Random(self.seed)
        outputs = Generator(self.grid, rng).run(self.entry)
        self.goal = outputs.goal
        self.max_depth = outputs.max_depth
        if self.config.enable_metrics:
            self.metrics = dict(outputs.metrics)
            self.metrics['runtime_ms'] = int((time.perf_counter() - start) * 1000)
        log.debug(event="generated", seed=self.seed, goal=self.goal, metrics=self.metrics or outputs.metrics)

    def regenerate(self, seed: Optional[int] = None) -> None:
        """Carve a fresh maze into the existing grid storage.

        ``seed=None`` keeps the current seed, which reproduces the same maze.
        Navigators handed out by ``navigator()`` are moved back to the entry
        and pointed at the new goal.
        """
        if seed is not None:
            MazeConfig(self.config.width, self.config.height, seed).validate()
            self.config.seed = self.seed = seed
        self.grid.clear()
        log.debug(event="cleared", seed=self.seed)
        self._generate()
        for nav in list(self._navigators):
            nav.reset(self.goal, self.entry)

    def navigator(self) -> Navigator:
        nav = Navigator(self.grid, self.goal, self.entry)
        self._navigators.add(nav)
        return nav

    def __repr__(self) -> str:
        return f"Maze(seed={self.seed}, size=({self.width}, {self.height}), goal={self.goal})"
