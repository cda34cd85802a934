"""Recursive-backtracker carving with an explicit frame stack.

Visiting order matches the classic recursive form exactly: on entering a
cell it becomes a room, one random start direction is drawn, and the four
neighbours two cells away (north, south, east, west) are tried cyclically
from that start. An unvisited neighbour gets the wall between it and the
current cell knocked down and is entered immediately; its siblings are tried
only after it is exhausted. The deepest cell entered (first one wins on ties)
becomes the goal.
"""
from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Dict, List, NamedTuple

from .config import Coord
from .grid import Grid
from .metrics import init_metrics
from .tiles import ROOM

NORTH, SOUTH, EAST, WEST = 0, 1, 2, 3


def neighbours(c: Coord) -> List[Coord]:
    # rooms are two cells apart to leave space for the wall between them
    x, y = c
    return [(x, y - 2), (x, y + 2), (x + 2, y), (x - 2, y)]


def midpoint(a: Coord, b: Coord) -> Coord:
    return (a[0] + b[0]) // 2, (a[1] + b[1]) // 2


@dataclass
class _Frame:
    cell: Coord
    depth: int
    start: int
    candidates: List[Coord] = field(default_factory=list)
    step: int = 0


class CarveOutputs(NamedTuple):
    goal: Coord
    max_depth: int
    metrics: Dict[str, int | float]


class Generator:
    def __init__(self, grid: Grid, rng: random.Random):
        self.grid = grid
        self.rng = rng
        self.max_depth = -1
        self.goal: Coord | None = None
        self.metrics = init_metrics()

    def _enter(self, cell: Coord, depth: int) -> _Frame:
        if depth > self.max_depth:
            self.max_depth = depth
            self.goal = cell
        self.grid.set(cell, ROOM)
        self.metrics['rooms_carved'] += 1
        return _Frame(cell, depth, self.rng.randrange(4), neighbours(cell))

    def carve(self, entry: Coord) -> None:
        stack = [self._enter(entry, 0)]
        while stack:
            frame = stack[-1]
            if frame.step == 4:
                stack.pop()
                continue
            nxt = frame.candidates[(frame.start + frame.step) % 4]
            frame.step += 1
            if self.grid.is_visited(nxt):
                continue
            self.grid.set(midpoint(frame.cell, nxt), ROOM)
            self.metrics['walls_knocked_down'] += 1
            stack.append(self._enter(nxt, frame.depth + 1))

    def run(self, entry: Coord) -> CarveOutputs:
        if not self.grid.in_bounds(entry):
            raise ValueError(f"entry {entry} is outside the {self.grid.width}x{self.grid.height} grid")
        self.carve(entry)
        self.metrics['max_depth'] = self.max_depth
        return CarveOutputs(self.goal, self.max_depth, self.metrics)
