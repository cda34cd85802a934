"""Structural checks for a generated maze, used by scripts/diagnose_seeds.py."""

from __future__ import annotations

from collections import deque
from typing import Any, Dict

from .tiles import WALL


def analyze(maze) -> Dict[str, Any]:
    """Walk the open cells from the entry and report tree/border/goal facts.

    A perfect maze's open cells form a tree under 4-adjacency: every open
    cell is reachable from the entry and there is exactly one fewer
    adjacency than there are open cells.
    """
    grid = maze.grid
    w, h = grid.width, grid.height
    open_cells = set(grid.open_cells())
    edges = 0
    for x, y in open_cells:
        if (x + 1, y) in open_cells:
            edges += 1
        if (x, y + 1) in open_cells:
            edges += 1

    dist = {maze.entry: 0}
    q = deque([maze.entry])
    while q:
        x, y = q.popleft()
        for nxt in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
            if nxt in open_cells and nxt not in dist:
                dist[nxt] = dist[(x, y)] + 1
                q.append(nxt)

    uncarved_rooms = [
        (x, y) for x in range(1, w - 1, 2) for y in range(1, h - 1, 2) if grid.get((x, y)) == WALL
    ]
    border_breaches = [
        (x, y)
        for x in range(w)
        for y in range(h)
        if (x in (0, w - 1) or y in (0, h - 1)) and grid.cells[x][y] != WALL
    ]
    return {
        "open_cells": len(open_cells),
        "edges": edges,
        "connected": len(dist) == len(open_cells),
        "acyclic": edges == len(open_cells) - 1,
        "uncarved_rooms": uncarved_rooms,
        "border_breaches": border_breaches,
        "goal_distance": dist.get(maze.goal, -1),
        "max_distance": max(dist.values()),
    }
