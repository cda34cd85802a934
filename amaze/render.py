"""Text rendering of a maze, the player and the goal.

The player glyph wins over everything; the goal glyph shows only while the
goal cell is still an untouched room. Colour is opt-in so captured output
(tests, pipes) stays plain.
"""

from __future__ import annotations

from typing import List

from colorama import Fore, Style

from .maze import Maze
from .maze.config import Coord
from .maze.grid import Grid
from .maze.tiles import GOAL, GOAL_ORIGIN, PLAYER, ROOM, TRAIL, WALL

LEGEND = "you are the @, goal is the X, q=quit, h=left, j=down, k=up, l=right"

_COLORS = {
    PLAYER: Fore.YELLOW + Style.BRIGHT,
    GOAL: Fore.RED + Style.BRIGHT,
    WALL: Fore.BLUE,
    ROOM: Style.DIM,
    TRAIL: "",
    GOAL_ORIGIN: Fore.GREEN + Style.BRIGHT,
}


def glyph_at(grid: Grid, c: Coord, player: Coord, goal: Coord) -> str:
    if c == player:
        return PLAYER
    if c == goal and grid.get(c) == ROOM:
        return GOAL
    return grid.get(c)


def _paint(ch: str, color: bool) -> str:
    if not color or not _COLORS.get(ch):
        return ch
    return f"{_COLORS[ch]}{ch}{Style.RESET_ALL}"


def render_lines(grid: Grid, player: Coord, goal: Coord, color: bool = False) -> List[str]:
    lines = []
    for y in range(grid.height):
        lines.append("".join(_paint(glyph_at(grid, (x, y), player, goal), color) for x in range(grid.width)))
    return lines


def status_line(seed: int) -> str:
    return f"[{seed}] {LEGEND}"


def render(maze: Maze, player: Coord, color: bool = False) -> str:
    """Full frame: grid rows followed by the status line."""
    lines = render_lines(maze.grid, player, maze.goal, color=color)
    lines.append(status_line(maze.seed))
    return "\n".join(lines)
