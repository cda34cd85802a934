"""Player movement against a carved grid.

Movement helpers encapsulate:
- Mapping raw keys to commands (h/j/k/l/q, anything else ignored)
- Rejecting moves into walls or out of bounds without side effects
- Leaving trail markers behind an accepted move
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from .config import ENTRY, Coord
from .grid import Grid
from .tiles import GOAL_ORIGIN, TRAIL


class Command(Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    QUIT = "quit"


KEYMAP = {
    "h": Command.LEFT,
    "l": Command.RIGHT,
    "k": Command.UP,
    "j": Command.DOWN,
    "q": Command.QUIT,
}

DELTAS = {
    Command.LEFT: (-1, 0),
    Command.RIGHT: (1, 0),
    Command.UP: (0, -1),
    Command.DOWN: (0, 1),
}


def parse_key(key: str) -> Optional[Command]:
    """Return the command bound to ``key`` or None for unrecognised input."""
    return KEYMAP.get(key)


class Navigator:
    def __init__(self, grid: Grid, goal: Coord, start: Coord = ENTRY):
        self.grid = grid
        self.goal = goal
        self.position: Coord = start

    def reset(self, goal: Coord, start: Coord = ENTRY) -> None:
        self.goal = goal
        self.position = start

    @property
    def at_goal(self) -> bool:
        return self.position == self.goal

    def apply(self, command: Optional[Command]) -> bool:
        """Apply one command; returns True when the player moved.

        Quit and unknown commands are no-ops here, the turn loop decides
        what quit means.
        """
        delta = DELTAS.get(command)
        if delta is None:
            return False
        x, y = self.position
        candidate = (x + delta[0], y + delta[1])
        if self.grid.is_wall(candidate):
            return False
        old = self.position
        self.grid.set(old, GOAL_ORIGIN if candidate == self.goal else TRAIL)
        self.position = candidate
        return True

    def apply_key(self, key: str) -> bool:
        return self.apply(parse_key(key))
