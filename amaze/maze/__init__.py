"""Public maze package interface."""

from .config import ENTRY, InvalidMazeConfig, MazeConfig
from .generator import Generator
from .grid import Grid
from .maze import Maze
from .navigator import Command, Navigator, parse_key
from .tiles import GOAL, GOAL_ORIGIN, PLAYER, ROOM, TRAIL, WALL

__all__ = [
    "Command",
    "ENTRY",
    "Generator",
    "Grid",
    "InvalidMazeConfig",
    "Maze",
    "MazeConfig",
    "Navigator",
    "parse_key",
    "GOAL",
    "GOAL_ORIGIN",
    "PLAYER",
    "ROOM",
    "TRAIL",
    "WALL",
]
