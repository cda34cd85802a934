"""Synchronous turn loop: render, wait for one key, apply it, until quit.

Reaching the goal does not end the loop; the player may keep walking.
Failures from the key source propagate to the caller untouched.
"""

from __future__ import annotations

from typing import Callable

from .logging_utils import get_logger
from .maze import Maze
from .maze.navigator import Command, parse_key
from .render import render

log = get_logger("amaze.game")


def run_game(
    maze: Maze,
    read_key: Callable[[], str],
    write: Callable[[str], None],
    color: bool = False,
) -> int:
    """Play ``maze`` until quit; returns the process exit status."""
    navigator = maze.navigator()
    game_log = log.bind(seed=maze.seed)
    turns = 0
    while True:
        write(render(maze, navigator.position, color=color))
        key = read_key()
        command = parse_key(key)
        if command is Command.QUIT:
            game_log.info(event="quit", turns=turns, position=navigator.position)
            return 0
        turns += 1
        was_at_goal = navigator.at_goal
        if navigator.apply(command) and navigator.at_goal and not was_at_goal:
            game_log.info(event="goal_reached", turns=turns, goal=maze.goal)
