"""Textual front-end for playing a maze.

Run with: `python run.py tui`
"""

from __future__ import annotations

from textual.app import App, ComposeResult
from textual.widgets import Footer, Header, Static

from .logging_utils import get_logger
from .maze import Maze
from .maze.navigator import Command
from .render import render_lines, status_line

log = get_logger("amaze.tui")


class MazeApp(App):
    """Single-screen maze view.

    Movement keys follow the classic h/j/k/l layout; arrow keys are bound as
    well. Reaching the goal only changes the marker left behind, the game
    keeps going until the player quits.
    """

    CSS = """
    Screen { align: center middle; }
    #board { width: auto; height: auto; }
    #status { width: auto; height: 1; color: $text-muted; }
    """

    BINDINGS = [
        ("h", "move('left')", "Left"),
        ("j", "move('down')", "Down"),
        ("k", "move('up')", "Up"),
        ("l", "move('right')", "Right"),
        ("left", "move('left')", "Left"),
        ("down", "move('down')", "Down"),
        ("up", "move('up')", "Up"),
        ("right", "move('right')", "Right"),
        ("q", "quit", "Quit"),
    ]

    def __init__(self, maze: Maze) -> None:
        super().__init__()
        self.maze = maze
        self.navigator = maze.navigator()
        self.title = f"aMAZEing [{maze.seed}]"
        self.log_ctx = log.bind(seed=maze.seed)

    def compose(self) -> ComposeResult:  # type: ignore[override]
        yield Header()
        self.board = Static(self._board_text(), id="board", markup=False)
        yield self.board
        yield Static(status_line(self.maze.seed), id="status", markup=False)
        yield Footer()

    def _board_text(self) -> str:
        return "\n".join(render_lines(self.maze.grid, self.navigator.position, self.maze.goal))

    def action_move(self, direction: str) -> None:
        reached = self.navigator.at_goal
        if self.navigator.apply(Command(direction)):
            self.board.update(self._board_text())
            if self.navigator.at_goal and not reached:
                self.log_ctx.info(event="goal_reached", goal=self.maze.goal)
                self.notify("You reached the goal!")


def run_tui(maze: Maze) -> int:  # pragma: no cover (interactive)
    MazeApp(maze).run()
    return 0
