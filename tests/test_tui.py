import asyncio

from amaze.maze import GOAL_ORIGIN, TRAIL, Maze
from amaze.tui import MazeApp


def test_keys_move_player_and_mark_trail():
    # 5x3 has exactly two rooms; the goal is always (3, 1)
    maze = Maze(seed=21, size=(5, 3))

    async def scenario():
        app = MazeApp(maze)
        async with app.run_test() as pilot:
            await pilot.press("l")
            assert app.navigator.position == (2, 1)
            await pilot.press("j")
            assert app.navigator.position == (2, 1)
            await pilot.press("right")
            assert app.navigator.position == (3, 1)
            await pilot.press("h")
            assert app.navigator.position == (2, 1)

    asyncio.run(scenario())
    assert maze.grid.get((1, 1)) == TRAIL
    assert maze.grid.get((2, 1)) == GOAL_ORIGIN
    assert maze.grid.get((3, 1)) == TRAIL


def test_title_shows_seed():
    app = MazeApp(Maze(seed=99, size=(7, 7)))
    assert "99" in app.title
