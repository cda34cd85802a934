import os
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from amaze.maze import ROOM, Grid  # noqa: E402

ENV_KEYS = ("AMAZE_WIDTH", "AMAZE_HEIGHT", "AMAZE_SEED")


@pytest.fixture(autouse=True)
def _clean_env():
    # .env loading writes straight into os.environ, so scrub before and after
    for key in ENV_KEYS:
        os.environ.pop(key, None)
    yield
    for key in ENV_KEYS:
        os.environ.pop(key, None)


@pytest.fixture
def corridor_grid():
    """7x3 grid whose only open cells are the straight corridor (1,1)..(5,1)."""
    g = Grid.allocate(7, 3)
    for x in range(1, 6):
        g.set((x, 1), ROOM)
    return g
