# Cell states stored in the grid
WALL = "#"
ROOM = "*"
TRAIL = " "  # room the player has walked off
GOAL_ORIGIN = "!"  # cell the player stepped from onto the goal

# Overlay glyphs, never stored in the grid
PLAYER = "@"
GOAL = "X"

__all__ = ["WALL", "ROOM", "TRAIL", "GOAL_ORIGIN", "PLAYER", "GOAL"]
