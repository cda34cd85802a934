import time
from dataclasses import dataclass
from typing import Optional, Tuple

Coord = Tuple[int, int]

# Fixed starting room; also the root of the carve
ENTRY: Coord = (1, 1)


class InvalidMazeConfig(ValueError):
    """Raised for dimensions or seeds that cannot produce a maze."""


@dataclass
class MazeConfig:
    """Maze dimensions and seed.

    Width and height must be odd so the outer border stays solid wall and
    rooms land on odd coordinates. ``seed=None`` means derive one from the
    clock when the maze is built.
    """

    width: int = 79
    height: int = 23
    seed: Optional[int] = None
    enable_metrics: bool = True

    def validate(self) -> "MazeConfig":
        for label, value in (("width", self.width), ("height", self.height)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidMazeConfig(f"{label} must be an integer, got {value!r}")
            if value < 3:
                raise InvalidMazeConfig(f"{label} must be at least 3, got {value}")
            if value % 2 == 0:
                raise InvalidMazeConfig(f"{label} must be odd, got {value}")
        if self.seed is not None and self.seed < 0:
            raise InvalidMazeConfig(f"seed must be non-negative, got {self.seed}")
        return self

    def resolve_seed(self) -> int:
        if self.seed is None:
            self.seed = int(time.time()) & 0xFFFFFFFF
        return self.seed


__all__ = ["Coord", "ENTRY", "InvalidMazeConfig", "MazeConfig"]
