"""Cardinal directions used while walking the maze grid."""

from __future__ import annotations

from enum import Enum


class Direction(Enum):
    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"

    @classmethod
    def default(cls) -> "Direction":
        return cls.UP

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.RIGHT: Direction.LEFT,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
}


__all__ = ["Direction"]
