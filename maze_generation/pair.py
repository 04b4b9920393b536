"""Row/column pairs used both as grid addresses and as offsets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from .direction import Direction

# Rows grow down the page, so UP moves towards row 0.
DIRECTION_OFFSETS: Dict[Direction, Tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.RIGHT: (0, 1),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
}


@dataclass(frozen=True)
class Pair:
    row: int
    col: int

    @classmethod
    def from_row_and_col(cls, row: int, col: int) -> "Pair":
        return cls(row, col)

    @classmethod
    def from_direction(cls, direction: Direction) -> "Pair":
        """Return the unit offset for ``direction``."""

        row, col = DIRECTION_OFFSETS[direction]
        return cls(row, col)

    def __add__(self, other: "Pair") -> "Pair":
        if not isinstance(other, Pair):
            return NotImplemented
        return Pair(self.row + other.row, self.col + other.col)

    def __sub__(self, other: "Pair") -> "Pair":
        if not isinstance(other, Pair):
            return NotImplemented
        return Pair(self.row - other.row, self.col - other.col)

    def __mul__(self, factor: int) -> "Pair":
        if not isinstance(factor, int):
            return NotImplemented
        return Pair(self.row * factor, self.col * factor)

    __rmul__ = __mul__

    def to_tuple(self) -> Tuple[int, int]:
        return (self.row, self.col)


__all__ = ["Pair", "DIRECTION_OFFSETS"]
