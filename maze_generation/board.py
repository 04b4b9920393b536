"""Two-dimensional board addressed in cell and raw coordinates.

A board of ``cell_height x cell_width`` cells is backed by a raw grid of
``(2 * cell_height + 1) x (2 * cell_width + 1)`` slots. Odd raw indices are
cell centres; even raw indices hold the walls between cells and the border.
"""

from __future__ import annotations

from typing import Generic, Iterator, List, Optional, Tuple, TypeVar

from .pair import Pair

T = TypeVar("T")

# Number of raw slots between two neighbouring cell centres.
CELL_STEP = 2


class Board(Generic[T]):
    def __init__(self, cell_height: int, cell_width: int, fill: T) -> None:
        if cell_height < 0 or cell_width < 0:
            raise ValueError("cell_height and cell_width must be non-negative")
        self.cell_height = cell_height
        self.cell_width = cell_width
        self._grid: List[List[T]] = [
            [fill for _ in range(self.cell_position_to_index(cell_width))]
            for _ in range(self.cell_position_to_index(cell_height))
        ]

    @staticmethod
    def cell_position_to_index(position: int) -> int:
        """Map a cell position onto its raw index.

        >>> Board.cell_position_to_index(4)
        9
        """

        return position * CELL_STEP + 1

    @classmethod
    def cell_to_raw(cls, cell: Pair) -> Pair:
        return Pair(cls.cell_position_to_index(cell.row), cls.cell_position_to_index(cell.col))

    @property
    def raw_height(self) -> int:
        return len(self._grid)

    @property
    def raw_width(self) -> int:
        return len(self._grid[0])

    def contains(self, pair: Pair) -> bool:
        return 0 <= pair.row < self.raw_height and 0 <= pair.col < self.raw_width

    def get(self, pair: Pair) -> Optional[T]:
        """Return the value at ``pair`` or ``None`` when it lies off the board."""

        if not self.contains(pair):
            return None
        return self._grid[pair.row][pair.col]

    def set(self, pair: Pair, value: T) -> Optional[T]:
        """Store ``value`` at ``pair``; ``None`` (and no write) when off the board."""

        if not self.contains(pair):
            return None
        self._grid[pair.row][pair.col] = value
        return value

    def rows(self) -> Iterator[Tuple[T, ...]]:
        for row in self._grid:
            yield tuple(row)

    def __str__(self) -> str:
        return "".join("".join(str(value) for value in row) + "\n" for row in self._grid)

    def __repr__(self) -> str:
        return f"Board(cell_height={self.cell_height}, cell_width={self.cell_width})"


__all__ = ["Board", "CELL_STEP"]
