"""Maze value and the randomized depth-first backtracking carve."""

from __future__ import annotations

import logging
import random
from typing import Iterator, List, Optional, Protocol, Sequence, Set, Tuple, TypeVar

import numpy as np

from .board import CELL_STEP, Board
from .direction import Direction
from .edge import Edge
from .pair import Pair
from .stack import Stack
from .tile import Tile
from .visit_status import VisitStatus

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RandomSource(Protocol):
    """Anything that can pick uniformly from a non-empty sequence.

    ``random.Random`` instances and the ``random`` module both qualify.
    """

    def choice(self, seq: Sequence[T]) -> T:
        ...


def get_unvisited_directions(visits: Board[VisitStatus], current: Pair) -> List[Direction]:
    """Directions whose cell two raw steps from ``current`` exists and is unvisited."""

    directions: List[Direction] = []
    for direction in Direction:
        neighbor = current + CELL_STEP * Pair.from_direction(direction)
        if visits.get(neighbor) is VisitStatus.UNVISITED:
            directions.append(direction)
    return directions


def choose_perimeter_cell(
    cell_height: int,
    cell_width: int,
    rng: RandomSource,
) -> Optional[Tuple[Pair, Direction]]:
    """Pick a random border-adjacent cell and the side of the border it touches.

    The returned pair is in raw coordinates. ``None`` when the chosen side has
    no cells.
    """

    side = rng.choice(list(Direction))
    if cell_height <= 0 or cell_width <= 0:
        return None
    if side in (Direction.UP, Direction.DOWN):
        row = 0 if side is Direction.UP else cell_height - 1
        col = rng.choice(range(cell_width))
    else:
        col = 0 if side is Direction.LEFT else cell_width - 1
        row = rng.choice(range(cell_height))
    return Board.cell_to_raw(Pair(row, col)), side


def _open(tiles: Board[Tile], visits: Board[VisitStatus], pair: Pair) -> bool:
    if visits.set(pair, VisitStatus.VISITED) is None:
        return False
    return tiles.set(pair, Tile.PATH) is not None


def _cut_perimeter(
    tiles: Board[Tile],
    visits: Board[VisitStatus],
    rng: RandomSource,
) -> Optional[Tuple[Pair, Pair]]:
    picked = choose_perimeter_cell(tiles.cell_height, tiles.cell_width, rng)
    if picked is None:
        return None
    cell, side = picked
    wall = cell + Pair.from_direction(side)
    if tiles.set(wall, Tile.ENTRY) is None:
        return None
    if not _open(tiles, visits, cell):
        return None
    return cell, wall


class Maze:
    """A finished maze.

    Built once by :meth:`from_backtracking` and read-only afterwards. All
    coordinates exposed here are raw grid coordinates.
    """

    def __init__(self, tiles: Board[Tile], *, start: Pair, entrance: Pair, exit: Pair) -> None:
        self._tiles = tiles
        self.start = start
        self.entrance = entrance
        self.exit = exit

    @classmethod
    def from_backtracking(
        cls,
        height: int,
        width: int,
        rng: Optional[RandomSource] = None,
    ) -> Optional["Maze"]:
        """Carve a ``height x width`` cell maze, or return ``None`` if that fails."""

        if height < 0 or width < 0:
            logger.debug("Refusing to generate a %dx%d maze", height, width)
            return None
        source: RandomSource = rng if rng is not None else random

        tiles: Board[Tile] = Board(height, width, Tile.default())
        visits: Board[VisitStatus] = Board(height, width, VisitStatus.default())

        entry = _cut_perimeter(tiles, visits, source)
        if entry is None:
            logger.debug("No perimeter cell available for a %dx%d maze", height, width)
            return None
        start, entrance = entry

        stack: Stack[Pair] = Stack.from_value(start)
        carved = backtracked = 0
        while not stack.empty():
            current = stack.top()
            if current is None:
                return None
            candidates = get_unvisited_directions(visits, current)
            if not candidates:
                stack.pop()
                backtracked += 1
                continue
            direction = source.choice(candidates)
            offset = Pair.from_direction(direction)
            next_cell = current + CELL_STEP * offset
            if not _open(tiles, visits, next_cell) or not _open(tiles, visits, current + offset):
                logger.debug("Carve from %s towards %s left the board", current, direction.name)
                return None
            stack.push(next_cell)
            carved += 1

        finish = _cut_perimeter(tiles, visits, source)
        if finish is None:
            return None
        _, exit_wall = finish

        logger.debug(
            "Generated %dx%d maze start=%s entrance=%s exit=%s carved=%d backtracked=%d",
            height,
            width,
            start,
            entrance,
            exit_wall,
            carved,
            backtracked,
        )
        return cls(tiles, start=start, entrance=entrance, exit=exit_wall)

    # ------------------------------------------------------------------

    @property
    def height(self) -> int:
        return self._tiles.cell_height

    @property
    def width(self) -> int:
        return self._tiles.cell_width

    @property
    def raw_height(self) -> int:
        return self._tiles.raw_height

    @property
    def raw_width(self) -> int:
        return self._tiles.raw_width

    def get(self, pair: Pair) -> Optional[Tile]:
        return self._tiles.get(pair)

    def rows(self) -> List[Tuple[Tile, ...]]:
        return list(self._tiles.rows())

    def cells(self) -> Iterator[Pair]:
        """Raw coordinates of every cell centre, row-major."""

        for row in range(self.height):
            for col in range(self.width):
                yield Board.cell_to_raw(Pair(row, col))

    def edges(self) -> Set[Edge]:
        """Every pair of neighbouring cells whose shared wall was carved."""

        edges: Set[Edge] = set()
        for cell in self.cells():
            for direction in (Direction.RIGHT, Direction.DOWN):
                offset = Pair.from_direction(direction)
                neighbor = cell + CELL_STEP * offset
                if self._tiles.get(neighbor) is None:
                    continue
                if self._tiles.get(cell + offset) is Tile.PATH:
                    edges.add(Edge.between(cell, neighbor))
        return edges

    def to_array(self) -> np.ndarray:
        """Tile codes as a ``(raw_height, raw_width)`` ``uint8`` array."""

        return np.array([[int(tile) for tile in row] for row in self._tiles.rows()], dtype=np.uint8)

    def render(self, *, plain: bool = False) -> str:
        if not plain:
            return str(self._tiles)
        return "".join(
            "".join(tile.ascii_glyph for tile in row) + "\n" for row in self._tiles.rows()
        )

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Maze(height={self.height}, width={self.width}, entrance={self.entrance}, exit={self.exit})"


def generate_maze(height: int, width: int, rng: Optional[RandomSource] = None) -> Optional[Maze]:
    """Generate a maze of ``height x width`` cells; ``None`` if it cannot be built."""

    return Maze.from_backtracking(height, width, rng)


__all__ = [
    "Maze",
    "RandomSource",
    "choose_perimeter_cell",
    "generate_maze",
    "get_unvisited_directions",
]
