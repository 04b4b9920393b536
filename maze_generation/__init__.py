"""Maze generation by randomized depth-first backtracking."""

__all__ = [
    "Board",
    "CELL_STEP",
    "Direction",
    "Edge",
    "Maze",
    "MazeGenerator",
    "Pair",
    "RandomSource",
    "Stack",
    "Tile",
    "VisitStatus",
    "choose_perimeter_cell",
    "generate_maze",
    "get_unvisited_directions",
]

from .board import Board, CELL_STEP
from .direction import Direction
from .edge import Edge
from .pair import Pair
from .stack import Stack
from .tile import Tile
from .visit_status import VisitStatus
from .maze import (
    Maze,
    RandomSource,
    choose_perimeter_cell,
    generate_maze,
    get_unvisited_directions,
)
from .generator import MazeGenerator
