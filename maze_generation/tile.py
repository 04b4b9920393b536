"""Tile states stored in the maze grid."""

from __future__ import annotations

from enum import IntEnum


class Tile(IntEnum):
    """Contents of one raw grid slot.

    The integer values are the codes used by :meth:`Maze.to_array`.
    """

    PATH = 0
    WALL = 1
    ENTRY = 2

    @classmethod
    def default(cls) -> "Tile":
        return cls.WALL

    @property
    def glyph(self) -> str:
        return GLYPHS[self]

    @property
    def ascii_glyph(self) -> str:
        return ASCII_GLYPHS[self]

    @property
    def is_open(self) -> bool:
        return self is not Tile.WALL

    def __str__(self) -> str:
        return self.glyph


GLYPHS = {
    Tile.WALL: "⬜",
    Tile.PATH: "⬛",
    Tile.ENTRY: "\U0001f7e9",
}

ASCII_GLYPHS = {
    Tile.WALL: "#",
    Tile.PATH: " ",
    Tile.ENTRY: "E",
}


__all__ = ["Tile", "GLYPHS", "ASCII_GLYPHS"]
