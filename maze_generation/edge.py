"""Undirected connections between two maze cells."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .pair import Pair


@dataclass(frozen=True)
class Edge:
    """A carved passage joining two cells.

    Endpoints are kept in row-major order so ``Edge((a, b)) == Edge((b, a))``.
    """

    pairs: Tuple[Pair, Pair]

    def __post_init__(self) -> None:
        first, second = self.pairs
        if second.to_tuple() < first.to_tuple():
            object.__setattr__(self, "pairs", (second, first))

    @classmethod
    def between(cls, first: Pair, second: Pair) -> "Edge":
        return cls((first, second))

    def __contains__(self, pair: object) -> bool:
        return pair in self.pairs


__all__ = ["Edge"]
