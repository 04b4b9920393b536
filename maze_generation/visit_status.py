"""Per-cell bookkeeping for the carving walk."""

from __future__ import annotations

from enum import Enum


class VisitStatus(Enum):
    UNVISITED = 0
    VISITED = 1

    @classmethod
    def default(cls) -> "VisitStatus":
        return cls.UNVISITED


__all__ = ["VisitStatus"]
