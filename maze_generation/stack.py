"""A minimal LIFO container for the carving walk."""

from __future__ import annotations

from typing import Generic, Iterator, List, Optional, TypeVar

T = TypeVar("T")


class Stack(Generic[T]):
    """Push, pop and peek at one end only.

    Values should be immutable (``Pair`` is frozen); the stack never hands out
    its backing list.
    """

    def __init__(self) -> None:
        self._values: List[T] = []

    @classmethod
    def from_value(cls, value: T) -> "Stack[T]":
        stack: Stack[T] = cls()
        stack.push(value)
        return stack

    def push(self, value: T) -> None:
        self._values.append(value)

    def top(self) -> Optional[T]:
        if not self._values:
            return None
        return self._values[-1]

    def pop(self) -> Optional[T]:
        if not self._values:
            return None
        return self._values.pop()

    def empty(self) -> bool:
        return not self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._values))

    def __repr__(self) -> str:
        return f"Stack({self._values!r})"


__all__ = ["Stack"]
