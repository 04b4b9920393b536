from typing import List, Sequence, TypeVar

T = TypeVar("T")


class FirstChoice:
    """Random source that always picks the first candidate."""

    def choice(self, seq: Sequence[T]) -> T:
        return seq[0]


class ScriptedChoice:
    """Random source that replays a fixed list of indices, then falls back to 0."""

    def __init__(self, indices: List[int]) -> None:
        self.indices = list(indices)
        self.calls = 0

    def choice(self, seq: Sequence[T]) -> T:
        index = self.indices[self.calls] if self.calls < len(self.indices) else 0
        self.calls += 1
        return seq[index]
