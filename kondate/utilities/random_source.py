"""Pluggable randomness for genre shuffling and dish selection."""
from __future__ import annotations
import random
from typing import Iterable, List, Optional, Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    def next(self) -> float:
        """Return a float in [0, 1)."""
        ...


class PythonRandomSource:
    """Default source backed by random.Random; pass a seed for repeatable runs."""

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def next(self) -> float:
        return self._rng.random()


class SequenceRandomSource:
    """Replays a fixed list of values (cycling). Useful in tests."""

    def __init__(self, values: Iterable[float]):
        self._values: List[float] = list(values)
        if not self._values:
            raise ValueError("SequenceRandomSource needs at least one value")
        for v in self._values:
            if not 0.0 <= v < 1.0:
                raise ValueError(f"Random value out of range [0, 1): {v}")
        self._pos = 0

    def next(self) -> float:
        value = self._values[self._pos % len(self._values)]
        self._pos += 1
        return value


def choose(rng: RandomSource, items: Sequence[T]) -> T:
    """Pick one element uniformly."""
    if not items:
        raise ValueError("Cannot choose from an empty sequence")
    index = int(rng.next() * len(items))
    # int(x * n) can round up to n when x is within an ulp of 1.0
    return items[min(index, len(items) - 1)]


def shuffle(rng: RandomSource, items: List[T]) -> List[T]:
    """Fisher-Yates shuffle returning a new list."""
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = min(int(rng.next() * (i + 1)), i)
        result[i], result[j] = result[j], result[i]
    return result


__all__ = ["RandomSource", "PythonRandomSource", "SequenceRandomSource", "choose", "shuffle"]
