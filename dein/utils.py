"""Small helpers shared across the package: a priority queue and string utilities."""

from __future__ import annotations

import heapq
from collections.abc import Callable, Hashable, Iterable
from typing import Generic, TypeVar

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)


class _Entry(Generic[T]):
    __slots__ = ("item", "_less")

    def __init__(self, item: T, less: Callable[[T, T], bool]) -> None:
        self.item = item
        self._less = less

    def __lt__(self, other: _Entry[T]) -> bool:
        return self._less(self.item, other.item)


class PriorityQueue(Generic[T]):
    """A min-heap ordered by a user supplied ``less(a, b)`` predicate."""

    def __init__(self, less: Callable[[T, T], bool]) -> None:
        self._less = less
        self._heap: list[_Entry[T]] = []

    def push(self, item: T) -> None:
        heapq.heappush(self._heap, _Entry(item, self._less))

    def pop(self) -> T:
        if not self._heap:
            raise IndexError("pop from an empty priority queue")
        return heapq.heappop(self._heap).item

    def __len__(self) -> int:
        return len(self._heap)


def head_to_lower(text: str) -> str:
    """Lower-case the first character of ``text``."""
    return text[:1].lower() + text[1:]


def head_to_upper(text: str) -> str:
    """Upper-case the first character of ``text``."""
    return text[:1].upper() + text[1:]


def uniq(items: Iterable[H]) -> list[H]:
    """Drop duplicates, keeping the first occurrence of each item in order."""
    return list(dict.fromkeys(items))