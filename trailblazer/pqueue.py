"""A priority queue supporting decrease-key."""

from __future__ import annotations

import heapq
import itertools
import math
from typing import Generic, Hashable, TypeVar

T = TypeVar("T", bound=Hashable)


class PriorityQueue(Generic[T]):
    """Min-priority queue of distinct elements with a decrease-key operation.

    Elements of equal priority leave in the order they were last given
    that priority.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[float, int, T]] = []
        self._entries: dict[T, tuple[float, int]] = {}
        self._counter = itertools.count()

    def _push(self, elem: T, priority: float) -> None:
        seq = next(self._counter)
        self._entries[elem] = (priority, seq)
        heapq.heappush(self._heap, (priority, seq, elem))

    @staticmethod
    def _check_priority(priority: float) -> None:
        if math.isnan(priority):
            raise ValueError("Attempted to use NaN as a priority.")

    def enqueue(self, elem: T, priority: float) -> None:
        """Insert ``elem`` with ``priority``; the element must not be present."""
        self._check_priority(priority)
        if elem in self._entries:
            raise ValueError("Duplicate element in priority queue.")
        self._push(elem, priority)

    def dequeue_min(self) -> T:
        """Remove and return the element with the lowest priority."""
        while self._heap:
            priority, seq, elem = heapq.heappop(self._heap)
            if self._entries.get(elem) == (priority, seq):
                del self._entries[elem]
                return elem
        raise IndexError("Attempted to dequeue from an empty priority queue.")

    def decrease_key(self, elem: T, new_priority: float) -> None:
        """Lower the priority of ``elem`` to ``new_priority``."""
        self._check_priority(new_priority)
        try:
            current, _ = self._entries[elem]
        except KeyError:
            raise KeyError(
                "Cannot call decrease-key on an element not in the priority queue."
            ) from None
        if new_priority > current:
            raise ValueError("Cannot use decrease-key to increase a key.")
        self._push(elem, new_priority)

    def priority(self, elem: T) -> float:
        """Return the current priority of ``elem``."""
        try:
            return self._entries[elem][0]
        except KeyError:
            raise KeyError("Element is not in the priority queue.") from None

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, elem: object) -> bool:
        return elem in self._entries