# mazepath/core/priority_queue.py
#!/usr/bin/env python3
"""
Comparator-driven priority queue.

Ordering comes only from a caller-supplied `before(a, b)` predicate, so callers
can rank by scores computed at compare time (A* reads its live cost table).

Storage is a heapq binary heap of entries ordered by (comparator, insertion seq):
- ties (neither a-before-b nor b-before-a) come out in insertion order
- the heap is rebuilt before every dequeue, so priorities are re-evaluated
  against the current external state instead of the state at insert time
"""

import heapq
from typing import Callable, Generic, List, Optional, TypeVar

T = TypeVar("T")


class _Entry(Generic[T]):
    __slots__ = ("item", "seq", "_before")

    def __init__(self, item: T, seq: int, before: Callable[[T, T], bool]):
        self.item = item
        self.seq = seq
        self._before = before

    def __lt__(self, other: "_Entry[T]") -> bool:
        if self._before(self.item, other.item):
            return True
        if self._before(other.item, self.item):
            return False
        return self.seq < other.seq


class PriorityQueue(Generic[T]):
    def __init__(self, before: Callable[[T, T], bool]):
        self._before = before
        self._heap: List[_Entry[T]] = []
        self._seq = 0

    def _bump(self) -> int:
        self._seq += 1
        return self._seq

    def enqueue(self, item: T) -> None:
        heapq.heappush(self._heap, _Entry(item, self._bump(), self._before))

    def dequeue(self) -> Optional[T]:
        """Remove and return the first-ranked item, or None when empty."""
        if not self._heap:
            return None
        # late binding: ranks may have moved since the entries were pushed
        heapq.heapify(self._heap)
        return heapq.heappop(self._heap).item

    def is_empty(self) -> bool:
        return not self._heap

    def contains(self, predicate: Callable[[T], bool]) -> bool:
        return any(predicate(e.item) for e in self._heap)

    def __len__(self) -> int:
        return len(self._heap)
