"""Unit tests for the comparator-driven priority queue."""

import random

from mazepath.core.priority_queue import PriorityQueue


def _less(a, b):
    return a < b


class TestOrdering:
    """Dequeue order follows the comparator."""

    def test_dequeue_non_decreasing(self):
        rng = random.Random(3)
        pq = PriorityQueue(_less)
        items = [rng.randint(0, 50) for _ in range(200)]
        for x in items:
            pq.enqueue(x)

        out = []
        while not pq.is_empty():
            out.append(pq.dequeue())

        assert out == sorted(items)

    def test_empty_dequeue_returns_none(self):
        pq = PriorityQueue(_less)
        assert pq.is_empty()
        assert pq.dequeue() is None

    def test_ties_come_out_in_insertion_order(self):
        pq = PriorityQueue(lambda a, b: a[0] < b[0])
        for item in [(1, "a"), (0, "b"), (1, "c"), (0, "d"), (1, "e")]:
            pq.enqueue(item)

        out = [pq.dequeue()[1] for _ in range(5)]
        assert out == ["b", "d", "a", "c", "e"]

    def test_interleaved_enqueue_dequeue(self):
        pq = PriorityQueue(_less)
        pq.enqueue(5)
        pq.enqueue(3)
        assert pq.dequeue() == 3
        pq.enqueue(1)
        pq.enqueue(4)
        assert [pq.dequeue(), pq.dequeue(), pq.dequeue()] == [1, 4, 5]
        assert pq.dequeue() is None


class TestLateBinding:
    """Priorities are read at dequeue time, not cached at insert time."""

    def test_external_cost_change_is_honored(self):
        cost = {"a": 1, "b": 2, "c": 3}
        pq = PriorityQueue(lambda x, y: cost[x] < cost[y])
        for k in ("a", "b", "c"):
            pq.enqueue(k)

        cost["c"] = 0
        assert pq.dequeue() == "c"

        cost["a"] = 10
        assert pq.dequeue() == "b"
        assert pq.dequeue() == "a"


class TestMembership:
    """contains() and size reflect the current contents."""

    def test_contains_tracks_membership(self):
        pq = PriorityQueue(_less)
        pq.enqueue(2)
        pq.enqueue(7)

        assert pq.contains(lambda x: x == 7)
        assert not pq.contains(lambda x: x == 3)

        assert pq.dequeue() == 2
        assert not pq.contains(lambda x: x == 2)
        assert pq.contains(lambda x: x == 7)

    def test_len_and_duplicates(self):
        pq = PriorityQueue(_less)
        pq.enqueue(1)
        pq.enqueue(1)
        assert len(pq) == 2
        assert pq.dequeue() == 1
        assert pq.dequeue() == 1
        assert len(pq) == 0
        assert not pq
