import pytest  # noqa

from huffzip.pqueue import PriorityQueue


def test_dequeue_lowest_priority_first():
    q: PriorityQueue[str] = PriorityQueue()
    for item, p in [("c", 3), ("a", 1), ("b", 2)]:
        q.enqueue(item, p)
    assert q.size() == 3
    assert q.peek() == "a"
    assert [q.dequeue() for _ in range(3)] == ["a", "b", "c"]
    assert len(q) == 0


def test_equal_priorities_keep_insertion_order():
    q: PriorityQueue[str] = PriorityQueue()
    for item in ["x", "y", "z"]:
        q.enqueue(item, 5)
    q.enqueue("w", 4)
    q.enqueue("v", 5)
    assert [q.dequeue() for _ in range(5)] == ["w", "x", "y", "z", "v"]


def test_items_need_not_be_comparable():
    q: PriorityQueue[object] = PriorityQueue()
    a, b = object(), object()
    q.enqueue(a, 1)
    q.enqueue(b, 1)
    assert q.dequeue() is a


def test_empty_queue():
    q: PriorityQueue[int] = PriorityQueue()
    with pytest.raises(IndexError):
        q.dequeue()
    with pytest.raises(IndexError):
        q.peek()
