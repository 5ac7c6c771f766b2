import heapq
from itertools import count
from typing import Generic, TypeVar

T = TypeVar("T")


class PriorityQueue(Generic[T]):
    """Min-priority queue with a deterministic tie-break.

    Entries with equal priority come out in insertion order, so two queues
    fed the same sequence of enqueues always dequeue the same sequence.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[int, int, T]] = []
        self._seq = count()

    def enqueue(self, item: T, priority: int) -> None:
        heapq.heappush(self._heap, (priority, next(self._seq), item))

    def dequeue(self) -> T:
        if not self._heap:
            raise IndexError("dequeue from an empty priority queue")
        _, _, item = heapq.heappop(self._heap)
        return item

    def peek(self) -> T:
        if not self._heap:
            raise IndexError("peek into an empty priority queue")
        return self._heap[0][2]

    def size(self) -> int:
        return len(self._heap)

    def __len__(self) -> int:
        return len(self._heap)
