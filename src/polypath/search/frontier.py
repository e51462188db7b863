# search/frontier.py
from dataclasses import dataclass

from polypath.errors import EmptyQueueError


@dataclass(frozen=True)
class QueueEntry:
    node_id: int
    dist: float


class PriorityQueue:
    """
    Binary min-heap of QueueEntry keyed by ``dist``.

    There is no decrease-key: the same node may sit in the heap several times
    with different distances. Callers drop stale entries when they pop them.
    """

    def __init__(self):
        self._heap: list[QueueEntry] = []

    def __len__(self) -> int:
        return len(self._heap)

    def is_empty(self) -> bool:
        return not self._heap

    def insert(self, entry: QueueEntry) -> None:
        self._heap.append(entry)
        self._sift_up(len(self._heap) - 1)

    def extract_min(self) -> QueueEntry:
        """Remove and return the entry with the smallest ``dist``.

        Raises EmptyQueueError when the queue holds nothing; check
        ``is_empty()`` first to avoid it.
        """
        if not self._heap:
            raise EmptyQueueError("extract_min from an empty queue")
        last = self._heap.pop()
        if not self._heap:
            return last
        root, self._heap[0] = self._heap[0], last
        self._sift_down(0)
        return root

    # --------------- Helpers -----------------------------

    def _sift_up(self, i: int) -> None:
        h = self._heap
        while i > 0:
            parent = (i - 1) // 2
            if not h[i].dist < h[parent].dist:
                break
            h[i], h[parent] = h[parent], h[i]
            i = parent

    def _sift_down(self, i: int) -> None:
        h, n = self._heap, len(self._heap)
        while True:
            smallest = i
            left, right = 2 * i + 1, 2 * i + 2
            if left < n and h[left].dist < h[smallest].dist:
                smallest = left
            if right < n and h[right].dist < h[smallest].dist:
                smallest = right
            if smallest == i:
                return
            h[i], h[smallest] = h[smallest], h[i]
            i = smallest
