"""Priority frontiers consumed by the shortest-path solver."""

from __future__ import annotations

import heapq
from typing import Dict, List, Protocol, Tuple

Vertex = int
Float = float


class FrontierProtocol(Protocol):
    """Min-priority queue of ``(priority, vertex)`` entries."""

    def push(self, key: Vertex, priority: Float) -> None:
        """Offer ``key`` at ``priority``."""
        ...

    def pop(self) -> Tuple[Float, Vertex]:
        """Remove and return the entry with the smallest priority."""
        ...

    def __len__(self) -> int:
        ...


class HeapFrontier:
    """Binary heap with lazy deletion.

    Pushing a key that is already queued adds a second entry instead of
    updating the first one. The older entry surfaces later and the caller is
    expected to discard it as stale.
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[Float, Vertex]] = []

    def push(self, key: Vertex, priority: Float) -> None:
        heapq.heappush(self._heap, (priority, key))

    def pop(self) -> Tuple[Float, Vertex]:
        """Return the smallest entry, which may be stale.

        Raises:
            IndexError: If the frontier is empty.
        """
        return heapq.heappop(self._heap)

    def __len__(self) -> int:
        return len(self._heap)


class IndexedFrontier:
    """Addressable binary heap supporting decrease-key.

    Each key occupies at most one slot. Pushing a queued key with a smaller
    priority moves it up in place; a larger or equal priority is ignored.
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[Float, Vertex]] = []
        self._pos: Dict[Vertex, int] = {}

    # ---- internals ----------------------------------------------------

    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._pos[heap[i][1]] = i
        self._pos[heap[j][1]] = j

    def _sift_up(self, i: int) -> None:
        heap = self._heap
        while i > 0:
            parent = (i - 1) // 2
            if heap[i] < heap[parent]:
                self._swap(i, parent)
                i = parent
            else:
                break

    def _sift_down(self, i: int) -> None:
        heap = self._heap
        n = len(heap)
        while True:
            left = 2 * i + 1
            right = left + 1
            smallest = i
            if left < n and heap[left] < heap[smallest]:
                smallest = left
            if right < n and heap[right] < heap[smallest]:
                smallest = right
            if smallest == i:
                return
            self._swap(i, smallest)
            i = smallest

    # ---- public API ---------------------------------------------------

    def push(self, key: Vertex, priority: Float) -> None:
        """Insert ``key`` or lower its priority if already queued."""
        pos = self._pos.get(key)
        if pos is None:
            self._heap.append((priority, key))
            self._pos[key] = len(self._heap) - 1
            self._sift_up(len(self._heap) - 1)
        elif priority < self._heap[pos][0]:
            self._heap[pos] = (priority, key)
            self._sift_up(pos)

    def pop(self) -> Tuple[Float, Vertex]:
        """Remove and return the smallest entry.

        Raises:
            IndexError: If the frontier is empty.
        """
        if not self._heap:
            raise IndexError("pop from an empty frontier")
        top = self._heap[0]
        last = self._heap.pop()
        del self._pos[top[1]]
        if self._heap:
            self._heap[0] = last
            self._pos[last[1]] = 0
            self._sift_down(0)
        return top

    def __contains__(self, key: object) -> bool:
        return key in self._pos

    def __len__(self) -> int:
        return len(self._heap)


__all__ = ["FrontierProtocol", "HeapFrontier", "IndexedFrontier"]
