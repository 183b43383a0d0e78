import heapq
from typing import Iterator, List, Optional


class StopQueue:
    """
    Priority queue of car call floors

    Ascending queues (floors above the car) yield the lowest floor first;
    descending queues (floors below the car) yield the highest floor first.
    """
    def __init__(self, descending: bool = False, floors=()):
        self.descending = descending
        self._heap: List[int] = []
        for floor in floors:
            self.push(floor)

    def _key(self, floor: int) -> int:
        return -floor if self.descending else floor

    def push(self, floor: int):
        heapq.heappush(self._heap, self._key(floor))

    def peek(self) -> Optional[int]:
        """Next floor to visit, or None when empty"""
        if not self._heap:
            return None
        return self._key(self._heap[0])

    def pop(self) -> int:
        if not self._heap:
            raise IndexError("pop from an empty StopQueue")
        return self._key(heapq.heappop(self._heap))

    def top_equals(self, floor: int) -> bool:
        return bool(self._heap) and self.peek() == floor

    def pop_if_equal(self, floor: int) -> bool:
        """Remove one entry for this floor if it is next in line"""
        if self.top_equals(floor):
            heapq.heappop(self._heap)
            return True
        return False

    def clear(self):
        self._heap.clear()

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __iter__(self) -> Iterator[int]:
        """Floors in visiting order (does not consume the queue)"""
        return iter(sorted((self._key(k) for k in self._heap), reverse=self.descending))

    def __repr__(self) -> str:
        order = "desc" if self.descending else "asc"
        return f"StopQueue({order}, {list(self)})"
