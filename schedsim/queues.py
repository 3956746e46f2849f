from __future__ import annotations

import heapq
from collections import deque
from typing import Callable, Deque, Generic, Iterable, List, Optional, Tuple, TypeVar

from .models import Process

T = TypeVar("T")


class ArrivalQueue:
    """
    Processes not yet admitted, stably ordered by arrival time.

    Each entry keeps the index of the process in the caller's list so that
    schedulers can tie-break on original ordering.
    """

    def __init__(self, processes: Iterable[Process]) -> None:
        indexed = sorted(enumerate(processes), key=lambda item: item[1].arrival_time)
        self._pending: Deque[Tuple[int, Process]] = deque(indexed)

    def __len__(self) -> int:
        return len(self._pending)

    def admit(self, now: int) -> List[Tuple[int, Process]]:
        arrived: List[Tuple[int, Process]] = []
        while self._pending and self._pending[0][1].arrival_time <= now:
            arrived.append(self._pending.popleft())
        return arrived

    def next_arrival(self) -> Optional[int]:
        return self._pending[0][1].arrival_time if self._pending else None


class ReadyQueue(Generic[T]):
    """FIFO ready queue."""

    def __init__(self) -> None:
        self._items: Deque[T] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def push(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> T:
        return self._items.popleft()


class PriorityReadyQueue(Generic[T]):
    """
    Min-heap ready queue ordered by ``key(item)``.

    ``key`` is evaluated on push, so items whose ordering changes while they
    are outside the queue (remaining burst) are keyed by their current value.
    Equal keys pop in the order given by ``order``, falling back to push order.
    """

    def __init__(self, key: Callable[[T], Tuple], order: Optional[Callable[[T], int]] = None) -> None:
        self._key = key
        self._order = order
        self._heap: List[Tuple[Tuple, int, int, T]] = []
        self._pushes = 0

    def __len__(self) -> int:
        return len(self._heap)

    def push(self, item: T) -> None:
        order = self._order(item) if self._order is not None else self._pushes
        heapq.heappush(self._heap, (self._key(item), order, self._pushes, item))
        self._pushes += 1

    def pop(self) -> T:
        return heapq.heappop(self._heap)[-1]

    def peek(self) -> T:
        return self._heap[0][-1]
