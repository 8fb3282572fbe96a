"""A priority queue of (priority, id) tasks, smallest first."""

from __future__ import annotations

import heapq
from typing import Iterable, Iterator, Sequence

Task = tuple[int, int]

HEADER = "Thu tu hang doi cong viec: "


class TaskQueue:
    """Tasks ordered by first element, ties broken by the second, smallest first."""

    def __init__(self, tasks: Iterable[Task] = ()) -> None:
        self._heap: list[Task] = []
        for task in tasks:
            self.push(task)

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def push(self, task: Task) -> None:
        """Add a two-element task."""
        first, second = task
        heapq.heappush(self._heap, (first, second))

    def peek(self) -> Task:
        """Return the highest-priority task without removing it."""
        if not self._heap:
            raise IndexError("peek from empty task queue")
        return self._heap[0]

    def pop(self) -> Task:
        """Remove and return the highest-priority task."""
        if not self._heap:
            raise IndexError("pop from empty task queue")
        return heapq.heappop(self._heap)

    def drain(self) -> Iterator[Task]:
        """Pop and yield tasks until the queue is empty."""
        while self._heap:
            yield heapq.heappop(self._heap)


def main(argv: Sequence[str] | None = None) -> int:
    """Queue a few sample tasks and print them in priority order."""
    queue = TaskQueue([(3, 4), (1, 2), (6, 7), (2, 3), (2, 4)])
    for first, second in queue.drain():
        print(HEADER)
        print(f"{first}: {second}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())