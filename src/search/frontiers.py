"""Frontier containers used by the generic searches.

All three share `push`, `pop` and `len()`, so a search loop can run against
any of them: `LIFOStack` for depth-first, `FIFOQueue` for breadth-first and
`PriorityQueue` for A*.
"""

import heapq
from collections import deque
from typing import Any, Callable, List, Tuple


class LIFOStack:
    """Pops the most recently pushed node."""

    def __init__(self):
        self.items: List[Any] = []

    def push(self, x: Any) -> None:
        self.items.append(x)

    def pop(self) -> Any:
        return self.items.pop()

    def __len__(self) -> int:
        return len(self.items)


class FIFOQueue:
    """Pops nodes in the order they were pushed."""

    def __init__(self):
        self.items = deque()

    def push(self, x: Any) -> None:
        self.items.append(x)

    def pop(self) -> Any:
        return self.items.popleft()

    def __len__(self) -> int:
        return len(self.items)


class PriorityQueue:
    """
    Pops the node with the smallest `key(node)`, e.g. a node's cost plus
    heuristic for A*.

    Heap entries are `(key, sequence, node)`. The sequence number increases
    with every push, so nodes with equal keys pop in the order they were
    pushed and the heap never compares two nodes directly.
    """

    def __init__(self, key: Callable[[Any], float]):
        self.key = key
        self._heap: List[Tuple[float, int, Any]] = []
        self._sequence = 0

    def push(self, x: Any) -> None:
        self._sequence += 1
        heapq.heappush(self._heap, (self.key(x), self._sequence, x))

    def pop(self) -> Any:
        return heapq.heappop(self._heap)[2]

    def __len__(self) -> int:
        return len(self._heap)
