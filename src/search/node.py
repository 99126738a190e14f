"""Search nodes stored in an arena and addressed by integer index."""

from dataclasses import dataclass, field
from typing import Any, Hashable, List, Optional

State = Hashable


@dataclass(frozen=True)
class Node:
    """
    A discovered state together with how it was reached.

    `parent` is the index of the parent node in `tree`, or None for the root.
    `cost` is the cumulative path cost from the root; `heuristic` is the
    estimate of the remaining cost (both stay 0.0 for DFS/BFS).
    """

    state: Any
    index: int
    parent: Optional[int] = None
    cost: float = 0.0
    heuristic: float = 0.0
    tree: Optional["SearchTree"] = field(default=None, repr=False, compare=False)

    @property
    def priority(self) -> float:
        return self.cost + self.heuristic

    @property
    def depth(self) -> int:
        return len(self.to_node_path()) - 1

    def parent_node(self) -> Optional["Node"]:
        if self.parent is None or self.tree is None:
            return None
        return self.tree[self.parent]

    def to_node_path(self) -> List["Node"]:
        """Nodes from the root to this node, walked iteratively."""
        path = [self]
        current = self.parent_node()
        while current is not None:
            path.append(current)
            current = current.parent_node()
        path.reverse()
        return path

    def to_path(self) -> List[Any]:
        return [node.state for node in self.to_node_path()]

    def total_cost_of_path(self) -> float:
        """Sum of `cost` over every node on the path, root included."""
        return sum(node.cost for node in self.to_node_path())


class SearchTree:
    """Arena owning every node created during one search."""

    def __init__(self) -> None:
        self._nodes: List[Node] = []

    def add(
        self,
        state: Any,
        parent: Optional[Node] = None,
        cost: float = 0.0,
        heuristic: float = 0.0,
    ) -> Node:
        node = Node(
            state=state,
            index=len(self._nodes),
            parent=parent.index if parent is not None else None,
            cost=float(cost),
            heuristic=float(heuristic),
            tree=self,
        )
        self._nodes.append(node)
        return node

    def __getitem__(self, index: int) -> Node:
        return self._nodes[index]

    def __len__(self) -> int:
        return len(self._nodes)
