"""Generic graph search: DFS, BFS and A* over caller-supplied state graphs."""

from .node import Node, SearchTree
from .generic_search import (
    a_star_search,
    binary_contains,
    breadth_first_search,
    depth_first_search,
    linear_contains,
)

__all__ = [
    "Node",
    "SearchTree",
    "a_star_search",
    "binary_contains",
    "breadth_first_search",
    "depth_first_search",
    "linear_contains",
]
