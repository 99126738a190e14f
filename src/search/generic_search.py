"""Depth-first, breadth-first and A* search over a caller-supplied state graph.

Every search takes an initial state, a goal predicate and a successor
function. States must be hashable. The returned `Node` is the goal node; walk
it with `Node.to_path()` to recover the route. None means the goal is not
reachable. Over an infinite state space without a reachable goal the searches
do not terminate, so bounding them is up to the caller.
"""

from typing import Any, Callable, Dict, Iterable, Optional, Sequence

from .frontiers import FIFOQueue, LIFOStack, PriorityQueue
from .node import Node, SearchTree, State
from src.utils.trace import get_tracer

GoalTest = Callable[[Any], bool]
Successors = Callable[[Any], Iterable[Any]]
Heuristic = Callable[[Any], float]


def linear_contains(items: Iterable[Any], key: Any) -> bool:
    for item in items:
        if item == key:
            return True
    return False


def binary_contains(items: Sequence[Any], key: Any) -> bool:
    """Binary search over `items`, which must already be sorted ascending."""
    if any(items[i] > items[i + 1] for i in range(len(items) - 1)):
        raise ValueError("container must be sorted first")

    low, high = 0, len(items) - 1
    while low <= high:
        middle = (low + high) // 2
        if items[middle] < key:
            low = middle + 1
        elif items[middle] > key:
            high = middle - 1
        else:
            return True
    return False


def depth_first_search(initial: State, goal_test: GoalTest, successors: Successors) -> Optional[Node]:
    """
    Expand the most recently discovered state first.
    A state is discovered at most once, so the path found is not necessarily the shortest.
    """
    return _uninformed_search("DFS", LIFOStack(), initial, goal_test, successors)


def breadth_first_search(initial: State, goal_test: GoalTest, successors: Successors) -> Optional[Node]:
    """
    Expand states in discovery order.
    The path found has the fewest edges of any path to a goal.
    """
    return _uninformed_search("BFS", FIFOQueue(), initial, goal_test, successors)


def _uninformed_search(
    name: str,
    frontier,
    initial: State,
    goal_test: GoalTest,
    successors: Successors,
) -> Optional[Node]:
    tracer = get_tracer()
    tree = SearchTree()
    frontier.push(tree.add(initial))
    explored = {initial}

    while frontier:
        node = frontier.pop()
        tracer.log_expand(name, node.state, frontier_size=len(frontier))
        if goal_test(node.state):
            tracer.log_goal_found(name, node.state, path_length=node.depth)
            return node

        for succ in successors(node.state):
            # First discovery wins; a state is never pushed twice.
            if succ in explored:
                continue
            explored.add(succ)
            frontier.push(tree.add(succ, parent=node))

    return None


def a_star_search(
    initial: State,
    goal_test: GoalTest,
    successors: Successors,
    heuristic: Heuristic,
) -> Optional[Node]:
    """
    Expand states in order of path cost plus heuristic estimate.

    Every edge costs 1. A state already reached is enqueued again only when a
    strictly cheaper path to it turns up. With an admissible heuristic the
    returned path is the cheapest; otherwise it is still a valid path.
    """
    tracer = get_tracer()
    tree = SearchTree()
    frontier = PriorityQueue(key=lambda n: n.priority)
    frontier.push(tree.add(initial, cost=0.0, heuristic=heuristic(initial)))
    best_cost: Dict[Any, float] = {initial: 0.0}

    while frontier:
        node = frontier.pop()
        if node.cost > best_cost[node.state]:
            # Superseded by a cheaper path pushed later.
            continue

        tracer.log_expand("A*", node.state, frontier_size=len(frontier))
        if goal_test(node.state):
            tracer.log_goal_found("A*", node.state, path_length=node.depth)
            return node

        for succ in successors(node.state):
            new_cost = node.cost + 1.0
            if succ in best_cost and not new_cost < best_cost[succ]:
                continue
            best_cost[succ] = new_cost
            frontier.push(tree.add(succ, parent=node, cost=new_cost, heuristic=heuristic(succ)))

    return None
