"""Top-level solve interface.

Expose `solve_puzzle(puzzle, algorithm)` that accepts a GridProblem, a CSP, or
a raw record dictionary compatible with `src.problems.parser.parse_problem`.
"""

from typing import Any, Dict, List, Optional, Union

from src.csp.model import CSP
from src.problems.grid import GridLocation, GridProblem
from src.problems.parser import parse_problem
from src.search import a_star_search, breadth_first_search, depth_first_search

ALGORITHMS = ("dfs", "bfs", "astar")


def solve_grid(problem: GridProblem, algorithm: str = "bfs") -> Optional[List[GridLocation]]:
    """Search `problem` and return the path from start to goal, or None."""
    algorithm = algorithm.lower()
    if algorithm == "dfs":
        node = depth_first_search(problem.start, problem.is_goal, problem.successors)
    elif algorithm == "bfs":
        node = breadth_first_search(problem.start, problem.is_goal, problem.successors)
    elif algorithm == "astar":
        node = a_star_search(
            problem.start, problem.is_goal, problem.successors, problem.manhattan_distance
        )
    else:
        raise ValueError(f"Unknown algorithm {algorithm!r}; expected one of {', '.join(ALGORITHMS)}")

    if node is None:
        return None
    return node.to_path()


def solve_puzzle(
    puzzle: Any, algorithm: str = "bfs"
) -> Union[Optional[List[GridLocation]], Optional[Dict[Any, Any]]]:
    """
    Solve a problem and return its solution, or None when there is none.
    Accepts:
      - GridProblem instances (searched with `algorithm`; returns a path)
      - CSP instances (backtracking; returns an assignment)
      - Raw record dictionaries (parsed via `parse_problem`)
    """
    if isinstance(puzzle, dict):
        puzzle = parse_problem(puzzle)

    if isinstance(puzzle, GridProblem):
        return solve_grid(puzzle, algorithm)
    if isinstance(puzzle, CSP):
        return puzzle.backtracking_search()
    raise TypeError("solve_puzzle expects a GridProblem, a CSP or a record dictionary")


__all__ = ["ALGORITHMS", "solve_grid", "solve_puzzle"]
