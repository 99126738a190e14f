"""Example: solve one problem record with tracing and print a step summary."""

from pathlib import Path
from typing import Any, Optional

from solver import solve_puzzle
from src.problems.parser import parse_problem
from src.problems.grid import GridProblem
from src.utils.trace import get_tracer, reset_tracer


def solve_and_trace(record: dict, algorithm: str = "astar", output_trace_csv: Optional[Path] = None) -> Any:
    """
    Solve a problem record and log all steps to a trace file.

    Args:
        record: Raw problem dictionary (grid or csp)
        algorithm: Search algorithm for grid problems
        output_trace_csv: Path to write trace CSV (optional)

    Returns:
        The path or assignment found, or None
    """
    reset_tracer()
    tracer = get_tracer()

    problem = parse_problem(record)
    solution = solve_puzzle(problem, algorithm=algorithm)

    summary = tracer.summary()
    print(f"\n{'='*50}")
    print("Solver Summary:")
    print(f"  Total steps: {summary['total_steps']}")
    print(f"  Expansions: {summary['num_expansions']}")
    print(f"  Assignments: {summary['num_assignments']}")
    print(f"  Backtracks: {summary['num_backtracks']}")
    print(f"  Time: {summary['elapsed_time_seconds']:.3f}s")
    print(f"  Actions: {summary['action_counts']}")
    print(f"{'='*50}\n")

    if isinstance(problem, GridProblem) and solution:
        print(problem.render(solution))

    if output_trace_csv:
        tracer.to_csv(output_trace_csv)

    return solution


if __name__ == "__main__":
    example_maze = {
        "id": "example",
        "rows": 6,
        "columns": 8,
        "start": [0, 0],
        "goal": [5, 7],
        "blocked": [[1, 1], [1, 2], [1, 3], [2, 5], [3, 5], [4, 5], [4, 2], [4, 3]],
    }

    trace_output = Path("traces/example_trace.csv")
    solution = solve_and_trace(example_maze, "astar", trace_output)
    print(f"Solution: {solution}")
