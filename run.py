"""CLI entrypoint: load problem records, run the solver, and report metrics."""

import argparse
import csv
import json
import os
import re
from pathlib import Path
from typing import Any

from solver import ALGORITHMS, solve_puzzle
from src.problems.loader import load_problems
from src.problems.parser import record_kind
from src.utils.trace import get_tracer, reset_tracer

INPUT_SUFFIXES = [".json", ".jsonl", ".parquet"]


def parse_args():
    parser = argparse.ArgumentParser(description="Solve grid search and CSP problem records")
    parser.add_argument("input", type=Path, help="Path to a problem file or directory of problem files")
    parser.add_argument(
        "--algorithm",
        choices=ALGORITHMS,
        default=os.environ.get("SOLVER_ALGORITHM", "bfs"),
        help="Search algorithm for grid problems (default: $SOLVER_ALGORITHM or bfs).",
    )
    parser.add_argument("--output", type=Path, default=None, help="Optional path to write results CSV")
    parser.add_argument(
        "--trace-dir",
        type=Path,
        default=None,
        help="Optional directory to write one trace CSV per problem.",
    )
    return parser.parse_args()


def _coerce_jsonable(value):
    if isinstance(value, dict):
        return {str(k): _coerce_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_coerce_jsonable(v) for v in value]
    if hasattr(value, "tolist"):
        try:
            return value.tolist()
        except Exception:
            pass
    return value


def format_solution(solution: Any) -> Any:
    """JSON-ready solution: a list of [row, column] pairs, an assignment object, or None."""
    if solution is None:
        return None
    return _coerce_jsonable(solution)


def trace_filename(problem_id: Any) -> str:
    """File name for a problem's trace, kept inside the trace directory."""
    safe = re.sub(r"[^\w.-]+", "_", str(problem_id)).lstrip(".")
    return f"{safe or 'problem'}.csv"


def write_results_csv(results, output_path: Path):
    with open(output_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["id", "kind", "solution", "steps"])

        for r in results:
            writer.writerow([
                r["id"],
                r["kind"],
                json.dumps(r["solution"], ensure_ascii=False, separators=(",", ":")),
                r["steps"],
            ])


def main():
    args = parse_args()
    problems = []
    results = []

    if args.input.is_file():
        problems = load_problems(str(args.input))
    elif args.input.is_dir():
        for file_path in sorted(args.input.iterdir()):
            if file_path.suffix in INPUT_SUFFIXES:
                problems.extend(load_problems(str(file_path)))
    else:
        raise ValueError(f"Input path {args.input} is neither file nor directory")

    for problem in problems:
        reset_tracer()
        tracer = get_tracer()
        problem_id = problem.get("id", "unknown")
        kind = record_kind(problem)

        try:
            solution = solve_puzzle(problem, algorithm=args.algorithm)
            summary = tracer.summary()
            # Expansions measure search effort; assignments measure CSP effort.
            steps = summary["num_expansions"] if kind == "grid" else summary["num_assignments"]
            results.append({
                "id": problem_id,
                "kind": kind,
                "solution": format_solution(solution),
                "steps": steps,
            })
        except Exception as e:
            print(f"ERROR: Failed to solve problem {problem_id}: {e}")
            results.append({
                "id": problem_id,
                "kind": kind,
                "solution": None,
                "steps": -1,
            })

        if args.trace_dir:
            tracer.to_csv(args.trace_dir / trace_filename(problem_id))

    if args.output:
        write_results_csv(results, args.output)
    else:
        print(results)


if __name__ == "__main__":
    main()
