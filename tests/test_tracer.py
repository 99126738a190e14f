"""Tests that the tracer captures search and CSP solver steps."""

import csv

from solver import solve_puzzle
from src.utils.trace import Tracer, enable_tracing, get_tracer, reset_tracer


def test_tracer_captures_logged_steps(tmp_path):
    tracer = Tracer()
    tracer.log_expand("BFS", (0, 0), frontier_size=0)
    tracer.log_goal_found("BFS", (2, 2), path_length=4)
    tracer.log_assign("A", 1, assignment_size=1)
    tracer.log_backtrack("B", reason="No valid values")
    tracer.log_solution_found(assignment_size=2)

    summary = tracer.summary()
    assert summary["total_steps"] == 5
    assert summary["num_expansions"] == 1
    assert summary["num_assignments"] == 1
    assert summary["num_backtracks"] == 1
    assert [s.step_number for s in tracer.steps] == [1, 2, 3, 4, 5]

    output_path = tmp_path / "trace" / "steps.csv"
    tracer.to_csv(output_path)
    with open(output_path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [r["action_type"] for r in rows] == ["expand", "goal_found", "assign", "backtrack", "solution_found"]
    assert rows[0]["state"] == "(0, 0)"


def test_disabled_tracer_records_nothing(tmp_path, capsys):
    tracer = Tracer(enabled=False)
    tracer.log_expand("DFS", "s", frontier_size=1)
    tracer.to_csv(tmp_path / "empty.csv")

    assert tracer.steps == []
    assert not (tmp_path / "empty.csv").exists()
    assert "No trace steps" in capsys.readouterr().out


def test_search_reports_expansions_to_global_tracer():
    reset_tracer()
    solve_puzzle({"rows": 3, "columns": 3}, algorithm="bfs")

    tracer = get_tracer()
    actions = [s.action_type for s in tracer.steps]
    assert actions[-1] == "goal_found"
    assert tracer.steps[-1].path_length == 4
    assert all(s.algorithm == "BFS" for s in tracer.steps)


def test_csp_reports_assignments_and_backtracks():
    reset_tracer()
    record = {
        "variables": ["A", "B"],
        "domains": {"A": [1, 2], "B": [1]},
        "constraints": [{"type": "not_equal", "variables": ["A", "B"]}],
    }
    assert solve_puzzle(record) == {"A": 2, "B": 1}

    summary = get_tracer().summary()
    assert summary["num_assignments"] == 3
    assert summary["num_backtracks"] == 1
    assert summary["action_counts"]["solution_found"] == 1


def test_enable_tracing_toggles_global_tracer():
    reset_tracer()
    enable_tracing(False)
    solve_puzzle({"rows": 2, "columns": 2}, algorithm="dfs")
    assert get_tracer().steps == []

    enable_tracing(True)
    solve_puzzle({"rows": 2, "columns": 2}, algorithm="dfs")
    assert get_tracer().steps


def test_solve_and_trace_example_writes_csv(tmp_path, capsys):
    from trace_example import solve_and_trace

    output = tmp_path / "maze.csv"
    path = solve_and_trace({"rows": 2, "columns": 3, "blocked": [[1, 0]]}, "astar", output)

    assert path[-1] == (1, 2)
    assert output.exists()
    out = capsys.readouterr().out
    assert "Expansions:" in out
    assert "[S]" in out
