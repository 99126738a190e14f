"""Record parser: convert plain problem dictionaries into GridProblem or CSP instances.

Supports:
- grid records: rows/columns/start/goal plus optional blocked cells
- csp records: variables, domains and a list of built-in constraints
"""

from __future__ import annotations

from typing import Any, Dict, List, Union

from src.csp.model import CSP, PredicateConstraint
from .grid import GridLocation, GridProblem


def record_kind(record: Dict[str, Any]) -> str:
    kind = record.get("kind")
    if kind:
        return str(kind).lower()
    return "grid" if "rows" in record else "csp"


def parse_problem(record: Dict[str, Any]) -> Union[GridProblem, CSP]:
    kind = record_kind(record)
    if kind == "grid":
        return parse_grid(record)
    if kind == "csp":
        return parse_csp(record)
    raise ValueError(f"Unknown problem kind: {kind!r}")


def _as_list(value: Any) -> List[Any]:
    # Parquet round-trips lists as numpy arrays, which have no truth value.
    return [] if value is None else list(value)


def _location(raw: Any) -> GridLocation:
    if isinstance(raw, dict):
        return GridLocation(int(raw["row"]), int(raw["column"]))
    row, column = raw
    return GridLocation(int(row), int(column))


def parse_grid(record: Dict[str, Any]) -> GridProblem:
    rows = int(record["rows"])
    columns = int(record.get("columns", rows))
    start = _location(record.get("start", (0, 0)))
    goal = _location(record.get("goal", (rows - 1, columns - 1)))
    blocked = frozenset(_location(cell) for cell in _as_list(record.get("blocked")))
    return GridProblem(rows=rows, columns=columns, start=start, goal=goal, blocked=blocked)


def _parse_constraint(raw: Dict[str, Any]) -> PredicateConstraint:
    ctype = str(raw.get("type", "")).lower()
    scope: List[Any] = _as_list(raw.get("variables"))

    if ctype in ("all_diff", "alldiff"):
        return PredicateConstraint.all_diff(scope)
    if ctype in ("not_equal", "!="):
        if len(scope) == 1:
            scope = scope * 2
        if len(scope) != 2:
            raise ValueError(f"not_equal takes exactly two variables, got {scope}")
        return PredicateConstraint.not_equal(scope[0], scope[1])
    if ctype in ("equals", "=="):
        if len(scope) != 1 or "value" not in raw:
            raise ValueError("equals takes one variable and a value")
        return PredicateConstraint.equals(scope[0], raw["value"])
    raise ValueError(f"Unknown constraint type: {raw.get('type')!r}")


def parse_csp(record: Dict[str, Any]) -> CSP:
    variables = _as_list(record.get("variables"))
    raw_domains = record.get("domains") or {}
    domains = {var: list(values) for var, values in raw_domains.items() if values is not None}

    csp = CSP(variables, domains)
    for raw in _as_list(record.get("constraints")):
        csp.add_constraint(_parse_constraint(raw))
    return csp
