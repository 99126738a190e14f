"""Chronological backtracking search for CSP instances."""

from typing import Any, Hashable, Optional

from .model import CSP, Assignment
from src.utils.trace import Tracer, get_tracer


def backtracking_search(csp: CSP, assignment: Optional[Assignment] = None) -> Optional[Assignment]:
    """
    Solve a CSP instance by chronological backtracking.
    Variables are tried in the CSP's order and values in domain order.
    Returns a complete assignment, or None if the instance is unsatisfiable.
    """
    tracer = get_tracer()
    return _backtrack(csp, dict(assignment or {}), tracer)


def _backtrack(csp: CSP, assignment: Assignment, tracer: Tracer) -> Optional[Assignment]:
    if all(variable in assignment for variable in csp.variables):
        tracer.log_solution_found(assignment_size=len(assignment))
        return assignment

    var = _select_unassigned_variable(csp, assignment)

    for value in csp.domains[var]:
        local_assignment = dict(assignment)
        local_assignment[var] = value
        if not csp.is_consistent(var, local_assignment):
            continue

        tracer.log_assign(variable=var, value=value, assignment_size=len(local_assignment))
        result = _backtrack(csp, local_assignment, tracer)
        if result is not None:
            return result

    tracer.log_backtrack(var)
    return None


def _select_unassigned_variable(csp: CSP, assignment: Assignment) -> Hashable:
    # Callers check completeness first; None is a legal variable name.
    return next(variable for variable in csp.variables if variable not in assignment)


def is_solution(csp: CSP, assignment: Any) -> bool:
    """True if `assignment` covers every variable and satisfies every constraint."""
    if not isinstance(assignment, dict) or set(assignment) != set(csp.variables):
        return False
    return all(csp.is_consistent(var, assignment) for var in csp.variables)
