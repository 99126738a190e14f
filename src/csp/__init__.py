"""CSP models and the backtracking solver core."""

from .model import (
    CSP,
    Constraint,
    CSPError,
    MissingDomainError,
    PredicateConstraint,
    UnknownVariableError,
)
from .solver_core import backtracking_search, is_solution

__all__ = [
    "CSP",
    "Constraint",
    "CSPError",
    "MissingDomainError",
    "PredicateConstraint",
    "UnknownVariableError",
    "backtracking_search",
    "is_solution",
]
