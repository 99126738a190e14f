"""CSP core data structures: constraints and the problem container."""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Hashable, Iterable, List, Optional

Assignment = Dict[Hashable, Any]
Predicate = Callable[[Assignment], bool]


class CSPError(ValueError):
    """Raised when a CSP is built or extended with inconsistent input."""


class MissingDomainError(CSPError):
    pass


class UnknownVariableError(CSPError):
    pass


class Constraint:
    """
    Base class for constraints. Subclasses pass the variables they touch to
    __init__ and implement `is_satisfied`, which must return True when some of
    those variables are still unassigned and the assigned ones do not yet
    violate the constraint.
    """

    def __init__(self, variables: Iterable[Hashable]) -> None:
        self.variables: List[Hashable] = list(variables)

    def is_satisfied(self, assignment: Assignment) -> bool:
        raise NotImplementedError


@dataclass
class PredicateConstraint(Constraint):
    """A constraint defined by a scope and a predicate over the partial assignment."""

    description: str
    scope: List[Hashable]
    predicate: Predicate = field(repr=False)

    def __post_init__(self) -> None:
        Constraint.__init__(self, self.scope)

    @classmethod
    def all_diff(cls, variables: Iterable[Hashable]) -> "PredicateConstraint":
        vars_list = list(variables)
        desc = f"AllDiff: {', '.join(str(v) for v in vars_list)}"

        def _predicate(assignment: Assignment) -> bool:
            values = [assignment[var] for var in vars_list if var in assignment]
            # Partial assignments are allowed; only fail on duplicates.
            return len(values) == len(set(values))

        return cls(description=desc, scope=vars_list, predicate=_predicate)

    @classmethod
    def not_equal(cls, first: Hashable, second: Hashable) -> "PredicateConstraint":
        desc = f"{first} != {second}"

        def _predicate(assignment: Assignment) -> bool:
            if first not in assignment or second not in assignment:
                return True
            return assignment[first] != assignment[second]

        scope = [first] if first == second else [first, second]
        return cls(description=desc, scope=scope, predicate=_predicate)

    @classmethod
    def equals(cls, variable: Hashable, value: Any) -> "PredicateConstraint":
        desc = f"{variable} == {value}"

        def _predicate(assignment: Assignment) -> bool:
            if variable not in assignment:
                return True
            return assignment[variable] == value

        return cls(description=desc, scope=[variable], predicate=_predicate)

    def is_satisfied(self, assignment: Assignment) -> bool:
        return self.predicate(assignment)


class CSP:
    """
    Variables in a fixed order, a domain list per variable, and the
    constraints registered against each variable they name.
    """

    def __init__(self, variables: Iterable[Hashable], domains: Dict[Hashable, List[Any]]) -> None:
        self.variables: List[Hashable] = list(variables)
        if len(set(self.variables)) != len(self.variables):
            raise ValueError("Variable names must be unique")

        for variable in self.variables:
            if not domains.get(variable):
                raise MissingDomainError(f"Variable {variable!r} has no domain assigned to it")

        self.domains: Dict[Hashable, List[Any]] = {
            var: list(domains[var]) for var in self.variables
        }
        self.constraints: Dict[Hashable, List[Constraint]] = {
            var: [] for var in self.variables
        }

    def add_constraint(self, constraint: Constraint) -> None:
        """Register `constraint` against every variable it names."""
        unknown = [v for v in constraint.variables if v not in self.constraints]
        if unknown:
            raise UnknownVariableError(
                f"Variable(s) {', '.join(repr(v) for v in unknown)} in constraint are not in CSP"
            )
        for variable in dict.fromkeys(constraint.variables):
            self.constraints[variable].append(constraint)

    def constraints_for(self, variable: Hashable) -> List[Constraint]:
        return self.constraints.get(variable, [])

    def is_consistent(self, variable: Hashable, assignment: Assignment) -> bool:
        """Check the constraints touching `variable` under the partial assignment."""
        for constraint in self.constraints_for(variable):
            if not constraint.is_satisfied(assignment):
                return False
        return True

    def backtracking_search(self, assignment: Optional[Assignment] = None) -> Optional[Assignment]:
        from .solver_core import backtracking_search

        return backtracking_search(self, assignment)
