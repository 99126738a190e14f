"""Unit tests for the CSP model and backtracking solver core."""

import pytest

from src.csp import (
    CSP,
    Constraint,
    MissingDomainError,
    PredicateConstraint,
    UnknownVariableError,
    backtracking_search,
    is_solution,
)
from src.csp import solver_core


class MapColouringConstraint(Constraint):
    def __init__(self, place1, place2):
        super().__init__([place1, place2])
        self.place1 = place1
        self.place2 = place2

    def is_satisfied(self, assignment):
        if self.place1 not in assignment or self.place2 not in assignment:
            return True
        return assignment[self.place1] != assignment[self.place2]


class QueensConstraint(Constraint):
    def __init__(self, columns):
        super().__init__(columns)
        self.columns = columns

    def is_satisfied(self, assignment):
        for q1c, q1r in assignment.items():
            for q2c in range(q1c + 1, len(self.columns) + 1):
                if q2c in assignment:
                    q2r = assignment[q2c]
                    if q1r == q2r:
                        return False
                    if abs(q1r - q2r) == abs(q1c - q2c):
                        return False
        return True


def _make_not_equal_csp(domain_a, domain_b):
    csp = CSP(["A", "B"], {"A": domain_a, "B": domain_b})
    csp.add_constraint(PredicateConstraint.not_equal("A", "B"))
    return csp


def test_two_variables_must_differ():
    csp = _make_not_equal_csp([1, 2], [1, 2])
    solution = csp.backtracking_search()

    assert solution is not None
    assert set(solution) == {"A", "B"}
    assert solution["A"] != solution["B"]


def test_variable_unequal_to_itself_has_no_solution():
    csp = CSP(["A"], {"A": [1]})
    csp.add_constraint(PredicateConstraint.not_equal("A", "A"))
    assert csp.backtracking_search() is None


def test_shared_single_value_domain_is_unsolvable():
    csp = _make_not_equal_csp([1], [1])
    assert backtracking_search(csp) is None


def test_search_backtracks_to_next_domain_value():
    # A=1 is locally consistent but leaves B without a value.
    csp = _make_not_equal_csp([1, 2], [1])
    assert csp.backtracking_search() == {"A": 2, "B": 1}


def test_backtracking_across_several_levels():
    csp = CSP(["A", "B", "C"], {"A": [1, 2, 3], "B": [1, 2, 3], "C": [1]})
    csp.add_constraint(PredicateConstraint.all_diff(["A", "B", "C"]))
    solution = csp.backtracking_search()

    assert solution["C"] == 1
    assert {solution["A"], solution["B"]} == {2, 3}
    assert is_solution(csp, solution)


def test_missing_domain_fails_construction():
    with pytest.raises(MissingDomainError):
        CSP(["A", "B"], {"A": [1]})


def test_empty_domain_fails_construction():
    with pytest.raises(MissingDomainError):
        CSP(["A"], {"A": []})


def test_duplicate_variables_fail_construction():
    with pytest.raises(ValueError):
        CSP(["A", "A"], {"A": [1]})


def test_unknown_variable_constraint_is_rejected_without_mutation():
    csp = CSP(["A", "B"], {"A": [1, 2], "B": [1, 2]})
    with pytest.raises(UnknownVariableError):
        csp.add_constraint(PredicateConstraint.not_equal("A", "Z"))

    assert csp.constraints_for("A") == []
    assert csp.constraints_for("B") == []


def test_constraint_registered_against_each_named_variable():
    csp = CSP(["A", "B", "C"], {v: [1, 2] for v in "ABC"})
    constraint = PredicateConstraint.not_equal("A", "C")
    csp.add_constraint(constraint)

    assert csp.constraints_for("A") == [constraint]
    assert csp.constraints_for("B") == []
    assert csp.constraints_for("C") == [constraint]


def test_first_unassigned_variable_follows_insertion_order():
    csp = CSP(["Z", "A", "M"], {v: [1] for v in "ZAM"})
    assert solver_core._select_unassigned_variable(csp, {}) == "Z"
    assert solver_core._select_unassigned_variable(csp, {"Z": 1}) == "A"
    assert solver_core._select_unassigned_variable(csp, {"Z": 1, "A": 1}) == "M"


def test_none_is_a_usable_variable_name():
    csp = CSP([None, "B"], {None: [1], "B": [2]})
    csp.add_constraint(PredicateConstraint.not_equal(None, "B"))

    assert csp.backtracking_search() == {None: 1, "B": 2}


def test_seeded_assignment_is_extended():
    csp = _make_not_equal_csp([1, 2], [1, 2])
    assert csp.backtracking_search({"A": 2}) == {"A": 2, "B": 1}


def test_australian_map_colouring():
    regions = [
        "Western Australia",
        "Northern Territory",
        "South Australia",
        "Queensland",
        "New South Wales",
        "Victoria",
        "Tasmania",
    ]
    csp = CSP(regions, {r: ["red", "green", "blue"] for r in regions})
    borders = [
        ("Western Australia", "Northern Territory"),
        ("Western Australia", "South Australia"),
        ("South Australia", "Northern Territory"),
        ("Queensland", "Northern Territory"),
        ("Queensland", "South Australia"),
        ("Queensland", "New South Wales"),
        ("New South Wales", "South Australia"),
        ("Victoria", "South Australia"),
        ("Victoria", "New South Wales"),
        ("Victoria", "Tasmania"),
    ]
    constraints = [MapColouringConstraint(a, b) for a, b in borders]
    for constraint in constraints:
        csp.add_constraint(constraint)

    solution = csp.backtracking_search()
    assert solution is not None
    assert set(solution) == set(regions)
    assert all(c.is_satisfied(solution) for c in constraints)


def test_eight_queens():
    columns = list(range(1, 9))
    csp = CSP(columns, {c: list(range(1, 9)) for c in columns})
    constraint = QueensConstraint(columns)
    csp.add_constraint(constraint)

    solution = csp.backtracking_search()
    assert solution is not None
    assert len(solution) == 8
    assert constraint.is_satisfied(solution)
    assert sorted(solution.values()) == columns


def test_equals_and_all_diff_are_vacuous_on_partial_assignments():
    all_diff = PredicateConstraint.all_diff(["A", "B", "C"])
    equals = PredicateConstraint.equals("A", 3)

    assert all_diff.is_satisfied({"A": 1})
    assert not all_diff.is_satisfied({"A": 1, "C": 1})
    assert equals.is_satisfied({"B": 1})
    assert not equals.is_satisfied({"A": 1})
    assert all_diff.variables == ["A", "B", "C"]
