"""Example clients of the search and CSP cores, plus record parsing and loading."""

from .grid import GridLocation, GridProblem
from .parser import parse_csp, parse_grid, parse_problem
from .loader import load_problems

__all__ = [
    "GridLocation",
    "GridProblem",
    "parse_csp",
    "parse_grid",
    "parse_problem",
    "load_problems",
]
