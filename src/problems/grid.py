"""4-neighbour grid pathfinding, a client of the generic search functions."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, List, NamedTuple, Optional


class GridLocation(NamedTuple):
    row: int
    column: int


_MOVES = ((-1, 0), (1, 0), (0, -1), (0, 1))

_CELLS = {
    "empty": " ",
    "blocked": "X",
    "start": "S",
    "goal": "G",
    "path": "*",
}


@dataclass(frozen=True)
class GridProblem:
    """
    Grid of `rows` x `columns` cells with unit-cost moves Up/Down/Left/Right.

    - State: GridLocation(row, column)
    - successors(s): in-bounds, unblocked neighbours
    - is_goal(s): s == goal
    - manhattan_distance(s): admissible heuristic for 4-neighbour moves
    """

    rows: int
    columns: int
    start: GridLocation
    goal: GridLocation
    blocked: FrozenSet[GridLocation] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        for name in ("start", "goal"):
            loc = getattr(self, name)
            if not self.in_bounds(loc):
                raise ValueError(f"{name} {tuple(loc)} is outside a {self.rows}x{self.columns} grid")
            if loc in self.blocked:
                raise ValueError(f"{name} {tuple(loc)} is blocked")

    def in_bounds(self, loc: GridLocation) -> bool:
        return 0 <= loc.row < self.rows and 0 <= loc.column < self.columns

    def is_goal(self, loc: GridLocation) -> bool:
        return loc == self.goal

    def successors(self, loc: GridLocation) -> List[GridLocation]:
        result = []
        for dr, dc in _MOVES:
            nxt = GridLocation(loc.row + dr, loc.column + dc)
            if self.in_bounds(nxt) and nxt not in self.blocked:
                result.append(nxt)
        return result

    def manhattan_distance(self, loc: GridLocation) -> float:
        return float(abs(loc.row - self.goal.row) + abs(loc.column - self.goal.column))

    def euclidean_distance(self, loc: GridLocation) -> float:
        return math.hypot(loc.row - self.goal.row, loc.column - self.goal.column)

    def render(self, path: Optional[Iterable[GridLocation]] = None) -> str:
        """Text picture of the grid, one bracketed cell per location."""
        on_path = set(path or ())
        lines = []
        for r in range(self.rows):
            cells = []
            for c in range(self.columns):
                loc = GridLocation(r, c)
                if loc == self.start:
                    kind = "start"
                elif loc == self.goal:
                    kind = "goal"
                elif loc in self.blocked:
                    kind = "blocked"
                elif loc in on_path:
                    kind = "path"
                else:
                    kind = "empty"
                cells.append(f"[{_CELLS[kind]}]")
            lines.append("".join(cells))
        return "\n".join(lines)
