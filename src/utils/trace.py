"""Tracing module: records search and CSP solver steps and writes them to CSV."""

import csv
from dataclasses import dataclass, asdict
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional


@dataclass
class TraceStep:
    """A single step in the solving process."""

    timestamp: float
    step_number: int
    action_type: str  # 'expand', 'goal_found', 'assign', 'backtrack', 'solution_found'
    algorithm: Optional[str] = None
    state: Optional[str] = None
    variable: Optional[str] = None
    value: Optional[Any] = None
    frontier_size: Optional[int] = None
    assignment_size: Optional[int] = None
    path_length: Optional[int] = None
    reason: Optional[str] = None


class Tracer:
    """Records solver steps for logging and analysis."""

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self.steps: List[TraceStep] = []
        self.start_time = datetime.now().timestamp()
        self.step_counter = 0

    def _get_timestamp(self) -> float:
        """Get elapsed time in seconds since tracer creation."""
        return datetime.now().timestamp() - self.start_time

    def _record(self, action_type: str, **fields: Any) -> None:
        self.step_counter += 1
        self.steps.append(TraceStep(
            timestamp=self._get_timestamp(),
            step_number=self.step_counter,
            action_type=action_type,
            **fields,
        ))

    def log_expand(self, algorithm: str, state: Any, frontier_size: int):
        """Log a node popped from the frontier for expansion."""
        if not self.enabled:
            return
        self._record('expand', algorithm=algorithm, state=repr(state), frontier_size=frontier_size)

    def log_goal_found(self, algorithm: str, state: Any, path_length: int):
        """Log a search reaching a goal state."""
        if not self.enabled:
            return
        self._record('goal_found', algorithm=algorithm, state=repr(state), path_length=path_length)

    def log_assign(self, variable: Any, value: Any, assignment_size: int):
        """Log a variable assignment."""
        if not self.enabled:
            return
        self._record('assign', variable=str(variable), value=str(value), assignment_size=assignment_size)

    def log_backtrack(self, variable: Any, reason: str = "No valid values"):
        """Log a backtrack event."""
        if not self.enabled:
            return
        self._record('backtrack', variable=str(variable), reason=reason)

    def log_solution_found(self, assignment_size: int):
        """Log when a solution is found."""
        if not self.enabled:
            return
        self._record('solution_found', assignment_size=assignment_size)

    def to_csv(self, filepath: Path) -> None:
        """Write trace to CSV file."""
        if not self.steps:
            print("No trace steps to write")
            return

        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        fieldnames = [
            'timestamp', 'step_number', 'action_type', 'algorithm', 'state', 'variable',
            'value', 'frontier_size', 'assignment_size', 'path_length', 'reason'
        ]

        with open(filepath, 'w', newline='', encoding='utf-8') as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()
            for step in self.steps:
                writer.writerow(asdict(step))

        print(f"Trace written to {filepath} ({len(self.steps)} steps)")

    def summary(self) -> Dict[str, Any]:
        """Get a summary of the trace."""
        action_counts = {}
        for step in self.steps:
            action_counts[step.action_type] = action_counts.get(step.action_type, 0) + 1

        return {
            'total_steps': len(self.steps),
            'elapsed_time_seconds': self._get_timestamp(),
            'action_counts': action_counts,
            'num_expansions': action_counts.get('expand', 0),
            'num_assignments': action_counts.get('assign', 0),
            'num_backtracks': action_counts.get('backtrack', 0),
        }


# Global tracer instance
_global_tracer: Optional[Tracer] = None


def get_tracer() -> Tracer:
    """Get or create the global tracer."""
    global _global_tracer
    if _global_tracer is None:
        _global_tracer = Tracer(enabled=True)
    return _global_tracer


def reset_tracer() -> None:
    """Reset the global tracer."""
    global _global_tracer
    _global_tracer = None


def enable_tracing(enabled: bool = True) -> None:
    """Enable or disable tracing."""
    get_tracer().enabled = enabled
