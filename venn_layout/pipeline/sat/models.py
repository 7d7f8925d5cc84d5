"""SAT engine result dataclasses and clause evaluation helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Sequence


class SatStatus(str, Enum):
    SAT = "SAT"
    UNSAT = "UNSAT"


@dataclass
class SearchStats:
    """Counters collected during one ``decide()`` run."""

    decisions: int = 0          # tentative assignments tried (both branches)
    conflicts: int = 0          # assignments that violated a clause
    backtracks: int = 0         # variables reverted to unassigned
    elapsed_s: float = 0.0


@dataclass
class SatResult:
    """Outcome of deciding a formula.

    ``assignment`` maps every allocated variable id (1..num_vars) to a
    boolean when the formula is satisfiable, and is ``None`` otherwise.
    """

    status: SatStatus
    assignment: dict[int, bool] | None = None
    stats: SearchStats = field(default_factory=SearchStats)

    @property
    def ok(self) -> bool:
        return self.status is SatStatus.SAT

    def value(self, literal: int) -> bool:
        """Truth value of *literal* under the assignment."""
        if self.assignment is None:
            raise ValueError("Unsatisfiable result has no assignment")
        val = self.assignment[abs(literal)]
        return val if literal > 0 else not val

    def true_vars(self) -> list[int]:
        if self.assignment is None:
            return []
        return [v for v, val in self.assignment.items() if val]


def evaluate_clause(
    clause: Sequence[int],
    assignment: Mapping[int, bool | None],
) -> bool | None:
    """Three-valued clause evaluation.

    Returns True if some literal is true, False if every literal is
    false, and None while an unassigned literal could still satisfy it.
    """
    has_unassigned = False
    for lit in clause:
        val = assignment.get(abs(lit))
        if val is None:
            has_unassigned = True
        elif (val if lit > 0 else not val):
            return True
    return None if has_unassigned else False


def check_assignment(
    clauses: Sequence[Sequence[int]],
    assignment: Mapping[int, bool],
) -> list[int]:
    """Return indices of clauses not satisfied by *assignment* (empty = model)."""
    return [
        i for i, clause in enumerate(clauses)
        if evaluate_clause(clause, assignment) is not True
    ]
