"""Exhaustive backtracking SAT solver.

Decides a CNF formula by depth-first search over the allocated
variables: pick the lowest-numbered unassigned variable, try True, then
False, and revert it to unassigned when both branches fail.  A branch is
abandoned as soon as some clause has every literal false.  There is no
unit propagation, no clause learning and no restarts, so the search is
complete but exponential in the worst case.

The search keeps an explicit trail of assigned variables rather than
recursing once per variable, so formulas with thousands of selector
variables stay clear of the interpreter recursion limit.  Because the
lowest unassigned variable is always chosen and undo is strictly LIFO,
the assigned set is always the prefix ``1..len(trail)``.

Clause status is tracked incrementally: every clause keeps a count of
its true and false literals, updated on assign and restored on undo.  A
clause is violated when its false count reaches its length and
satisfied while its true count is positive, which is the same verdict a
full re-evaluation of the clause would give at that node.

Example:
    sat = SATSolver()
    x = sat.allocate_variable()
    y = sat.allocate_variable()
    sat.add_clause([x, y])        # x OR y
    sat.add_clause([-x, y])       # NOT x OR y
    result = sat.decide()         # SatResult(status=SAT, assignment={1: True, 2: True})
"""

from __future__ import annotations

import logging
import time
from typing import Iterable, Sequence

from .models import SatResult, SatStatus, SearchStats


log = logging.getLogger(__name__)


class SATSolver:
    """A growing CNF formula over integer variables, decided on demand."""

    def __init__(self) -> None:
        self._clauses: list[tuple[int, ...]] = []
        self._num_vars = 0

    @property
    def num_vars(self) -> int:
        return self._num_vars

    @property
    def clauses(self) -> list[tuple[int, ...]]:
        return list(self._clauses)

    # ── Formula construction ───────────────────────────────────────

    def allocate_variable(self) -> int:
        """Return a fresh variable id (1, 2, 3, ... in allocation order)."""
        self._num_vars += 1
        return self._num_vars

    def allocate_variables(self, count: int) -> list[int]:
        """Reserve a block of *count* consecutive fresh variables."""
        return [self.allocate_variable() for _ in range(count)]

    def add_clause(self, literals: Iterable[int]) -> None:
        """Append the disjunction of *literals* to the formula.

        Duplicate and tautological clauses are accepted as-is.
        """
        clause = tuple(literals)
        for lit in clause:
            if isinstance(lit, bool) or not isinstance(lit, int) or lit == 0:
                raise ValueError(
                    f"Invalid literal {lit!r}: literals must be nonzero integers")
        self._clauses.append(clause)

    # ── Decision ───────────────────────────────────────────────────

    def decide(self) -> SatResult:
        """Search for a satisfying assignment.

        Returns a SAT result whose assignment covers every allocated
        variable (variables the search never needed are reported False),
        or an UNSAT result when every branch fails.  The outcome depends
        only on the clauses and the allocation order.
        """
        t0 = time.perf_counter()
        search = _Search(self._num_vars, self._clauses)
        stats = search.stats

        log.debug("Deciding %d variable(s), %d clause(s)",
                  self._num_vars, len(self._clauses))

        if search.has_empty_clause:
            stats.elapsed_s = time.perf_counter() - t0
            return SatResult(status=SatStatus.UNSAT, stats=stats)

        values = search.values
        trail: list[int] = []

        while not search.all_satisfied:
            var = len(trail) + 1
            if var > self._num_vars:
                # Everything assigned and nothing violated.
                break

            trail.append(var)
            stats.decisions += 1
            if search.assign(var, True):
                continue
            stats.conflicts += 1

            # Backtrack to the deepest variable still holding its True
            # branch and flip it; variables already on False are undone.
            while trail:
                var = trail[-1]
                tried_true = values[var]
                search.unassign(var)
                if tried_true:
                    stats.decisions += 1
                    if search.assign(var, False):
                        break
                    stats.conflicts += 1
                else:
                    trail.pop()
                    stats.backtracks += 1
            else:
                stats.elapsed_s = time.perf_counter() - t0
                log.debug("UNSAT after %d decision(s)", stats.decisions)
                return SatResult(status=SatStatus.UNSAT, stats=stats)

        assignment = {v: bool(values[v]) for v in range(1, self._num_vars + 1)}
        stats.elapsed_s = time.perf_counter() - t0
        log.debug("SAT after %d decision(s), %d backtrack(s)",
                  stats.decisions, stats.backtracks)
        return SatResult(status=SatStatus.SAT, assignment=assignment, stats=stats)


class _Search:
    """Mutable search state: partial assignment plus per-clause counters."""

    def __init__(self, num_vars: int, clauses: Sequence[tuple[int, ...]]) -> None:
        self.values: list[bool | None] = [None] * (num_vars + 1)
        self.stats = SearchStats()

        self._lengths = [len(c) for c in clauses]
        self._n_true = [0] * len(clauses)
        self._n_false = [0] * len(clauses)
        self._n_satisfied = 0
        self._n_clauses = len(clauses)

        # One entry per literal occurrence, so duplicate literals count twice
        # exactly as a literal-by-literal evaluation would see them.
        self._pos: list[list[int]] = [[] for _ in range(num_vars + 1)]
        self._neg: list[list[int]] = [[] for _ in range(num_vars + 1)]
        for ci, clause in enumerate(clauses):
            for lit in clause:
                var = abs(lit)
                if var > num_vars:
                    continue    # never assigned, stays undecided
                (self._pos if lit > 0 else self._neg)[var].append(ci)

        self.has_empty_clause = any(n == 0 for n in self._lengths)

    @property
    def all_satisfied(self) -> bool:
        return self._n_satisfied == self._n_clauses

    def assign(self, var: int, value: bool) -> bool:
        """Set *var* and return False if some clause is now violated."""
        self.values[var] = value
        made_true = self._pos[var] if value else self._neg[var]
        made_false = self._neg[var] if value else self._pos[var]

        for ci in made_true:
            if self._n_true[ci] == 0:
                self._n_satisfied += 1
            self._n_true[ci] += 1

        ok = True
        for ci in made_false:
            self._n_false[ci] += 1
            if self._n_false[ci] == self._lengths[ci]:
                ok = False
        return ok

    def unassign(self, var: int) -> None:
        """Revert *var* to unassigned, restoring every counter it touched."""
        value = self.values[var]
        if value is None:
            return
        made_true = self._pos[var] if value else self._neg[var]
        made_false = self._neg[var] if value else self._pos[var]

        for ci in made_true:
            self._n_true[ci] -= 1
            if self._n_true[ci] == 0:
                self._n_satisfied -= 1
        for ci in made_false:
            self._n_false[ci] -= 1
        self.values[var] = None
