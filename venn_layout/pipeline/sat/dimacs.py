"""DIMACS CNF reading and writing for the SAT engine."""

from __future__ import annotations

from dataclasses import dataclass, field

from .models import SatResult
from .solver import SATSolver


class DimacsError(Exception):
    """Raised when DIMACS text cannot be parsed."""


@dataclass
class CNFDocument:
    num_vars: int
    clauses: list[list[int]] = field(default_factory=list)
    comments: list[str] = field(default_factory=list)


def read_dimacs(text: str) -> CNFDocument:
    """Parse DIMACS CNF text.

    Clauses may span lines and several clauses may share a line.  The
    ``p cnf`` header is optional; when it under-reports the variable
    count the largest id seen wins.
    """
    header_vars = 0
    max_var = 0
    clauses: list[list[int]] = []
    comments: list[str] = []
    current: list[int] = []

    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue
        if line.startswith("c"):
            comments.append(line[1:].strip())
            continue
        if line.startswith("%"):
            break   # SATLIB end marker
        if line.startswith("p"):
            parts = line.split()
            if len(parts) != 4 or parts[1] != "cnf":
                raise DimacsError(f"Line {lineno}: malformed header '{line}'")
            try:
                header_vars = int(parts[2])
            except ValueError as exc:
                raise DimacsError(f"Line {lineno}: malformed header '{line}'") from exc
            continue

        for tok in line.split():
            try:
                lit = int(tok)
            except ValueError as exc:
                raise DimacsError(f"Line {lineno}: invalid literal '{tok}'") from exc
            if lit == 0:
                if not current:
                    raise DimacsError(f"Line {lineno}: Empty clause")
                clauses.append(current)
                current = []
            else:
                max_var = max(max_var, abs(lit))
                current.append(lit)

    if current:
        raise DimacsError("Missing terminating 0 on final clause")

    return CNFDocument(
        num_vars=max(header_vars, max_var),
        clauses=clauses,
        comments=comments,
    )


def solver_from_dimacs(doc: CNFDocument) -> SATSolver:
    """Build a solver holding *doc*'s variables and clauses."""
    sat = SATSolver()
    sat.allocate_variables(doc.num_vars)
    for clause in doc.clauses:
        sat.add_clause(clause)
    return sat


def to_dimacs(sat: SATSolver, comments: list[str] | None = None) -> str:
    """Serialize the solver's formula as DIMACS CNF text."""
    lines = [f"c {c}" for c in comments or []]
    lines.append(f"p cnf {sat.num_vars} {len(sat.clauses)}")
    for clause in sat.clauses:
        lines.append(" ".join(str(lit) for lit in (*clause, 0)))
    return "\n".join(lines) + "\n"


def format_result(result: SatResult) -> str:
    """Render a result in SAT-competition output style (``s`` / ``v`` lines)."""
    if not result.ok:
        return "s UNSATISFIABLE\n"
    lits = [v if val else -v for v, val in sorted(result.assignment.items())]
    return "s SATISFIABLE\nv " + " ".join(str(x) for x in (*lits, 0)) + "\n"
