"""SAT engine — a generic CNF satisfiability oracle.

Submodules:
  models   Result dataclasses and three-valued clause evaluation.
  solver   Exhaustive backtracking search (SATSolver).
  dimacs   DIMACS CNF reading/writing (read_dimacs, to_dimacs).
"""

from .models import SatStatus, SatResult, SearchStats, evaluate_clause, check_assignment
from .solver import SATSolver
from .dimacs import CNFDocument, DimacsError, read_dimacs, to_dimacs, solver_from_dimacs, format_result

__all__ = [
    # Models
    "SatStatus", "SatResult", "SearchStats", "evaluate_clause", "check_assignment",
    # Solver
    "SATSolver",
    # DIMACS
    "CNFDocument", "DimacsError", "read_dimacs", "to_dimacs",
    "solver_from_dimacs", "format_result",
]
