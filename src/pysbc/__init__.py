"""Greedy squad builder for Squad Building Challenge requirements."""

from pysbc.errors import InvalidRequirementsError, SolverError, UnknownPresetError
from pysbc.models import Solution, SolveFailure, SolveResult
from pysbc.solver import market_suggestions, quick_solve, solve

__all__ = [
    "InvalidRequirementsError",
    "SolverError",
    "UnknownPresetError",
    "Solution",
    "SolveFailure",
    "SolveResult",
    "market_suggestions",
    "quick_solve",
    "solve",
]
