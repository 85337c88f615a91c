"""Requirement normalization, greedy squad building and the solve entry points."""

from .advisory import attach_advisory, check_distribution, check_requirements
from .builder import (
    build_squad,
    compute_chemistry,
    compute_rating,
    estimate_cost,
    fill_slot,
    select_formation,
)
from .market import market_suggestions
from .normalizer import normalize
from .service import quick_solve, solve

__all__ = [
    "attach_advisory",
    "build_squad",
    "check_distribution",
    "check_requirements",
    "compute_chemistry",
    "compute_rating",
    "estimate_cost",
    "fill_slot",
    "market_suggestions",
    "normalize",
    "quick_solve",
    "select_formation",
    "solve",
]
