"""Domain models shared across the normalizer, builder and API layers."""

from .player import CandidatePlayer, Position, Rarity
from .requirements import NormalizedRequirements, RequirementSpec
from .solution import (
    Formation,
    MarketSuggestion,
    RequirementCheck,
    SearchFilters,
    Solution,
    SolveFailure,
    SolveResult,
    Squad,
)

__all__ = [
    "CandidatePlayer",
    "Position",
    "Rarity",
    "NormalizedRequirements",
    "RequirementSpec",
    "Formation",
    "MarketSuggestion",
    "RequirementCheck",
    "SearchFilters",
    "Solution",
    "SolveFailure",
    "SolveResult",
    "Squad",
]
