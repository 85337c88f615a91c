"""Pydantic models for API I/O."""

from .presets import CatalogResponse, FormationResponse, PresetResponse
from .solution import MarketSuggestionsResponse, SolveResponse

__all__ = [
    "CatalogResponse",
    "FormationResponse",
    "PresetResponse",
    "MarketSuggestionsResponse",
    "SolveResponse",
]
