from __future__ import annotations

from typing import List, Union

from pydantic import BaseModel, Field

from pysbc.models import MarketSuggestion, Solution, SolveFailure


SolveResponse = Union[Solution, SolveFailure]


class MarketSuggestionsResponse(BaseModel):
    success: bool
    error: str | None = None
    suggestions: List[MarketSuggestion] = Field(default_factory=list)
