"""Solver output models: formations, squads, solutions and failures."""

from __future__ import annotations

from typing import Dict, Literal, Tuple, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from pysbc.models.player import CandidatePlayer, Position


class Formation(BaseModel):
    """Formation chosen for one solve, fitted to the requested squad size."""

    name: str
    positions: Tuple[Position, ...]
    chemistry_bonus: int = 0

    model_config = ConfigDict(frozen=True)


class Squad(BaseModel):
    """Assembled players and their aggregate scores."""

    players: Tuple[CandidatePlayer, ...]
    formation: Formation
    total_cost: int = Field(..., ge=0)
    total_chemistry: int = Field(..., ge=0)
    total_rating: int = Field(..., ge=0)

    model_config = ConfigDict(frozen=True)


class RequirementCheck(BaseModel):
    satisfied: bool
    checks: Dict[str, bool]

    model_config = ConfigDict(frozen=True)


class Solution(Squad):
    """Squad plus advisory output handed back to callers."""

    strategy: Tuple[str, ...] = ()
    warnings: Tuple[str, ...] = ()
    checks: Dict[str, bool] = Field(default_factory=dict)
    success: bool


class SolveFailure(BaseModel):
    """Structured error result returned instead of raising."""

    error: str
    error_type: str = "SolverError"
    success: Literal[False] = False

    model_config = ConfigDict(frozen=True)


SolveResult = Union[Solution, SolveFailure]


class SearchFilters(BaseModel):
    league: str
    nation: str
    rating: str
    max_price: int

    model_config = ConfigDict(frozen=True)


class MarketSuggestion(BaseModel):
    """Transfer market search hints for one squad slot."""

    position: Position
    search_filters: SearchFilters
    alternatives: Tuple[str, ...]

    model_config = ConfigDict(frozen=True)
