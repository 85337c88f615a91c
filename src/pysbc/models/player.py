"""Candidate player model shared by the builder, scoring and API layers."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Position(str, Enum):
    GK = "GK"
    LB = "LB"
    CB = "CB"
    RB = "RB"
    LM = "LM"
    CM = "CM"
    CAM = "CAM"
    RM = "RM"
    LW = "LW"
    ST = "ST"
    RW = "RW"
    SUB = "SUB"


class Rarity(str, Enum):
    BRONZE = "bronze"
    SILVER = "silver"
    GOLD = "gold"


class CandidatePlayer(BaseModel):
    """Synthesized player filling one formation slot."""

    position: Position
    rating: int = Field(..., ge=0)
    league: str
    nation: str
    club: str
    rarity: Rarity
    cost: int = Field(0, ge=0)
    chemistry: int = Field(0, ge=0, le=10)

    model_config = ConfigDict(frozen=True)
