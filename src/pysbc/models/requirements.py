"""Requirement payloads accepted by the solver and their normalized form."""

from __future__ import annotations

from typing import Any, List, Optional, Tuple

from pydantic import AliasChoices, BaseModel, Field, ValidationInfo, field_validator
from pydantic.config import ConfigDict

from pysbc.models.player import Rarity


# Starting eleven plus a full bench.
MAX_SQUAD_SIZE = 23


class RequirementSpec(BaseModel):
    """Partially populated challenge requirements as read from a challenge page.

    Keys follow the camelCase names used by the automation layer; snake_case
    spellings are accepted as well. Unknown keys are ignored.
    """

    players: Optional[int] = Field(
        None, gt=0, le=MAX_SQUAD_SIZE, validation_alias=AliasChoices("players", "squad_size")
    )
    chemistry: Optional[int] = Field(
        None, ge=0, le=100, validation_alias=AliasChoices("chemistry", "min_chemistry")
    )
    rating: Optional[int] = Field(None, ge=0, validation_alias=AliasChoices("rating", "min_rating"))
    max_cost: Optional[float] = Field(None, gt=0, validation_alias=AliasChoices("maxCost", "max_cost"))
    leagues: Optional[List[str]] = None
    nations: Optional[List[str]] = None
    clubs: Optional[List[str]] = None
    rarities: Optional[List[Rarity]] = None
    max_same_league: Optional[int] = Field(
        None, ge=0, validation_alias=AliasChoices("maxSameLeague", "max_same_league")
    )
    max_same_nation: Optional[int] = Field(
        None, ge=0, validation_alias=AliasChoices("maxSameNation", "max_same_nation")
    )
    max_same_club: Optional[int] = Field(
        None, ge=0, validation_alias=AliasChoices("maxSameClub", "max_same_club")
    )
    min_different_leagues: Optional[int] = Field(
        None, ge=0, validation_alias=AliasChoices("minDifferentLeagues", "min_different_leagues")
    )
    min_different_nations: Optional[int] = Field(
        None, ge=0, validation_alias=AliasChoices("minDifferentNations", "min_different_nations")
    )
    min_different_clubs: Optional[int] = Field(
        None, ge=0, validation_alias=AliasChoices("minDifferentClubs", "min_different_clubs")
    )
    formation: Optional[str] = None

    model_config = ConfigDict(extra="ignore")

    @field_validator("leagues", "nations", "clubs", "rarities", mode="before")
    @classmethod
    def _coerce_sequence(cls, value: Any, info: ValidationInfo) -> Any:
        if isinstance(value, str):
            value = [value]
        elif isinstance(value, (set, frozenset)):
            value = sorted(value)
        if info.field_name == "rarities" and isinstance(value, (list, tuple)):
            return [item.strip().lower() if isinstance(item, str) else item for item in value]
        return value


class NormalizedRequirements(BaseModel):
    """Fully resolved requirements; every optional field carries a concrete value."""

    squad_size: int = Field(11, gt=0, le=MAX_SQUAD_SIZE)
    min_chemistry: int = Field(100, ge=0, le=100)
    min_rating: int = Field(75, ge=0)
    max_cost: float = Field(50_000, gt=0)
    leagues: Tuple[str, ...] = ()
    nations: Tuple[str, ...] = ()
    clubs: Tuple[str, ...] = ()
    rarities: Tuple[Rarity, ...] = ()
    max_same_league: Optional[int] = None
    max_same_nation: Optional[int] = None
    max_same_club: Optional[int] = None
    min_different_leagues: Optional[int] = None
    min_different_nations: Optional[int] = None
    min_different_clubs: Optional[int] = None
    formation: Optional[str] = None

    model_config = ConfigDict(frozen=True)
