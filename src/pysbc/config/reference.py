"""Static reference tables used to synthesize candidate players."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Dict, Iterable, Mapping, Tuple

from pysbc.models.player import Position, Rarity


logger = logging.getLogger(__name__)

_DEFAULT_FORMATION_ENV = "PYSBC_DEFAULT_FORMATION"
_RATING_FLOOR_MARGIN_ENV = "PYSBC_RATING_FLOOR_MARGIN"

_DEFAULT_FORMATION = "4-3-3"
_RATING_FLOOR_MARGIN_DEFAULT = 5


@dataclass(frozen=True)
class RarityTier:
    rarity: Rarity
    min_rating: int
    max_rating: int
    base_cost: int


@dataclass(frozen=True)
class FormationTemplate:
    name: str
    positions: Tuple[Position, ...]
    chemistry_bonus: int


_FORMATIONS: Dict[str, FormationTemplate] = {
    "4-3-3": FormationTemplate(
        name="4-3-3",
        positions=(
            Position.GK, Position.LB, Position.CB, Position.CB, Position.RB,
            Position.CM, Position.CM, Position.CM,
            Position.LW, Position.ST, Position.RW,
        ),
        chemistry_bonus=5,
    ),
    "4-4-2": FormationTemplate(
        name="4-4-2",
        positions=(
            Position.GK, Position.LB, Position.CB, Position.CB, Position.RB,
            Position.LM, Position.CM, Position.CM, Position.RM,
            Position.ST, Position.ST,
        ),
        chemistry_bonus=3,
    ),
    "3-5-2": FormationTemplate(
        name="3-5-2",
        positions=(
            Position.GK, Position.CB, Position.CB, Position.CB,
            Position.LM, Position.CM, Position.CM, Position.CM, Position.RM,
            Position.ST, Position.ST,
        ),
        chemistry_bonus=4,
    ),
}

# Gold starts at 75 here while rarity inference switches to gold at 85; the two
# thresholds are independent.
_RARITY_TIERS: Dict[Rarity, RarityTier] = {
    Rarity.BRONZE: RarityTier(Rarity.BRONZE, min_rating=45, max_rating=64, base_cost=150),
    Rarity.SILVER: RarityTier(Rarity.SILVER, min_rating=65, max_rating=74, base_cost=400),
    Rarity.GOLD: RarityTier(Rarity.GOLD, min_rating=75, max_rating=99, base_cost=800),
}

_POSITION_COST_MULTIPLIERS: Dict[Position, float] = {
    Position.GK: 1.2,
    Position.ST: 1.3,
    Position.CAM: 1.2,
    Position.CM: 1.1,
    Position.CB: 1.0,
    Position.LB: 1.0,
    Position.RB: 1.0,
}


@dataclass(frozen=True)
class ReferenceData:
    """Read-only lookup tables handed to the squad builder."""

    leagues: Tuple[str, ...] = ("Premier League", "La Liga", "Serie A", "Bundesliga", "Ligue 1")
    nations: Tuple[str, ...] = ("England", "Spain", "Italy", "Germany", "France", "Brazil", "Argentina")
    default_club: str = "Manchester City"
    default_formation: str = _DEFAULT_FORMATION
    rating_floor_margin: int = _RATING_FLOOR_MARGIN_DEFAULT
    rarity_tiers: Mapping[Rarity, RarityTier] = field(default_factory=lambda: dict(_RARITY_TIERS))
    position_cost_multipliers: Mapping[Position, float] = field(
        default_factory=lambda: dict(_POSITION_COST_MULTIPLIERS)
    )

    @property
    def fallback_league(self) -> str:
        return self.leagues[0]

    @property
    def fallback_nation(self) -> str:
        return self.nations[0]

    def tier(self, rarity: Rarity) -> RarityTier:
        """Return the tier for ``rarity``, treating unknown values as bronze."""

        return self.rarity_tiers.get(rarity, self.rarity_tiers[Rarity.BRONZE])

    def cost_multiplier(self, position: Position) -> float:
        return self.position_cost_multipliers.get(position, 1.0)


def iter_formations() -> Iterable[FormationTemplate]:
    """Return an iterator of all catalogued formations."""

    return _FORMATIONS.values()


def get_formation(name: str) -> FormationTemplate:
    """Fetch a formation template by name, raising KeyError if missing."""

    key = name.strip()
    if key not in _FORMATIONS:
        raise KeyError(f"No formation configured named {name!r}")
    return _FORMATIONS[key]


def _env_int(name: str, default: int, *, min_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


def _env_formation(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    if raw.strip() not in _FORMATIONS:
        logger.warning("Unknown formation for %s: %s; using default %s", name, raw, default)
        return default
    return raw.strip()


def load_reference() -> ReferenceData:
    """Build reference data, applying environment overrides."""

    reference = ReferenceData(
        default_formation=_env_formation(_DEFAULT_FORMATION_ENV, _DEFAULT_FORMATION),
        rating_floor_margin=_env_int(
            _RATING_FLOOR_MARGIN_ENV, _RATING_FLOOR_MARGIN_DEFAULT, min_value=0
        ),
    )
    logger.info(
        "Loaded reference data (formation=%s, rating floor margin=%s)",
        reference.default_formation,
        reference.rating_floor_margin,
    )
    return reference


@lru_cache(maxsize=1)
def get_reference() -> ReferenceData:
    """Return the process-wide reference data, built on first use."""

    return load_reference()
