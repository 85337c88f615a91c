"""Greedy squad construction and chemistry/rating/cost scoring."""

from __future__ import annotations

import logging
import math
from collections import Counter
from typing import List, Optional, Sequence, Tuple

from pysbc.config.reference import ReferenceData, get_formation, get_reference
from pysbc.models import (
    CandidatePlayer,
    Formation,
    NormalizedRequirements,
    Position,
    Rarity,
    Squad,
)


logger = logging.getLogger(__name__)

_GOLD_INFERENCE_RATING = 85
_SILVER_INFERENCE_RATING = 75

_POSITION_CHEMISTRY = 10
_MAX_PLAYER_CHEMISTRY = 10
_LEAGUE_LINK = (2, 8)
_NATION_LINK = (1, 6)
_CLUB_LINK = (3, 12)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _resolve_reference(reference: Optional[ReferenceData]) -> ReferenceData:
    return reference if reference is not None else get_reference()


def select_formation(
    reqs: NormalizedRequirements,
    reference: Optional[ReferenceData] = None,
) -> Formation:
    """Return the formation for ``reqs`` with one position per squad slot.

    Slots past the end of the template are filled with substitutes.
    """

    reference = _resolve_reference(reference)
    template = get_formation(reqs.formation or reference.default_formation)
    positions = list(template.positions[: reqs.squad_size])
    positions.extend([Position.SUB] * (reqs.squad_size - len(positions)))
    return Formation(
        name=template.name,
        positions=tuple(positions),
        chemistry_bonus=template.chemistry_bonus,
    )


def required_rating(
    reqs: NormalizedRequirements,
    squad: Sequence[CandidatePlayer],
    *,
    floor_margin: int = 5,
) -> int:
    """Rating the next slot needs to keep the squad mean at ``min_rating``."""

    if not squad:
        return reqs.min_rating
    current_total = sum(player.rating for player in squad)
    remaining_slots = max(1, reqs.squad_size - len(squad))
    required_for_remaining = reqs.min_rating * reqs.squad_size - current_total
    required = max(reqs.min_rating - floor_margin, math.ceil(required_for_remaining / remaining_slots))
    # Ratings never go negative, even when a low minimum leaves a large surplus.
    return max(0, required)


def _most_common(values: Sequence[str], fallback: str) -> str:
    counts = Counter(values)
    if not counts:
        return fallback
    best = max(counts.values())
    # Ties resolve to the value that entered the squad last.
    return [value for value in counts if counts[value] == best][-1]


def select_league(
    reqs: NormalizedRequirements,
    squad: Sequence[CandidatePlayer],
    reference: ReferenceData,
) -> str:
    if reqs.leagues:
        return reqs.leagues[0]
    return _most_common([player.league for player in squad], reference.fallback_league)


def select_nation(
    reqs: NormalizedRequirements,
    squad: Sequence[CandidatePlayer],
    reference: ReferenceData,
) -> str:
    if reqs.nations:
        return reqs.nations[0]
    return _most_common([player.nation for player in squad], reference.fallback_nation)


def select_club(reqs: NormalizedRequirements, reference: ReferenceData) -> str:
    if reqs.clubs:
        return reqs.clubs[0]
    return reference.default_club


def select_rarity(reqs: NormalizedRequirements) -> Rarity:
    if reqs.rarities:
        return reqs.rarities[0]
    if reqs.min_rating >= _GOLD_INFERENCE_RATING:
        return Rarity.GOLD
    if reqs.min_rating >= _SILVER_INFERENCE_RATING:
        return Rarity.SILVER
    return Rarity.BRONZE


def estimate_cost(
    position: Position,
    rating: int,
    rarity: Rarity,
    reference: Optional[ReferenceData] = None,
) -> int:
    """Synthesized market price for a card with the given attributes."""

    reference = _resolve_reference(reference)
    cost = float(reference.tier(rarity).base_cost)
    cost *= max(1.0, (rating - 70) / 10)
    cost *= reference.cost_multiplier(position)
    return _round_half_up(cost)


def fill_slot(
    position: Position,
    reqs: NormalizedRequirements,
    squad: Sequence[CandidatePlayer],
    reference: Optional[ReferenceData] = None,
) -> CandidatePlayer:
    """Pick the candidate for ``position`` given the players chosen so far."""

    reference = _resolve_reference(reference)
    rating = required_rating(reqs, squad, floor_margin=reference.rating_floor_margin)
    rarity = select_rarity(reqs)
    return CandidatePlayer(
        position=position,
        rating=rating,
        league=select_league(reqs, squad, reference),
        nation=select_nation(reqs, squad, reference),
        club=select_club(reqs, reference),
        rarity=rarity,
        cost=estimate_cost(position, rating, rarity, reference),
    )


def _link_bonus(links: int, per_link: int, cap: int) -> int:
    return min(links * per_link, cap)


def compute_chemistry(players: Sequence[CandidatePlayer]) -> Tuple[int, List[int]]:
    """Return the squad chemistry total and each player's clamped chemistry."""

    leagues = Counter(player.league for player in players)
    nations = Counter(player.nation for player in players)
    clubs = Counter(player.club for player in players)

    per_player: List[int] = []
    for player in players:
        points = _POSITION_CHEMISTRY
        points += _link_bonus(leagues[player.league] - 1, *_LEAGUE_LINK)
        points += _link_bonus(nations[player.nation] - 1, *_NATION_LINK)
        points += _link_bonus(clubs[player.club] - 1, *_CLUB_LINK)
        per_player.append(max(0, min(points, _MAX_PLAYER_CHEMISTRY)))
    return sum(per_player), per_player


def compute_rating(players: Sequence[CandidatePlayer]) -> int:
    if not players:
        return 0
    return _round_half_up(sum(player.rating for player in players) / len(players))


def build_squad(
    reqs: NormalizedRequirements,
    reference: Optional[ReferenceData] = None,
) -> Squad:
    """Fill every formation slot in order and score the result."""

    reference = _resolve_reference(reference)
    formation = select_formation(reqs, reference)

    players: List[CandidatePlayer] = []
    for position in formation.positions:
        players.append(fill_slot(position, reqs, tuple(players), reference))

    total_chemistry, per_player = compute_chemistry(players)
    scored = tuple(
        player.model_copy(update={"chemistry": chemistry})
        for player, chemistry in zip(players, per_player)
    )
    squad = Squad(
        players=scored,
        formation=formation,
        total_cost=sum(player.cost for player in scored),
        total_chemistry=total_chemistry,
        total_rating=compute_rating(scored),
    )
    logger.debug(
        "Built %s-player squad in %s – cost %s, chemistry %s, rating %s",
        len(scored),
        formation.name,
        squad.total_cost,
        squad.total_chemistry,
        squad.total_rating,
    )
    return squad
