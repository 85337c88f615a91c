"""Requirement checks and the strategy/warning messages attached to solutions."""

from __future__ import annotations

from collections import Counter
from typing import Callable, List, Optional

from pysbc.models import (
    CandidatePlayer,
    NormalizedRequirements,
    RequirementCheck,
    Solution,
    Squad,
)


UNMET_WARNING = "Solution does not meet all requirements"
UNMET_TIP = "Consider increasing budget or relaxing constraints"
LOYALTY_TIP = "Use loyalty glitch for +1 chemistry per player"
POSITION_CHANGE_TIP = "Consider position change cards if needed"
MARKET_TIP = "Check market for price fluctuations"
BUDGET_TIP = "Reduce player ratings to lower cost"
CHEMISTRY_TIP = "Focus on same league/nation links"

STANDARD_TIPS = (LOYALTY_TIP, POSITION_CHANGE_TIP, MARKET_TIP)


def _format_coins(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else f"{value:.2f}"


def check_requirements(squad: Squad, reqs: NormalizedRequirements) -> RequirementCheck:
    checks = {
        "chemistry": squad.total_chemistry >= reqs.min_chemistry,
        "rating": squad.total_rating >= reqs.min_rating,
        "cost": squad.total_cost <= reqs.max_cost,
        "squad_size": len(squad.players) == reqs.squad_size,
    }
    return RequirementCheck(satisfied=all(checks.values()), checks=checks)


def _max_share_warning(
    players: List[CandidatePlayer],
    label: str,
    attribute: Callable[[CandidatePlayer], str],
    limit: Optional[int],
) -> Optional[str]:
    if limit is None or not players:
        return None
    value, count = Counter(attribute(player) for player in players).most_common(1)[0]
    if count <= limit:
        return None
    return f"{count} players share {label} {value} (max {limit})"


def _min_distinct_warning(
    players: List[CandidatePlayer],
    label: str,
    attribute: Callable[[CandidatePlayer], str],
    minimum: Optional[int],
) -> Optional[str]:
    if minimum is None:
        return None
    distinct = len({attribute(player) for player in players})
    if distinct >= minimum:
        return None
    return f"Only {distinct} different {label} in squad (min {minimum})"


def check_distribution(squad: Squad, reqs: NormalizedRequirements) -> List[str]:
    """Warnings for distribution limits the greedy squad does not honour.

    These limits are advisory and never affect ``success``.
    """

    players = list(squad.players)
    candidates = [
        _max_share_warning(players, "league", lambda p: p.league, reqs.max_same_league),
        _max_share_warning(players, "nation", lambda p: p.nation, reqs.max_same_nation),
        _max_share_warning(players, "club", lambda p: p.club, reqs.max_same_club),
        _min_distinct_warning(players, "leagues", lambda p: p.league, reqs.min_different_leagues),
        _min_distinct_warning(players, "nations", lambda p: p.nation, reqs.min_different_nations),
        _min_distinct_warning(players, "clubs", lambda p: p.club, reqs.min_different_clubs),
    ]
    return [warning for warning in candidates if warning]


def attach_advisory(
    squad: Squad,
    reqs: NormalizedRequirements,
    check: Optional[RequirementCheck] = None,
) -> Solution:
    """Return the final solution for ``squad`` with strategy tips and warnings."""

    if check is None:
        check = check_requirements(squad, reqs)

    strategy: List[str] = []
    warnings: List[str] = []

    if not check.satisfied:
        warnings.append(UNMET_WARNING)
        strategy.append(UNMET_TIP)

    strategy.extend(STANDARD_TIPS)

    if squad.total_cost > reqs.max_cost:
        strategy.append(BUDGET_TIP)
        warnings.append(
            f"Solution exceeds budget by {_format_coins(squad.total_cost - reqs.max_cost)} coins"
        )

    if squad.total_chemistry < reqs.min_chemistry:
        strategy.append(CHEMISTRY_TIP)
        warnings.append(f"Chemistry {squad.total_chemistry} below required {reqs.min_chemistry}")

    warnings.extend(check_distribution(squad, reqs))

    return Solution(
        players=squad.players,
        formation=squad.formation,
        total_cost=squad.total_cost,
        total_chemistry=squad.total_chemistry,
        total_rating=squad.total_rating,
        strategy=tuple(strategy),
        warnings=tuple(warnings),
        checks=dict(check.checks),
        success=check.satisfied,
    )
