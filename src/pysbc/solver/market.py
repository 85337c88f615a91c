"""Transfer market search hints derived from a solved squad."""

from __future__ import annotations

from typing import List

from pysbc.models import MarketSuggestion, SearchFilters, Solution

RATING_WINDOW = 2


def market_suggestions(solution: Solution) -> List[MarketSuggestion]:
    """Return one search suggestion per player, in squad order."""

    suggestions: List[MarketSuggestion] = []
    for player in solution.players:
        suggestions.append(
            MarketSuggestion(
                position=player.position,
                search_filters=SearchFilters(
                    league=player.league,
                    nation=player.nation,
                    rating=f"{player.rating - RATING_WINDOW}-{player.rating + RATING_WINDOW}",
                    max_price=player.cost,
                ),
                alternatives=(
                    f"Try {player.position.value} from {player.league}",
                    f"Consider {player.nation} players",
                    f"Look for {player.rarity.value} cards",
                ),
            )
        )
    return suggestions
