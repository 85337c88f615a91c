"""CSV export helpers for solved squads."""

from __future__ import annotations

import csv
from io import StringIO
from pathlib import Path

from pysbc.models import Solution


SQUAD_HEADERS = (
    "slot",
    "position",
    "rating",
    "league",
    "nation",
    "club",
    "rarity",
    "cost",
    "chemistry",
)


def export_squad_to_csv(solution: Solution) -> str:
    """Render a solution's players as CSV, one row per formation slot."""

    buffer = StringIO()
    writer = csv.writer(buffer)
    writer.writerow(SQUAD_HEADERS)
    for idx, player in enumerate(solution.players, start=1):
        writer.writerow([
            idx,
            player.position.value,
            player.rating,
            player.league,
            player.nation,
            player.club,
            player.rarity.value,
            player.cost,
            player.chemistry,
        ])
    return buffer.getvalue()


def write_squad_csv(solution: Solution, path: Path) -> None:
    with path.open("w", newline="", encoding="utf-8") as f:
        f.write(export_squad_to_csv(solution))


__all__ = [
    "SQUAD_HEADERS",
    "export_squad_to_csv",
    "write_squad_csv",
]
