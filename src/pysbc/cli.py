"""Command-line interface for solving squad building challenges."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Sequence

from pysbc.config import get_preset, iter_formations, iter_presets
from pysbc.config_loader import RequirementsProfile
from pysbc.errors import InvalidRequirementsError, UnknownPresetError
from pysbc.export import write_squad_csv
from pysbc.models import Solution, SolveFailure, SolveResult
from pysbc.solver import market_suggestions, solve


# argparse destination -> requirements key
_FLAG_KEYS = {
    "players": "players",
    "chemistry": "chemistry",
    "rating": "rating",
    "max_cost": "maxCost",
    "league": "leagues",
    "nation": "nations",
    "club": "clubs",
    "rarity": "rarities",
    "max_same_league": "maxSameLeague",
    "max_same_nation": "maxSameNation",
    "max_same_club": "maxSameClub",
    "min_different_leagues": "minDifferentLeagues",
    "min_different_nations": "minDifferentNations",
    "min_different_clubs": "minDifferentClubs",
    "formation": "formation",
}


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build a squad for SBC requirements")
    parser.add_argument("--preset", default=None, help="Named preset (e.g., daily_silver)")
    parser.add_argument("--list-presets", action="store_true", help="List presets and formations, then exit")
    parser.add_argument("--players", type=int, default=None, help="Squad size")
    parser.add_argument("--chemistry", type=int, default=None, help="Minimum squad chemistry (0-100)")
    parser.add_argument("--rating", type=int, default=None, help="Minimum squad rating")
    parser.add_argument("--max-cost", type=float, default=None, help="Coin budget")
    parser.add_argument("--league", action="append", default=None, help="Allowed league (repeatable)")
    parser.add_argument("--nation", action="append", default=None, help="Allowed nation (repeatable)")
    parser.add_argument("--club", action="append", default=None, help="Allowed club (repeatable)")
    parser.add_argument(
        "--rarity",
        action="append",
        default=None,
        choices=["bronze", "silver", "gold"],
        help="Allowed rarity (repeatable)",
    )
    parser.add_argument("--max-same-league", type=int, default=None, help="Max players from one league")
    parser.add_argument("--max-same-nation", type=int, default=None, help="Max players from one nation")
    parser.add_argument("--max-same-club", type=int, default=None, help="Max players from one club")
    parser.add_argument("--min-different-leagues", type=int, default=None, help="Min distinct leagues")
    parser.add_argument("--min-different-nations", type=int, default=None, help="Min distinct nations")
    parser.add_argument("--min-different-clubs", type=int, default=None, help="Min distinct clubs")
    parser.add_argument("--formation", default=None, help="Formation name (e.g., 4-4-2)")
    parser.add_argument("--load-requirements", type=Path, default=None, help="Load requirements profile JSON")
    parser.add_argument("--save-requirements", type=Path, default=None, help="Save requirements profile JSON")
    parser.add_argument("--output", type=Path, default=None, help="Optional squad CSV output path")
    parser.add_argument("--json", type=Path, default=None, help="Optional path to write the solution JSON")
    parser.add_argument(
        "--suggestions",
        action="store_true",
        help="Print transfer market search suggestions for each slot",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level (e.g., INFO, DEBUG)")
    return parser.parse_args(argv)


def build_requirements(args: argparse.Namespace) -> dict[str, Any]:
    """Merge preset, profile and flag values; later sources win."""

    if args.load_requirements:
        requirements = RequirementsProfile.load(args.load_requirements).resolve(args.preset)
    elif args.preset:
        requirements = get_preset(args.preset)
    else:
        requirements = {}

    flags = {
        key: getattr(args, dest)
        for dest, key in _FLAG_KEYS.items()
        if getattr(args, dest) is not None
    }
    return requirements | flags


def _print_summary(result: Solution) -> None:
    status = "met" if result.success else "NOT met"
    print(f"Requirements {status}")
    print(f"Formation: {result.formation.name}")
    print(f"Squad Size: {len(result.players)}")
    print(f"Total Chemistry: {result.total_chemistry}")
    print(f"Squad Rating: {result.total_rating}")
    print(f"Estimated Cost: {result.total_cost:,} coins")

    if result.warnings:
        print("Warnings:")
        for warning in result.warnings:
            print(f"  - {warning}")
    if result.strategy:
        print("Strategy Tips:")
        for tip in result.strategy:
            print(f"  - {tip}")

    print("Squad Breakdown:")
    for idx, player in enumerate(result.players, start=1):
        print(
            f"  {idx}. {player.position.value} - {player.rating} rated {player.rarity.value} "
            f"{player.nation} from {player.league} (~{player.cost} coins)"
        )


def _print_presets() -> None:
    print("Presets:")
    for name, requirements in iter_presets():
        print(f"  {name}: {json.dumps(requirements)}")
    print("Formations:")
    for template in iter_formations():
        positions = " ".join(position.value for position in template.positions)
        print(f"  {template.name} (bonus {template.chemistry_bonus}): {positions}")


def main(argv: Sequence[str] | None = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.list_presets:
        _print_presets()
        return

    try:
        requirements = build_requirements(args)
    except (InvalidRequirementsError, UnknownPresetError) as exc:
        raise SystemExit(str(exc)) from exc

    if args.save_requirements:
        RequirementsProfile(requirements=requirements, preset=None).save(args.save_requirements)
        print(f"Saved requirements profile to {args.save_requirements}")

    result: SolveResult = solve(requirements)

    if args.json:
        args.json.write_text(result.model_dump_json(indent=2), encoding="utf-8")
        print(f"Wrote solution JSON to {args.json}")

    if isinstance(result, SolveFailure):
        raise SystemExit(f"Solve failed: {result.error}")

    _print_summary(result)

    if args.output:
        write_squad_csv(result, args.output)
        print(f"Wrote squad CSV to {args.output}")

    if args.suggestions:
        print("Market Suggestions:")
        for suggestion in market_suggestions(result):
            filters = suggestion.search_filters
            print(
                f"  {suggestion.position.value}: {filters.league} / {filters.nation}, "
                f"rating {filters.rating}, max {filters.max_price} coins"
            )


if __name__ == "__main__":
    main()
