"""Validate raw challenge requirements and resolve their defaults."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from pysbc.config.reference import get_formation
from pysbc.errors import InvalidRequirementsError
from pysbc.models import NormalizedRequirements, RequirementSpec


DEFAULT_SQUAD_SIZE = 11
DEFAULT_MIN_CHEMISTRY = 100
DEFAULT_MIN_RATING = 75
DEFAULT_MAX_COST = 50_000

# Each mandatory field is satisfied by any one of its spellings.
_MANDATORY_KEYS: tuple[tuple[str, ...], ...] = (
    ("players", "squad_size"),
    ("chemistry", "min_chemistry"),
)


def _default(value: Any, fallback: Any) -> Any:
    return fallback if value is None else value


def _describe_errors(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ())) or "requirements"
        parts.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts)


def normalize(raw: Any) -> NormalizedRequirements:
    """Return fully populated requirements for ``raw``.

    ``raw`` must be a mapping carrying the squad size and chemistry keys. The
    keys only have to be present: a ``None`` value falls back to the default
    like any other omitted field.
    """

    if not isinstance(raw, Mapping):
        raise InvalidRequirementsError(
            f"Invalid SBC requirements provided: expected a mapping, got {type(raw).__name__}"
        )

    missing = [names[0] for names in _MANDATORY_KEYS if not any(name in raw for name in names)]
    if missing:
        raise InvalidRequirementsError(
            f"Invalid SBC requirements provided: missing {', '.join(missing)}"
        )

    try:
        spec = RequirementSpec.model_validate(dict(raw))
    except ValidationError as exc:
        raise InvalidRequirementsError(
            f"Invalid SBC requirements provided: {_describe_errors(exc)}"
        ) from exc

    if spec.formation is not None:
        try:
            get_formation(spec.formation)
        except KeyError as exc:
            raise InvalidRequirementsError(
                f"Invalid SBC requirements provided: unknown formation {spec.formation!r}"
            ) from exc

    # Zero distribution limits mean "no limit", matching how challenge pages omit them.
    return NormalizedRequirements(
        squad_size=_default(spec.players, DEFAULT_SQUAD_SIZE),
        min_chemistry=_default(spec.chemistry, DEFAULT_MIN_CHEMISTRY),
        min_rating=_default(spec.rating, DEFAULT_MIN_RATING),
        max_cost=_default(spec.max_cost, DEFAULT_MAX_COST),
        leagues=tuple(spec.leagues or ()),
        nations=tuple(spec.nations or ()),
        clubs=tuple(spec.clubs or ()),
        rarities=tuple(spec.rarities or ()),
        max_same_league=spec.max_same_league or None,
        max_same_nation=spec.max_same_nation or None,
        max_same_club=spec.max_same_club or None,
        min_different_leagues=spec.min_different_leagues or None,
        min_different_nations=spec.min_different_nations or None,
        min_different_clubs=spec.min_different_clubs or None,
        formation=spec.formation.strip() if spec.formation else None,
    )
