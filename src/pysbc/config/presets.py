"""Named requirement presets for common daily and upgrade challenges."""

from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping, Tuple

from pysbc.errors import UnknownPresetError


_PRESETS: Dict[str, Mapping[str, Any]] = {
    "daily_bronze": {
        "players": 11,
        "chemistry": 95,
        "rating": 65,
        "maxCost": 5_000,
        "rarities": ["bronze"],
    },
    "daily_silver": {
        "players": 11,
        "chemistry": 95,
        "rating": 70,
        "maxCost": 8_000,
        "rarities": ["silver"],
    },
    "daily_gold": {
        "players": 11,
        "chemistry": 95,
        "rating": 75,
        "maxCost": 12_000,
        "rarities": ["gold"],
    },
    "82_plus_pick": {
        "players": 11,
        "chemistry": 95,
        "rating": 82,
        "maxCost": 15_000,
    },
    "84_plus_upgrade": {
        "players": 11,
        "chemistry": 95,
        "rating": 84,
        "maxCost": 25_000,
    },
}


def iter_presets() -> Iterable[Tuple[str, Mapping[str, Any]]]:
    """Return (name, requirements) pairs for every configured preset."""

    return ((name, get_preset(name)) for name in _PRESETS)


def get_preset(name: str) -> Dict[str, Any]:
    """Return a fresh copy of a preset's requirements mapping."""

    if name not in _PRESETS:
        raise UnknownPresetError(f"Unknown SBC type: {name}")
    return {
        key: list(value) if isinstance(value, list) else value
        for key, value in _PRESETS[name].items()
    }
