import pytest

from pysbc.config import get_formation, get_preset, iter_presets, load_reference
from pysbc.config.reference import ReferenceData
from pysbc.errors import UnknownPresetError
from pysbc.models import Position, Rarity


def test_get_formation_default_433_order():
    formation = get_formation("4-3-3")
    assert [p.value for p in formation.positions] == [
        "GK", "LB", "CB", "CB", "RB", "CM", "CM", "CM", "LW", "ST", "RW",
    ]
    assert formation.chemistry_bonus == 5


def test_get_formation_missing_raises():
    with pytest.raises(KeyError):
        get_formation("5-5-0")


def test_reference_lookups():
    reference = ReferenceData()
    assert reference.fallback_league == "Premier League"
    assert reference.fallback_nation == "England"
    assert reference.tier(Rarity.SILVER).base_cost == 400
    # Gold is documented as starting at 75 in the tier table.
    assert reference.tier(Rarity.GOLD).min_rating == 75
    assert reference.cost_multiplier(Position.ST) == pytest.approx(1.3)
    assert reference.cost_multiplier(Position.LW) == pytest.approx(1.0)


def test_get_preset_returns_independent_copy():
    preset = get_preset("daily_silver")
    assert preset == {
        "players": 11,
        "chemistry": 95,
        "rating": 70,
        "maxCost": 8000,
        "rarities": ["silver"],
    }
    preset["rarities"].append("gold")
    assert get_preset("daily_silver")["rarities"] == ["silver"]


def test_iter_presets_lists_documented_names():
    names = [name for name, _ in iter_presets()]
    assert names == ["daily_bronze", "daily_silver", "daily_gold", "82_plus_pick", "84_plus_upgrade"]


def test_get_preset_missing_raises():
    with pytest.raises(UnknownPresetError, match="Unknown SBC type: nope"):
        get_preset("nope")


def test_load_reference_applies_environment(monkeypatch):
    monkeypatch.setenv("PYSBC_DEFAULT_FORMATION", "4-4-2")
    monkeypatch.setenv("PYSBC_RATING_FLOOR_MARGIN", "3")
    reference = load_reference()
    assert reference.default_formation == "4-4-2"
    assert reference.rating_floor_margin == 3


def test_load_reference_ignores_invalid_environment(monkeypatch):
    monkeypatch.setenv("PYSBC_DEFAULT_FORMATION", "2-2-6")
    monkeypatch.setenv("PYSBC_RATING_FLOOR_MARGIN", "lots")
    reference = load_reference()
    assert reference.default_formation == "4-3-3"
    assert reference.rating_floor_margin == 5
