import pytest
from pydantic import ValidationError

from pysbc.errors import InvalidRequirementsError
from pysbc.models import Rarity
from pysbc.solver import normalize


@pytest.mark.parametrize("raw", [None, [], "players=11", 11])
def test_normalize_rejects_non_mapping(raw):
    with pytest.raises(InvalidRequirementsError, match="expected a mapping"):
        normalize(raw)


def test_normalize_requires_players_and_chemistry_keys():
    with pytest.raises(InvalidRequirementsError, match="players, chemistry"):
        normalize({})
    with pytest.raises(InvalidRequirementsError, match="chemistry"):
        normalize({"players": 11, "rating": 80})


def test_normalize_defaults_present_but_empty_keys():
    reqs = normalize({"players": None, "chemistry": None})
    assert reqs.squad_size == 11
    assert reqs.min_chemistry == 100
    assert reqs.min_rating == 75
    assert reqs.max_cost == 50_000
    assert reqs.leagues == ()
    assert reqs.rarities == ()
    assert reqs.max_same_club is None
    assert reqs.formation is None


def test_normalize_reads_camel_case_fields():
    reqs = normalize(
        {
            "players": 11,
            "chemistry": 100,
            "rating": 84,
            "maxCost": 25000,
            "leagues": ["Premier League", "La Liga"],
            "nations": ["England", "Spain", "Brazil"],
            "minDifferentLeagues": 2,
            "maxSameClub": 2,
            "specialCards": ["TOTW"],
        }
    )
    assert reqs.min_rating == 84
    assert reqs.max_cost == 25000
    assert reqs.leagues == ("Premier League", "La Liga")
    assert reqs.nations == ("England", "Spain", "Brazil")
    assert reqs.min_different_leagues == 2
    assert reqs.max_same_club == 2


def test_normalize_accepts_snake_case_and_single_values():
    reqs = normalize({"squad_size": 5, "min_chemistry": 0, "rarities": "Gold", "clubs": "Arsenal"})
    assert reqs.squad_size == 5
    assert reqs.min_chemistry == 0
    assert reqs.rarities == (Rarity.GOLD,)
    assert reqs.clubs == ("Arsenal",)


def test_normalize_keeps_explicit_zero_chemistry():
    assert normalize({"players": 1, "chemistry": 0}).min_chemistry == 0


def test_normalize_treats_zero_distribution_limits_as_unset():
    reqs = normalize({"players": 11, "chemistry": 95, "maxSameLeague": 0, "minDifferentNations": 0})
    assert reqs.max_same_league is None
    assert reqs.min_different_nations is None


@pytest.mark.parametrize(
    "raw",
    [
        {"players": 0, "chemistry": 95},
        {"players": -3, "chemistry": 95},
        {"players": 11, "chemistry": 101},
        {"players": 11, "chemistry": -1},
        {"players": 11, "chemistry": 95, "maxCost": 0},
        {"players": 11, "chemistry": 95, "rarities": ["platinum"]},
        {"players": "eleven", "chemistry": 95},
    ],
)
def test_normalize_rejects_invalid_values(raw):
    with pytest.raises(InvalidRequirementsError):
        normalize(raw)


def test_normalize_validates_formation_name():
    assert normalize({"players": 11, "chemistry": 95, "formation": "3-5-2"}).formation == "3-5-2"
    with pytest.raises(InvalidRequirementsError, match="unknown formation"):
        normalize({"players": 11, "chemistry": 95, "formation": "1-9-0"})


def test_normalized_requirements_are_frozen():
    reqs = normalize({"players": 11, "chemistry": 95})
    with pytest.raises((TypeError, ValidationError)):
        reqs.squad_size = 3  # type: ignore[misc]


@pytest.mark.parametrize("players", [24, 40_000])
def test_normalize_rejects_oversized_squad(players):
    with pytest.raises(InvalidRequirementsError, match="players"):
        normalize({"players": players, "chemistry": 95})


def test_normalize_accepts_full_bench():
    assert normalize({"players": 23, "chemistry": 95}).squad_size == 23
