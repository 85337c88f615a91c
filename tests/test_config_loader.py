import json

import pytest

from pysbc.config_loader import RequirementsProfile
from pysbc.errors import InvalidRequirementsError, UnknownPresetError


def test_profile_save_and_load(tmp_path):
    path = tmp_path / "profile.json"
    RequirementsProfile(requirements={"players": 3, "chemistry": 50}, preset="daily_gold").save(path)

    profile = RequirementsProfile.load(path)
    assert profile.preset == "daily_gold"
    assert profile.requirements == {"players": 3, "chemistry": 50}


def test_profile_load_defaults_missing_sections(tmp_path):
    path = tmp_path / "profile.json"
    path.write_text("{}", encoding="utf-8")

    profile = RequirementsProfile.load(path)
    assert profile.requirements == {}
    assert profile.preset is None


@pytest.mark.parametrize(
    "payload, message",
    [
        ([1, 2], "expected a JSON object"),
        ({"requirements": [11, 95]}, "'requirements' must be an object"),
        ({"requirements": {}, "preset": 7}, "'preset' must be a string"),
    ],
)
def test_profile_load_rejects_malformed_payload(tmp_path, payload, message):
    path = tmp_path / "profile.json"
    path.write_text(json.dumps(payload), encoding="utf-8")

    with pytest.raises(InvalidRequirementsError, match=message):
        RequirementsProfile.load(path)


def test_profile_load_rejects_invalid_json(tmp_path):
    path = tmp_path / "profile.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(InvalidRequirementsError, match="Invalid requirements profile"):
        RequirementsProfile.load(path)


def test_profile_resolve_overlays_preset():
    profile = RequirementsProfile(requirements={"rating": 80}, preset="daily_silver")

    resolved = profile.resolve()
    assert resolved["rating"] == 80
    assert resolved["rarities"] == ["silver"]
    assert resolved["maxCost"] == 8_000


def test_profile_resolve_prefers_explicit_preset():
    profile = RequirementsProfile(requirements={}, preset="daily_silver")

    assert profile.resolve("daily_bronze")["rarities"] == ["bronze"]
    assert RequirementsProfile().resolve() == {}


def test_profile_resolve_unknown_preset():
    with pytest.raises(UnknownPresetError, match="Unknown SBC type: nope"):
        RequirementsProfile(preset="nope").resolve()
