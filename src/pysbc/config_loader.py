"""Saved requirement profiles for the CLI.

A profile is a JSON object holding an optional preset name and a mapping of
requirement overrides applied on top of that preset.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from pysbc.config.presets import get_preset
from pysbc.errors import InvalidRequirementsError


@dataclass(frozen=True)
class RequirementsProfile:
    requirements: Dict[str, Any] = field(default_factory=dict)
    preset: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Any, *, source: str = "profile") -> "RequirementsProfile":
        if not isinstance(payload, Mapping):
            raise InvalidRequirementsError(
                f"Invalid requirements profile {source}: expected a JSON object, "
                f"got {type(payload).__name__}"
            )
        requirements = payload.get("requirements")
        if requirements is None:
            requirements = {}
        elif not isinstance(requirements, Mapping):
            raise InvalidRequirementsError(
                f"Invalid requirements profile {source}: 'requirements' must be an object"
            )
        preset = payload.get("preset")
        if preset is not None and not isinstance(preset, str):
            raise InvalidRequirementsError(
                f"Invalid requirements profile {source}: 'preset' must be a string"
            )
        return cls(requirements=dict(requirements), preset=preset or None)

    @classmethod
    def load(cls, path: Path) -> "RequirementsProfile":
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise InvalidRequirementsError(f"Invalid requirements profile {path}: {exc}") from exc
        return cls.from_payload(payload, source=str(path))

    def resolve(self, preset: Optional[str] = None) -> Dict[str, Any]:
        """Return the preset requirements overlaid with the profile's own values.

        An explicit ``preset`` argument takes precedence over the saved one.
        """

        name = preset or self.preset
        base = get_preset(name) if name else {}
        return base | self.requirements

    def save(self, path: Path) -> None:
        payload = {"preset": self.preset, "requirements": self.requirements}
        path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
