from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel


class PresetResponse(BaseModel):
    name: str
    requirements: dict[str, Any]


class FormationResponse(BaseModel):
    name: str
    positions: List[str]
    chemistry_bonus: int


class CatalogResponse(BaseModel):
    presets: List[PresetResponse]
    formations: List[FormationResponse]
