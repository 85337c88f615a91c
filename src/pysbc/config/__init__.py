"""Reference tables, formation catalog and challenge presets."""

from .presets import get_preset, iter_presets
from .reference import (
    FormationTemplate,
    RarityTier,
    ReferenceData,
    get_formation,
    get_reference,
    iter_formations,
    load_reference,
)

__all__ = [
    "FormationTemplate",
    "RarityTier",
    "ReferenceData",
    "get_formation",
    "get_preset",
    "get_reference",
    "iter_formations",
    "iter_presets",
    "load_reference",
]
