from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

# Minimum distance kept between the anchor tip and the bottom face of the concrete.
SAFETY_MARGIN = 10

CATEGORY_CONCRETE = "concrete"
CATEGORY_ANCHOR = "anchor"
CATEGORY_PROPERTIES = "properties"


@dataclass(frozen=True)
class ConstraintRange:
    min: int
    max: int
    default: int

    def clamp(self, value: int) -> int:
        return min(max(value, self.min), self.max)


CONCRETE_DIMENSION_CONSTRAINTS: Mapping[str, ConstraintRange] = MappingProxyType(
    {
        "width": ConstraintRange(min=100, max=2000, default=500),
        "height": ConstraintRange(min=100, max=2000, default=500),
        "depth": ConstraintRange(min=100, max=2000, default=500),
        "thickness": ConstraintRange(min=100, max=1000, default=300),
    }
)

ANCHOR_DIMENSION_CONSTRAINTS: Mapping[str, ConstraintRange] = MappingProxyType(
    {
        "width": ConstraintRange(min=20, max=200, default=50),
        "height": ConstraintRange(min=40, max=300, default=80),
        "depth": ConstraintRange(min=20, max=200, default=50),
        "embedDepth": ConstraintRange(min=20, max=280, default=70),
    }
)

CONCRETE_COVERING_CONSTRAINTS = ConstraintRange(min=10, max=100, default=25)

_DIMENSION_TABLES: Mapping[str, Mapping[str, ConstraintRange]] = MappingProxyType(
    {
        CATEGORY_CONCRETE: CONCRETE_DIMENSION_CONSTRAINTS,
        CATEGORY_ANCHOR: ANCHOR_DIMENSION_CONSTRAINTS,
    }
)

CONCRETE_QUALITY_OPTIONS: tuple[str, ...] = (
    "C20/25",
    "C25/30",
    "C30/37",
    "C35/45",
    "C40/50",
    "C45/55",
    "C50/60",
)
DEFAULT_CONCRETE_QUALITY = "C20/25"

BASE_MATERIAL_CRACKED = "Cracked"
BASE_MATERIAL_NON_CRACKED = "Non-cracked"
BASE_MATERIAL_OPTIONS: tuple[str, ...] = (BASE_MATERIAL_CRACKED, BASE_MATERIAL_NON_CRACKED)
DEFAULT_BASE_MATERIAL = BASE_MATERIAL_CRACKED

DEFAULT_SETTINGS: Mapping[str, object] = MappingProxyType(
    {
        "units": "mm",
        "autoSave": True,
        "autosaveInterval": 5 * 60 * 1000,
        "showDimensions": True,
        "showGrid": True,
        "showAxes": True,
        "modelQuality": "medium",
    }
)


def get_range(category: str, field_name: str) -> ConstraintRange:
    """
    Range lookup for a dimension field.

    Unknown category/field is a programming error: KeyError propagates.
    """
    try:
        table = _DIMENSION_TABLES[category]
    except KeyError:
        raise KeyError(f"Unknown constraint category: {category!r}") from None
    try:
        return table[field_name]
    except KeyError:
        raise KeyError(f"Unknown {category} field: {field_name!r}") from None


def dimension_fields(category: str) -> tuple[str, ...]:
    return tuple(_DIMENSION_TABLES[category].keys())


def default_dimensions(category: str) -> dict[str, int]:
    return {name: rng.default for name, rng in _DIMENSION_TABLES[category].items()}
