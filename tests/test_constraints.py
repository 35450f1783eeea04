from __future__ import annotations

import pytest

from anchor_core.constraints import (
    ANCHOR_DIMENSION_CONSTRAINTS,
    CONCRETE_COVERING_CONSTRAINTS,
    CONCRETE_DIMENSION_CONSTRAINTS,
    SAFETY_MARGIN,
    default_dimensions,
    get_range,
)
from anchor_core.model import default_configuration


def test_table_values_match_published_ranges() -> None:
    assert CONCRETE_DIMENSION_CONSTRAINTS["thickness"].min == 100
    assert CONCRETE_DIMENSION_CONSTRAINTS["thickness"].max == 1000
    assert CONCRETE_DIMENSION_CONSTRAINTS["width"].default == 500
    assert ANCHOR_DIMENSION_CONSTRAINTS["embedDepth"].max == 280
    assert ANCHOR_DIMENSION_CONSTRAINTS["height"].min == 40
    assert CONCRETE_COVERING_CONSTRAINTS.default == 25
    assert SAFETY_MARGIN == 10


def test_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        CONCRETE_DIMENSION_CONSTRAINTS["width"] = None  # type: ignore[index]


def test_unknown_field_fails_fast() -> None:
    with pytest.raises(KeyError):
        get_range("concrete", "embedDepth")
    with pytest.raises(KeyError):
        get_range("reinforcement", "width")


def test_default_configuration_uses_table_defaults() -> None:
    config = default_configuration()
    assert config.concrete.to_dict() == default_dimensions("concrete")
    assert config.anchor.to_dict() == default_dimensions("anchor")
    assert config.properties.to_dict() == {
        "quality": "C20/25",
        "covering": 25,
        "baseMaterial": "Cracked",
    }
