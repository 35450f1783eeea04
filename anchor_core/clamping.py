from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import Any

from .constraints import (
    CATEGORY_ANCHOR,
    CATEGORY_CONCRETE,
    CATEGORY_PROPERTIES,
    CONCRETE_COVERING_CONSTRAINTS,
    SAFETY_MARGIN,
    get_range,
)
from .model import AnchorDimensions, ConcreteDimensions, Configuration, Number

logger = logging.getLogger(__name__)

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class SideEffect:
    category: str
    field_name: str
    value: Number


@dataclass(frozen=True)
class ClampOutcome:
    value: Number
    side_effects: tuple[SideEffect, ...] = ()
    ignored: bool = False


def parse_int(raw_value: Any) -> int | None:
    """
    Integer parse of a user edit: ints as-is, floats truncated, strings by their
    leading integer ("250mm" -> 250, "12.7" -> 12). None when nothing parses.
    """
    if isinstance(raw_value, bool) or raw_value is None:
        return None
    if isinstance(raw_value, int):
        return raw_value
    if isinstance(raw_value, float):
        if not math.isfinite(raw_value):
            return None
        return int(raw_value)
    if isinstance(raw_value, str):
        match = _INT_PREFIX.match(raw_value)
        if match is None:
            return None
        try:
            return int(match.group(1))
        except ValueError:
            # past the int() digit limit
            return None
    return None


def max_embed_depth_for(thickness: Number) -> Number:
    return thickness - SAFETY_MARGIN


def clamp(
    category: str,
    field_name: str,
    raw_value: Any,
    current_concrete: ConcreteDimensions,
    current_anchor: AnchorDimensions,
) -> ClampOutcome:
    """
    Normalize a proposed dimension edit.

    - unparseable input keeps the current value (no side effects)
    - value is clamped into the ConstraintTable range
    - anchor.embedDepth is also capped by concrete.thickness - SAFETY_MARGIN
    - a thinner concrete proposes embedDepth := thickness - SAFETY_MARGIN
      when the current anchor no longer fits
    """
    rng = get_range(category, field_name)
    current = Configuration(concrete=current_concrete, anchor=current_anchor)

    parsed = parse_int(raw_value)
    if parsed is None:
        logger.debug("Ignored non-numeric edit %s.%s=%r", category, field_name, raw_value)
        return ClampOutcome(value=current.get_dimension(category, field_name), ignored=True)

    if category == CATEGORY_ANCHOR and field_name == "embedDepth":
        upper = min(rng.max, max_embed_depth_for(current_concrete.thickness))
        return ClampOutcome(value=max(rng.min, min(parsed, upper)))

    value = rng.clamp(parsed)
    side_effects: tuple[SideEffect, ...] = ()
    if category == CATEGORY_CONCRETE and field_name == "thickness":
        limit = max_embed_depth_for(value)
        if current_anchor.embed_depth > limit:
            side_effects = (SideEffect(CATEGORY_ANCHOR, "embedDepth", limit),)
            logger.debug(
                "thickness=%s forces embedDepth %s -> %s",
                value,
                current_anchor.embed_depth,
                limit,
            )
    return ClampOutcome(value=value, side_effects=side_effects)


def clamp_covering(raw_value: Any, current: Number) -> ClampOutcome:
    parsed = parse_int(raw_value)
    if parsed is None:
        logger.debug("Ignored non-numeric covering edit %r", raw_value)
        return ClampOutcome(value=current, ignored=True)
    return ClampOutcome(value=CONCRETE_COVERING_CONSTRAINTS.clamp(parsed))


def apply_edit(configuration: Configuration, category: str, field_name: str, raw_value: Any) -> Configuration:
    """
    Apply one field edit (with its side effects) and return the new configuration.
    """
    if category == CATEGORY_PROPERTIES:
        if field_name == "covering":
            outcome = clamp_covering(raw_value, configuration.properties.covering)
            return configuration.with_property("covering", outcome.value)
        # quality / baseMaterial are stored as given
        return configuration.with_property(field_name, raw_value)

    outcome = clamp(category, field_name, raw_value, configuration.concrete, configuration.anchor)
    if outcome.ignored:
        return configuration
    updated = configuration.with_dimension(category, field_name, outcome.value)
    for effect in outcome.side_effects:
        updated = updated.with_dimension(effect.category, effect.field_name, effect.value)
    return updated
