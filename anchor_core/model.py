from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Any, Mapping

from .constraints import (
    ANCHOR_DIMENSION_CONSTRAINTS,
    BASE_MATERIAL_CRACKED,
    CATEGORY_ANCHOR,
    CATEGORY_CONCRETE,
    CONCRETE_COVERING_CONSTRAINTS,
    CONCRETE_DIMENSION_CONSTRAINTS,
    DEFAULT_BASE_MATERIAL,
    DEFAULT_CONCRETE_QUALITY,
)

Number = int | float

# Wire name (project file / UI) -> dataclass attribute.
ANCHOR_FIELD_ATTRS = {
    "width": "width",
    "height": "height",
    "depth": "depth",
    "embedDepth": "embed_depth",
}
CONCRETE_FIELD_ATTRS = {
    "width": "width",
    "height": "height",
    "depth": "depth",
    "thickness": "thickness",
}
PROPERTY_FIELD_ATTRS = {
    "quality": "quality",
    "covering": "covering",
    "baseMaterial": "base_material",
}


def _number(value: Any, ctx: str) -> Number:
    if isinstance(value, bool):
        raise ValueError(f"{ctx} must be a number")
    try:
        num = float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{ctx} must be a number") from exc
    if not math.isfinite(num):
        raise ValueError(f"{ctx} must be finite")
    return int(num) if num.is_integer() else num


def _length(value: Any, ctx: str) -> Number:
    num = _number(value, ctx)
    if num <= 0:
        raise ValueError(f"{ctx} must be > 0")
    return num


def _group(data: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    group = data.get(key)
    if group is None:
        return {}
    if not isinstance(group, Mapping):
        raise ValueError(f"{key} must be an object")
    return group


@dataclass(frozen=True)
class ConcreteDimensions:
    width: Number = CONCRETE_DIMENSION_CONSTRAINTS["width"].default
    height: Number = CONCRETE_DIMENSION_CONSTRAINTS["height"].default
    depth: Number = CONCRETE_DIMENSION_CONSTRAINTS["depth"].default
    thickness: Number = CONCRETE_DIMENSION_CONSTRAINTS["thickness"].default

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ConcreteDimensions":
        defaults = cls()
        kwargs = {
            attr: _length(data[name], f"concreteDimensions.{name}")
            if data.get(name) is not None
            else getattr(defaults, attr)
            for name, attr in CONCRETE_FIELD_ATTRS.items()
        }
        return cls(**kwargs)

    def to_dict(self) -> dict[str, Number]:
        return {name: getattr(self, attr) for name, attr in CONCRETE_FIELD_ATTRS.items()}


@dataclass(frozen=True)
class ConcreteProperties:
    quality: str = DEFAULT_CONCRETE_QUALITY
    covering: Number = CONCRETE_COVERING_CONSTRAINTS.default
    base_material: str = DEFAULT_BASE_MATERIAL

    @property
    def is_cracked(self) -> bool:
        return self.base_material == BASE_MATERIAL_CRACKED

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ConcreteProperties":
        defaults = cls()
        quality = data.get("quality")
        covering = data.get("covering")
        base_material = data.get("baseMaterial")
        return cls(
            quality=str(quality) if quality is not None else defaults.quality,
            covering=_length(covering, "concreteProperties.covering")
            if covering is not None
            else defaults.covering,
            base_material=str(base_material) if base_material is not None else defaults.base_material,
        )

    def to_dict(self) -> dict[str, Any]:
        return {name: getattr(self, attr) for name, attr in PROPERTY_FIELD_ATTRS.items()}


@dataclass(frozen=True)
class AnchorDimensions:
    width: Number = ANCHOR_DIMENSION_CONSTRAINTS["width"].default
    height: Number = ANCHOR_DIMENSION_CONSTRAINTS["height"].default
    depth: Number = ANCHOR_DIMENSION_CONSTRAINTS["depth"].default
    embed_depth: Number = ANCHOR_DIMENSION_CONSTRAINTS["embedDepth"].default

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AnchorDimensions":
        defaults = cls()
        kwargs = {
            attr: _length(data[name], f"anchorDimensions.{name}")
            if data.get(name) is not None
            else getattr(defaults, attr)
            for name, attr in ANCHOR_FIELD_ATTRS.items()
        }
        return cls(**kwargs)

    def to_dict(self) -> dict[str, Number]:
        return {name: getattr(self, attr) for name, attr in ANCHOR_FIELD_ATTRS.items()}


@dataclass(frozen=True)
class Configuration:
    """
    Complete input record of the engine.

    from_dict() accepts the project-file superset: unknown keys are ignored at
    every level, missing groups/fields fall back to table defaults.
    """

    concrete: ConcreteDimensions = field(default_factory=ConcreteDimensions)
    properties: ConcreteProperties = field(default_factory=ConcreteProperties)
    anchor: AnchorDimensions = field(default_factory=AnchorDimensions)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Configuration":
        if not isinstance(data, Mapping):
            raise ValueError("configuration must be an object")
        return cls(
            concrete=ConcreteDimensions.from_dict(_group(data, "concreteDimensions")),
            properties=ConcreteProperties.from_dict(_group(data, "concreteProperties")),
            anchor=AnchorDimensions.from_dict(_group(data, "anchorDimensions")),
        )

    def to_dict(self) -> dict[str, dict[str, Any]]:
        return {
            "concreteDimensions": self.concrete.to_dict(),
            "concreteProperties": self.properties.to_dict(),
            "anchorDimensions": self.anchor.to_dict(),
        }

    def get_dimension(self, category: str, field_name: str) -> Number:
        if category == CATEGORY_CONCRETE:
            return getattr(self.concrete, CONCRETE_FIELD_ATTRS[field_name])
        if category == CATEGORY_ANCHOR:
            return getattr(self.anchor, ANCHOR_FIELD_ATTRS[field_name])
        raise KeyError(f"Unknown dimension category: {category!r}")

    def with_dimension(self, category: str, field_name: str, value: Number) -> "Configuration":
        if category == CATEGORY_CONCRETE:
            attr = CONCRETE_FIELD_ATTRS[field_name]
            return replace(self, concrete=replace(self.concrete, **{attr: value}))
        if category == CATEGORY_ANCHOR:
            attr = ANCHOR_FIELD_ATTRS[field_name]
            return replace(self, anchor=replace(self.anchor, **{attr: value}))
        raise KeyError(f"Unknown dimension category: {category!r}")

    def with_property(self, field_name: str, value: Any) -> "Configuration":
        attr = PROPERTY_FIELD_ATTRS[field_name]
        return replace(self, properties=replace(self.properties, **{attr: value}))


def default_configuration() -> Configuration:
    return Configuration()
