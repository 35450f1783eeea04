from __future__ import annotations

import math
from dataclasses import dataclass

from .model import AnchorDimensions, ConcreteDimensions, ConcreteProperties
from .strength import StrengthValues, parse_strength

CRITICAL_EDGE_FACTOR = 1.5
REFERENCE_ANCHOR_WIDTH = 50.0
CRACKED_REDUCTION = 0.7
SHEAR_TO_TENSION = 0.8


@dataclass(frozen=True)
class EdgeDistances:
    c1_1: float
    c1_2: float
    c2_1: float
    c2_2: float

    @property
    def minimum(self) -> float:
        return min(self.c1_1, self.c1_2, self.c2_1, self.c2_2)

    def to_dict(self) -> dict[str, float]:
        return {"c1_1": self.c1_1, "c1_2": self.c1_2, "c2_1": self.c2_1, "c2_2": self.c2_2}


@dataclass(frozen=True)
class CapacityBreakdown:
    strength: StrengthValues
    edge_distances: EdgeDistances
    min_edge_distance: float
    critical_edge_distance: float
    is_edge_anchor: bool
    base_capacity: float
    edge_reduction_factor: float
    cracked_reduction_factor: float
    tension_unrounded: float


@dataclass(frozen=True)
class CapacityResult:
    tension_capacity: int
    shear_capacity: int
    is_edge_anchor: bool
    edge_distances: EdgeDistances
    strength_values: StrengthValues

    def to_dict(self) -> dict:
        return {
            "tensionCapacity": self.tension_capacity,
            "shearCapacity": self.shear_capacity,
            "isEdgeAnchor": self.is_edge_anchor,
            "edgeDistances": self.edge_distances.to_dict(),
            "strengthValues": self.strength_values.to_dict(),
        }


def round_half_up(value: float) -> int:
    # Halves go up (2.5 -> 3, -2.5 -> -2); builtin round() is banker's rounding.
    return int(math.floor(value + 0.5))


def calculate_edge_distances(concrete: ConcreteDimensions, anchor: AnchorDimensions) -> EdgeDistances:
    """
    Offsets of the anchor faces from the block centre line.

    c1_2 / c2_2 are centre + half anchor size, i.e. larger than half the block;
    kept as is for compatibility with existing results.
    """
    half_cw = concrete.width / 2
    half_cd = concrete.depth / 2
    half_aw = anchor.width / 2
    half_ad = anchor.depth / 2
    return EdgeDistances(
        c1_1=half_cw - half_aw,
        c1_2=half_cw + half_aw,
        c2_1=half_cd - half_ad,
        c2_2=half_cd + half_ad,
    )


def capacity_breakdown(
    properties: ConcreteProperties,
    concrete: ConcreteDimensions,
    anchor: AnchorDimensions,
) -> CapacityBreakdown:
    strength = parse_strength(properties.quality)
    edges = calculate_edge_distances(concrete, anchor)

    min_edge = edges.minimum
    critical_edge = CRITICAL_EDGE_FACTOR * anchor.embed_depth
    is_edge_anchor = min_edge < critical_edge

    base = (
        math.sqrt(strength.cylindrical_strength)
        * float(anchor.embed_depth) ** 1.5
        * (anchor.width / REFERENCE_ANCHOR_WIDTH)
    )
    edge_factor = min(1.0, min_edge / critical_edge) if is_edge_anchor else 1.0
    cracked_factor = CRACKED_REDUCTION if properties.is_cracked else 1.0

    return CapacityBreakdown(
        strength=strength,
        edge_distances=edges,
        min_edge_distance=min_edge,
        critical_edge_distance=critical_edge,
        is_edge_anchor=is_edge_anchor,
        base_capacity=base,
        edge_reduction_factor=edge_factor,
        cracked_reduction_factor=cracked_factor,
        tension_unrounded=base * edge_factor * cracked_factor,
    )


def compute_capacity(
    properties: ConcreteProperties,
    concrete: ConcreteDimensions,
    anchor: AnchorDimensions,
) -> CapacityResult:
    """
    Tension/shear capacity (kN) of a single anchor.

    Caller is expected to run validate_fit() first; an invalid configuration
    is not rejected here.
    """
    bd = capacity_breakdown(properties, concrete, anchor)
    tension = round_half_up(bd.tension_unrounded)
    # shear derives from the rounded tension value
    shear = round_half_up(SHEAR_TO_TENSION * tension)
    return CapacityResult(
        tension_capacity=tension,
        shear_capacity=shear,
        is_edge_anchor=bd.is_edge_anchor,
        edge_distances=bd.edge_distances,
        strength_values=bd.strength,
    )
