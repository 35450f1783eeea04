from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

import pandas as pd

from .capacity import CapacityResult, compute_capacity
from .fit_validation import ValidationResult, validate_fit
from .model import Configuration

logger = logging.getLogger(__name__)

# Flat column -> (group, wire field) for batch frames.
FRAME_COLUMNS: dict[str, tuple[str, str]] = {
    "concrete_width": ("concreteDimensions", "width"),
    "concrete_height": ("concreteDimensions", "height"),
    "concrete_depth": ("concreteDimensions", "depth"),
    "concrete_thickness": ("concreteDimensions", "thickness"),
    "quality": ("concreteProperties", "quality"),
    "covering": ("concreteProperties", "covering"),
    "base_material": ("concreteProperties", "baseMaterial"),
    "anchor_width": ("anchorDimensions", "width"),
    "anchor_height": ("anchorDimensions", "height"),
    "anchor_depth": ("anchorDimensions", "depth"),
    "embed_depth": ("anchorDimensions", "embedDepth"),
}

RESULT_COLUMNS = [
    "is_valid",
    "errors",
    "tension_kn",
    "shear_kn",
    "is_edge_anchor",
    "c1_1",
    "c1_2",
    "c2_1",
    "c2_2",
    "fck",
    "fck_cube",
    "fctm",
]


@dataclass(frozen=True)
class EvaluationResult:
    validation: ValidationResult
    capacity: CapacityResult | None

    @property
    def is_valid(self) -> bool:
        return self.validation.is_valid

    def to_dict(self) -> dict[str, Any]:
        out = self.validation.to_dict()
        if self.capacity is not None:
            out.update(self.capacity.to_dict())
        return out


def evaluate(configuration: Configuration) -> EvaluationResult:
    """
    Full recomputation for one configuration: fit check, then capacity.
    Capacity is withheld when the fit check fails.
    """
    validation = validate_fit(configuration.concrete, configuration.anchor)
    if not validation.is_valid:
        logger.debug("Configuration rejected: %s", "; ".join(validation.errors))
        return EvaluationResult(validation=validation, capacity=None)
    capacity = compute_capacity(configuration.properties, configuration.concrete, configuration.anchor)
    return EvaluationResult(validation=validation, capacity=capacity)


def evaluate_record(record: Mapping[str, Any]) -> dict[str, Any]:
    """Dict in (project-file superset), dict out."""
    return evaluate(Configuration.from_dict(record)).to_dict()


def _row_to_record(row: Mapping[str, Any]) -> dict[str, dict[str, Any]]:
    record: dict[str, dict[str, Any]] = {
        "concreteDimensions": {},
        "concreteProperties": {},
        "anchorDimensions": {},
    }
    for column, (group, name) in FRAME_COLUMNS.items():
        if column not in row:
            continue
        value = row[column]
        if value is None or (not isinstance(value, str) and pd.isna(value)):
            continue
        record[group][name] = value
    return record


def _result_row(result: EvaluationResult) -> dict[str, Any]:
    out: dict[str, Any] = {column: None for column in RESULT_COLUMNS}
    out["is_valid"] = result.is_valid
    out["errors"] = "; ".join(result.validation.errors)
    cap = result.capacity
    if cap is not None:
        out.update(
            {
                "tension_kn": cap.tension_capacity,
                "shear_kn": cap.shear_capacity,
                "is_edge_anchor": cap.is_edge_anchor,
                "c1_1": cap.edge_distances.c1_1,
                "c1_2": cap.edge_distances.c1_2,
                "c2_1": cap.edge_distances.c2_1,
                "c2_2": cap.edge_distances.c2_2,
                "fck": cap.strength_values.cylindrical_strength,
                "fck_cube": cap.strength_values.cubic_strength,
                "fctm": cap.strength_values.tensile_strength,
            }
        )
    return out


def evaluate_frame(df: pd.DataFrame) -> pd.DataFrame:
    """
    Batch evaluation: one configuration per row.

    Missing input columns take table defaults; other columns pass through.
    Capacity columns stay empty for rows that fail the fit check.
    """
    rows: list[dict[str, Any]] = []
    for idx, row in df.iterrows():
        try:
            config = Configuration.from_dict(_row_to_record(row.to_dict()))
        except ValueError as exc:
            raise ValueError(f"row {idx}: {exc}") from exc
        rows.append(_result_row(evaluate(config)))
    results = pd.DataFrame(rows, columns=RESULT_COLUMNS, index=df.index)
    passthrough = df.drop(columns=[c for c in RESULT_COLUMNS if c in df.columns])
    return pd.concat([passthrough, results], axis=1)
