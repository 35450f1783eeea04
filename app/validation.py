from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable

import pandas as pd

from anchor_core.constraints import BASE_MATERIAL_OPTIONS
from anchor_core.pipeline import FRAME_COLUMNS
from anchor_core.strength import is_valid_grade, parse_strength

Translator = Callable[..., str]

# Default English strings when translator is not provided.
_VALIDATION_EN = {
    "validation.field_required": "{field} is required",
    "validation.field_number": "{field} must be a number",
    "validation.field_positive": "{field} must be > 0",
    "validation.quality_format": "quality must look like C<cyl>/<cube>",
    "validation.base_material": "baseMaterial must be Cracked or Non-cracked",
    "validation.cyl_gt_cube": "quality: cylinder strength is above cube strength",
}

_BASE_MATERIAL_ACCEPTED = set(BASE_MATERIAL_OPTIONS) | {"NonCracked"}
_NUMERIC_COLUMNS = [c for c, (_, name) in FRAME_COLUMNS.items() if name not in ("quality", "baseMaterial")]


def _tr(translator: Translator | None, key: str, **kwargs: Any) -> str:
    if translator is None:
        raw = _VALIDATION_EN.get(key, key)
        return raw.format(**kwargs) if kwargs else raw
    return translator(key, **kwargs)


@dataclass(frozen=True)
class RowsValidationResult:
    errors: list[str]
    warnings: list[str]
    row_status: dict[Any, str]

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)


def is_finite(value: Any) -> bool:
    try:
        num = float(value)
    except (TypeError, ValueError):
        return False
    return math.isfinite(num)


def _is_blank(value: Any) -> bool:
    if value is None or value == "":
        return True
    return not isinstance(value, str) and pd.isna(value)


def _grade_warnings(quality: str, translator: Translator | None) -> list[str]:
    values = parse_strength(quality)
    if values.cylindrical_strength > values.cubic_strength:
        return [_tr(translator, "validation.cyl_gt_cube")]
    return []


def validate_properties(data: dict[str, Any], *, translator: Translator | None = None) -> list[str]:
    """
    Operator input checks for concreteProperties (no formulas).

    The engine degrades a bad grade to zero strength; this is where it is
    reported instead.
    """
    errors: list[str] = []
    quality = data.get("quality")
    if _is_blank(quality):
        errors.append(_tr(translator, "validation.field_required", field="quality"))
    elif not is_valid_grade(quality):
        errors.append(_tr(translator, "validation.quality_format"))

    base_material = data.get("baseMaterial")
    if base_material not in _BASE_MATERIAL_ACCEPTED:
        errors.append(_tr(translator, "validation.base_material"))

    covering = data.get("covering")
    if _is_blank(covering):
        errors.append(_tr(translator, "validation.field_required", field="covering"))
    elif not is_finite(covering):
        errors.append(_tr(translator, "validation.field_number", field="covering"))
    elif float(covering) <= 0:
        errors.append(_tr(translator, "validation.field_positive", field="covering"))
    return errors


def validate_batch_rows(df: pd.DataFrame, *, translator: Translator | None = None) -> RowsValidationResult:
    """
    Validates batch input rows before evaluate_frame().

    Blank cells are allowed (table defaults apply); present values must be
    well-formed.
    """
    errors: list[str] = []
    warnings: list[str] = []
    statuses: dict[Any, str] = {}

    for idx, row in df.iterrows():
        row_errors: list[str] = []
        row_warnings: list[str] = []
        name = row.get("name")
        label = f"row#{idx}" if _is_blank(name) else str(name)

        for column in _NUMERIC_COLUMNS:
            value = row.get(column)
            if _is_blank(value):
                continue
            if not is_finite(value):
                row_errors.append(_tr(translator, "validation.field_number", field=column))
            elif float(value) <= 0:
                row_errors.append(_tr(translator, "validation.field_positive", field=column))

        quality = row.get("quality")
        if not _is_blank(quality):
            if not is_valid_grade(quality):
                row_errors.append(_tr(translator, "validation.quality_format"))
            else:
                row_warnings.extend(_grade_warnings(quality, translator))

        base_material = row.get("base_material")
        if not _is_blank(base_material) and base_material not in _BASE_MATERIAL_ACCEPTED:
            row_errors.append(_tr(translator, "validation.base_material"))

        if row_errors:
            errors.append(f"{label}: " + "; ".join(row_errors))
            statuses[idx] = "INVALID"
        else:
            statuses[idx] = "OK"

        if row_warnings:
            warnings.append(f"{label}: " + "; ".join(row_warnings))

    return RowsValidationResult(errors=errors, warnings=warnings, row_status=statuses)
