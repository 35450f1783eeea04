from __future__ import annotations

import pandas as pd

from app.validation import validate_batch_rows, validate_properties


def test_validate_properties_reports_bad_grade_and_material() -> None:
    errors = validate_properties({"quality": "C30-37", "covering": "x", "baseMaterial": "Wet"})
    joined = "\n".join(errors)
    assert "quality must look like C<cyl>/<cube>" in joined
    assert "baseMaterial must be Cracked or Non-cracked" in joined
    assert "covering must be a number" in joined


def test_validate_properties_accepts_defaults() -> None:
    assert validate_properties({"quality": "C20/25", "covering": 25, "baseMaterial": "Cracked"}) == []
    assert validate_properties({"quality": "C20/25", "covering": 25, "baseMaterial": "NonCracked"}) == []


def test_validate_batch_rows_blocks_invalid_values() -> None:
    df = pd.DataFrame(
        [
            {"name": "ok", "concrete_thickness": 300, "quality": "C20/25", "base_material": "Cracked"},
            {"name": "bad", "concrete_thickness": -1, "quality": "B25", "base_material": "Wet"},
            {"name": None, "concrete_thickness": None, "quality": None, "base_material": None},
        ]
    )
    res = validate_batch_rows(df)
    assert res.has_errors
    assert res.row_status == {0: "OK", 1: "INVALID", 2: "OK"}
    joined = "\n".join(res.errors)
    assert joined.startswith("bad: ")
    assert "concrete_thickness must be > 0" in joined
    assert "quality must look like C<cyl>/<cube>" in joined
    assert "baseMaterial must be Cracked or Non-cracked" in joined


def test_validate_batch_rows_warns_on_inverted_grade() -> None:
    df = pd.DataFrame([{"quality": "C50/40"}])
    res = validate_batch_rows(df)
    assert not res.has_errors
    assert res.warnings == ["row#0: quality: cylinder strength is above cube strength"]


def test_validate_batch_rows_flags_oversized_grade() -> None:
    df = pd.DataFrame([{"name": "huge", "quality": "C" + "9" * 5000 + "/37"}])
    res = validate_batch_rows(df)
    assert res.row_status == {0: "INVALID"}
    assert "quality must look like C<cyl>/<cube>" in res.errors[0]
    assert res.warnings == []
