from __future__ import annotations

import json
from datetime import date
from pathlib import Path

import pytest

from anchor_core.clamping import apply_edit
from anchor_core.model import Configuration, default_configuration
from anchor_core.project_file import (
    build_project_payload,
    default_file_name,
    loads_project,
    parse_project_payload,
    read_project_file,
    write_project_file,
)


def test_payload_shape() -> None:
    payload = build_project_payload(default_configuration(), {"showGrid": False, "showSettings": True})
    assert set(payload) == {
        "concreteDimensions",
        "concreteProperties",
        "anchorDimensions",
        "settings",
        "timestamp",
    }
    assert payload["settings"]["showSettings"] is False
    assert payload["settings"]["showGrid"] is False
    assert payload["settings"]["units"] == "mm"
    assert payload["timestamp"].endswith("+00:00")


def test_write_then_read_keeps_configuration(tmp_path: Path) -> None:
    config = apply_edit(default_configuration(), "concrete", "thickness", "150")
    config = apply_edit(config, "properties", "quality", "C35/45")
    out = write_project_file(tmp_path / "nested" / "p.json", build_project_payload(config))
    assert out.read_text(encoding="utf-8").endswith("\n")

    loaded, settings = read_project_file(out)
    assert loaded == config
    assert "showSettings" not in settings
    assert settings["modelQuality"] == "medium"


def test_import_ignores_unknown_and_fills_missing() -> None:
    data = {
        "anchorDimensions": {"embedDepth": 90, "material": "steel"},
        "settings": {"autoSave": False, "showSettings": True, "theme": "dark"},
        "results": {"tensionCapacity": 1},
        "version": 7,
    }
    config, settings = parse_project_payload(data)
    assert config.anchor.embed_depth == 90
    assert config.anchor.width == 50
    assert config.concrete == default_configuration().concrete
    assert settings["autoSave"] is False
    assert settings["theme"] == "dark"
    assert "showSettings" not in settings


def test_invalid_files_raise_value_error() -> None:
    with pytest.raises(ValueError, match="Invalid JSON file"):
        loads_project("{not json")
    with pytest.raises(ValueError, match="Invalid JSON file"):
        loads_project(json.dumps([1, 2, 3]))
    with pytest.raises(ValueError, match="concreteDimensions.width"):
        loads_project(json.dumps({"concreteDimensions": {"width": "wide"}}))
    with pytest.raises(ValueError, match="must be > 0"):
        Configuration.from_dict({"anchorDimensions": {"embedDepth": -5}})


def test_default_file_name() -> None:
    assert default_file_name(date(2026, 10, 19)) == "construction-model-2026-10-19.json"
