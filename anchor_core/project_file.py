from __future__ import annotations

import json
import logging
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any, Mapping

from .constraints import DEFAULT_SETTINGS
from .model import Configuration

logger = logging.getLogger(__name__)

# UI-only flags that never go into a project file.
_UI_ONLY_SETTINGS = ("showSettings",)


def _iso_utc_now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds")


def default_file_name(day: date | None = None) -> str:
    day = day or datetime.now(timezone.utc).date()
    return f"construction-model-{day.isoformat()}.json"


def merge_settings(base: Mapping[str, Any] | None, overrides: Mapping[str, Any] | None) -> dict[str, Any]:
    merged = dict(DEFAULT_SETTINGS if base is None else base)
    if overrides:
        merged.update({k: v for k, v in overrides.items() if k not in _UI_ONLY_SETTINGS})
    return merged


def build_project_payload(
    configuration: Configuration,
    settings: Mapping[str, Any] | None = None,
    *,
    timestamp: str | None = None,
) -> dict[str, Any]:
    payload: dict[str, Any] = configuration.to_dict()
    payload["settings"] = {**merge_settings(None, settings), "showSettings": False}
    payload["timestamp"] = timestamp or _iso_utc_now()
    return payload


def parse_project_payload(data: Any) -> tuple[Configuration, dict[str, Any]]:
    """
    Configuration + settings from a project payload.

    Unknown keys are ignored; UI-only settings are dropped.
    """
    if not isinstance(data, dict):
        raise ValueError("Invalid JSON file: root must be an object")
    settings_raw = data.get("settings")
    if settings_raw is not None and not isinstance(settings_raw, dict):
        raise ValueError("Invalid JSON file: settings must be an object")
    configuration = Configuration.from_dict(data)
    return configuration, merge_settings(None, settings_raw)


def loads_project(text: str) -> tuple[Configuration, dict[str, Any]]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON file: {exc}") from exc
    return parse_project_payload(data)


def dumps_project(payload: Mapping[str, Any]) -> str:
    return json.dumps(payload, ensure_ascii=False, indent=2) + "\n"


def read_project_file(path: str | Path) -> tuple[Configuration, dict[str, Any]]:
    project_path = Path(path)
    logger.info("Loading project from: %s", project_path)
    return loads_project(project_path.read_text(encoding="utf-8"))


def write_project_file(path: str | Path, payload: Mapping[str, Any]) -> Path:
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(dumps_project(payload), encoding="utf-8")
    logger.info("Project saved to: %s", out_path)
    return out_path
