from __future__ import annotations

from typing import Any, MutableMapping

from anchor_core.clamping import apply_edit
from anchor_core.constraints import (
    CATEGORY_ANCHOR,
    CATEGORY_CONCRETE,
    CATEGORY_PROPERTIES,
    DEFAULT_SETTINGS,
    dimension_fields,
)
from anchor_core.model import Configuration, default_configuration

PROPERTY_FIELDS = ("quality", "covering", "baseMaterial")


def widget_key(category: str, field_name: str) -> str:
    return f"input.{category}.{field_name}"


def _editable_fields() -> list[tuple[str, str]]:
    fields = [(CATEGORY_CONCRETE, name) for name in dimension_fields(CATEGORY_CONCRETE)]
    fields += [(CATEGORY_ANCHOR, name) for name in dimension_fields(CATEGORY_ANCHOR)]
    fields += [(CATEGORY_PROPERTIES, name) for name in PROPERTY_FIELDS]
    return fields


def _current_value(config: Configuration, category: str, field_name: str) -> Any:
    if category == CATEGORY_PROPERTIES:
        return config.properties.to_dict()[field_name]
    return config.get_dimension(category, field_name)


def sync_widgets(state: MutableMapping[str, Any]) -> None:
    """Write the configuration back into widget state (text inputs hold strings)."""
    config: Configuration = state["configuration"]
    for category, field_name in _editable_fields():
        value = _current_value(config, category, field_name)
        if category == CATEGORY_PROPERTIES and field_name != "covering":
            state[widget_key(category, field_name)] = value
        else:
            state[widget_key(category, field_name)] = str(value)


def init_state(state: MutableMapping[str, Any]) -> None:
    state.setdefault("lang", "EN")
    state.setdefault("configuration", default_configuration())
    state.setdefault("settings", dict(DEFAULT_SETTINGS))
    if widget_key(CATEGORY_CONCRETE, "width") not in state:
        sync_widgets(state)


def on_edit(state: MutableMapping[str, Any], category: str, field_name: str) -> None:
    """Widget callback: route the raw widget value through the clamping engine."""
    raw = state.get(widget_key(category, field_name))
    state["configuration"] = apply_edit(state["configuration"], category, field_name, raw)
    sync_widgets(state)


def replace_configuration(
    state: MutableMapping[str, Any],
    configuration: Configuration,
    settings: dict[str, Any] | None = None,
) -> None:
    state["configuration"] = configuration
    if settings is not None:
        state["settings"] = settings
    sync_widgets(state)


def reset(state: MutableMapping[str, Any]) -> None:
    replace_configuration(state, default_configuration(), dict(DEFAULT_SETTINGS))
