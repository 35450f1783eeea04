from __future__ import annotations

from app import state as app_state
from anchor_core.model import default_configuration


def _fresh_state() -> dict:
    state: dict = {}
    app_state.init_state(state)
    return state


def test_init_state_populates_widgets() -> None:
    state = _fresh_state()
    assert state["configuration"] == default_configuration()
    assert state["lang"] == "EN"
    assert state[app_state.widget_key("concrete", "thickness")] == "300"
    assert state[app_state.widget_key("anchor", "embedDepth")] == "70"
    assert state[app_state.widget_key("properties", "quality")] == "C20/25"


def test_edit_goes_through_clamping_and_resyncs_widgets() -> None:
    state = _fresh_state()
    state[app_state.widget_key("anchor", "embedDepth")] = "250"
    app_state.on_edit(state, "anchor", "embedDepth")
    assert state["configuration"].anchor.embed_depth == 250

    state[app_state.widget_key("concrete", "thickness")] = "150"
    app_state.on_edit(state, "concrete", "thickness")
    assert state["configuration"].concrete.thickness == 150
    assert state["configuration"].anchor.embed_depth == 140
    assert state[app_state.widget_key("anchor", "embedDepth")] == "140"


def test_non_numeric_widget_value_is_reverted() -> None:
    state = _fresh_state()
    state[app_state.widget_key("concrete", "width")] = "abc"
    app_state.on_edit(state, "concrete", "width")
    assert state["configuration"].concrete.width == 500
    assert state[app_state.widget_key("concrete", "width")] == "500"


def test_reset_restores_defaults() -> None:
    state = _fresh_state()
    state[app_state.widget_key("properties", "covering")] = "80"
    app_state.on_edit(state, "properties", "covering")
    state["settings"]["showGrid"] = False
    app_state.reset(state)
    assert state["configuration"] == default_configuration()
    assert state["settings"]["showGrid"] is True
    assert state[app_state.widget_key("properties", "covering")] == "25"
