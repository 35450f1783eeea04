from __future__ import annotations

import streamlit as st

from anchor_core.constraints import (
    BASE_MATERIAL_OPTIONS,
    CATEGORY_CONCRETE,
    CATEGORY_PROPERTIES,
    CONCRETE_COVERING_CONSTRAINTS,
    CONCRETE_QUALITY_OPTIONS,
    get_range,
)
from app import state as app_state
from app.i18n import t
from app.validation import validate_properties


def _dimension_input(state: dict, field_name: str, label: str) -> None:
    rng = get_range(CATEGORY_CONCRETE, field_name)
    st.text_input(
        label,
        key=app_state.widget_key(CATEGORY_CONCRETE, field_name),
        on_change=app_state.on_edit,
        args=(state, CATEGORY_CONCRETE, field_name),
        help=t("inputs.range_help", min=rng.min, max=rng.max),
    )


def render(state: dict) -> None:
    st.header(t("concrete.header"))

    qualities = list(CONCRETE_QUALITY_OPTIONS)
    current_quality = state["configuration"].properties.quality
    if current_quality not in qualities:
        # imported projects may carry a grade outside the option list
        qualities.append(current_quality)
    st.selectbox(
        t("concrete.quality"),
        options=qualities,
        key=app_state.widget_key(CATEGORY_PROPERTIES, "quality"),
        on_change=app_state.on_edit,
        args=(state, CATEGORY_PROPERTIES, "quality"),
    )

    _dimension_input(state, "thickness", t("concrete.thickness"))

    st.text_input(
        t("concrete.covering"),
        key=app_state.widget_key(CATEGORY_PROPERTIES, "covering"),
        on_change=app_state.on_edit,
        args=(state, CATEGORY_PROPERTIES, "covering"),
        help=t(
            "inputs.range_help",
            min=CONCRETE_COVERING_CONSTRAINTS.min,
            max=CONCRETE_COVERING_CONSTRAINTS.max,
        ),
    )

    materials = list(BASE_MATERIAL_OPTIONS)
    current_material = state["configuration"].properties.base_material
    if current_material not in materials:
        materials.append(current_material)
    st.radio(
        t("concrete.base_material"),
        options=materials,
        key=app_state.widget_key(CATEGORY_PROPERTIES, "baseMaterial"),
        on_change=app_state.on_edit,
        args=(state, CATEGORY_PROPERTIES, "baseMaterial"),
        horizontal=True,
    )

    st.subheader(t("concrete.dimensions"))
    cols = st.columns(3)
    with cols[0]:
        _dimension_input(state, "width", t("concrete.width"))
    with cols[1]:
        _dimension_input(state, "height", t("concrete.height"))
    with cols[2]:
        _dimension_input(state, "depth", t("concrete.depth"))

    for err in validate_properties(state["configuration"].properties.to_dict(), translator=t):
        st.warning(err)
