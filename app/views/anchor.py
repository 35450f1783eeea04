from __future__ import annotations

import streamlit as st

from anchor_core.constraints import CATEGORY_ANCHOR, get_range
from anchor_core.fit_validation import max_embedment_depth
from app import state as app_state
from app.i18n import t


def _dimension_input(state: dict, field_name: str, label: str) -> None:
    rng = get_range(CATEGORY_ANCHOR, field_name)
    st.text_input(
        label,
        key=app_state.widget_key(CATEGORY_ANCHOR, field_name),
        on_change=app_state.on_edit,
        args=(state, CATEGORY_ANCHOR, field_name),
        help=t("inputs.range_help", min=rng.min, max=rng.max),
    )


def render(state: dict) -> None:
    st.header(t("anchor.header"))

    cols = st.columns(3)
    with cols[0]:
        _dimension_input(state, "width", t("anchor.width"))
    with cols[1]:
        _dimension_input(state, "height", t("anchor.height"))
    with cols[2]:
        _dimension_input(state, "depth", t("anchor.depth"))

    _dimension_input(state, "embedDepth", t("anchor.embed_depth"))
    limit = max_embedment_depth(state["configuration"].concrete)
    st.caption(t("anchor.embed_limit", limit=limit))
