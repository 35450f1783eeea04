from __future__ import annotations

import streamlit as st

from anchor_core.pipeline import evaluate
from anchor_core.project_file import (
    build_project_payload,
    default_file_name,
    dumps_project,
    loads_project,
)
from app import state as app_state
from app.i18n import t


def render(state: dict) -> None:
    st.header(t("project.header"))

    st.subheader(t("project.export"))
    payload = build_project_payload(state["configuration"], state.get("settings"))
    result = evaluate(state["configuration"])
    if result.is_valid:
        payload["results"] = result.to_dict()
    st.download_button(
        t("project.download_json"),
        data=dumps_project(payload).encode("utf-8"),
        file_name=default_file_name(),
        mime="application/json",
    )
    with st.popover(t("project.preview")):
        st.json(payload)

    st.subheader(t("project.import"))
    uploaded = st.file_uploader(t("project.upload"), type=["json"])
    if uploaded is not None and st.button(t("project.apply_import")):
        try:
            configuration, settings = loads_project(uploaded.getvalue().decode("utf-8"))
            app_state.replace_configuration(state, configuration, settings)
            st.success(t("project.imported"))
            st.rerun()
        except (ValueError, UnicodeDecodeError) as exc:
            st.error(t("errors.import_failed", exc=exc))

    st.subheader(t("project.reset"))
    if st.button(t("project.reset_btn")):
        app_state.reset(state)
        st.rerun()
