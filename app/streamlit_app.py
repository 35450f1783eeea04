from __future__ import annotations

import logging
import sys
from pathlib import Path
import streamlit as st

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from anchor_core.logging_config import setup_logging  # noqa: E402
from anchor_core.pipeline import evaluate  # noqa: E402
from app import state as app_state  # noqa: E402
from app.i18n import LANGUAGES, t  # noqa: E402
from app.views import (  # noqa: E402
    anchor,
    batch,
    concrete,
    project,
    results,
)


def main() -> None:
    st.set_page_config(page_title="Anchor Capacity", layout="wide")
    state = st.session_state
    if "logging_ready" not in state:
        setup_logging(logging.INFO)
        state["logging_ready"] = True
    app_state.init_state(state)

    with st.sidebar:
        st.title(t("app.title"))
        st.selectbox(t("sidebar.language"), list(LANGUAGES), key="lang")

        page = st.radio(
            t("nav.label"),
            ["concrete", "anchor", "results", "project", "batch"],
            format_func=lambda key: t(f"nav.{key}"),
        )

        st.divider()
        # results stay visible next to every input page
        summary = evaluate(state["configuration"])
        if summary.is_valid:
            st.metric(t("results.tension"), f"{summary.capacity.tension_capacity} kN")
            st.metric(t("results.shear"), f"{summary.capacity.shear_capacity} kN")
        else:
            st.error(t("sidebar.invalid", count=len(summary.validation.errors)))

    pages = {
        "concrete": concrete,
        "anchor": anchor,
        "results": results,
        "project": project,
        "batch": batch,
    }

    pages[page].render(state)


if __name__ == "__main__":
    main()
