from __future__ import annotations

import pandas as pd
import streamlit as st

from anchor_core.pipeline import evaluate_frame
from app.i18n import t
from app.validation import validate_batch_rows


def render(state: dict) -> None:
    st.header(t("batch.header"))
    st.caption(t("batch.hint"))

    uploaded = st.file_uploader(t("batch.upload"), type=["csv"])
    if uploaded is None:
        return

    try:
        df = pd.read_csv(uploaded)
    except (ValueError, pd.errors.ParserError) as exc:
        st.error(t("errors.csv_failed", exc=exc))
        return

    check = validate_batch_rows(df, translator=t)
    for warn in check.warnings:
        st.warning(warn)
    if check.has_errors:
        st.error("\n".join(check.errors))
        return

    out = evaluate_frame(df)
    st.dataframe(out, hide_index=True)
    st.download_button(
        t("batch.download_csv"),
        data=out.to_csv(index=False).encode("utf-8"),
        file_name="anchor_results.csv",
        mime="text/csv",
    )
