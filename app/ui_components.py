from __future__ import annotations

from typing import Callable

import streamlit as st

from anchor_core.fit_validation import ValidationResult


def _status_style(status: str) -> tuple[str, str]:
    """
    Returns (bg_color, fg_color) for a status pill.
    Colors are chosen to be readable in both Streamlit light/dark themes.
    """
    s = (status or "").upper().strip()
    if s == "VALID":
        return "#1f7a3a", "white"
    if s == "EDGE":
        return "#b45309", "white"
    if s == "INVALID":
        return "#b91c1c", "white"
    return "#374151", "white"


def status_chip(label: str, status: str, *, t: Callable[..., str] | None = None) -> None:
    bg, fg = _status_style(status)
    status_label = t(f"status.{status.lower()}") if t else status
    st.markdown(
        f"""
        <span style="
          display:inline-block;
          padding:0.15rem 0.55rem;
          border-radius:999px;
          background:{bg};
          color:{fg};
          font-weight:600;
          font-size:0.85rem;
          line-height:1.4;
          white-space:nowrap;
        ">{label}: {status_label}</span>
        """,
        unsafe_allow_html=True,
    )


def validation_errors(result: ValidationResult, *, t: Callable[..., str] | None = None) -> None:
    if result.is_valid:
        return
    title = t("results.invalid") if t else "Configuration is invalid"
    st.error(title + "\n\n" + "\n".join(f"- {err}" for err in result.errors))
