from __future__ import annotations

import pandas as pd
import streamlit as st

from anchor_core.capacity import capacity_breakdown
from anchor_core.pipeline import evaluate
from app.i18n import t
from app.ui_components import status_chip, validation_errors


def render(state: dict) -> None:
    st.header(t("results.header"))

    config = state["configuration"]
    # full recomputation on every rerun
    result = evaluate(config)
    if not result.is_valid:
        status_chip(t("chips.fit"), "INVALID", t=t)
        validation_errors(result.validation, t=t)
        return

    cap = result.capacity
    status_chip(t("chips.fit"), "EDGE" if cap.is_edge_anchor else "VALID", t=t)

    st.subheader(t("results.capacity"))
    cols = st.columns(2)
    cols[0].metric(t("results.tension"), f"{cap.tension_capacity} kN")
    cols[1].metric(t("results.shear"), f"{cap.shear_capacity} kN")

    st.subheader(t("results.edge_distances"))
    edges = cap.edge_distances
    st.dataframe(
        pd.DataFrame(
            [
                {"edge": "c1,1", "mm": round(edges.c1_1)},
                {"edge": "c1,2", "mm": round(edges.c1_2)},
                {"edge": "c2,1", "mm": round(edges.c2_1)},
                {"edge": "c2,2", "mm": round(edges.c2_2)},
            ]
        ),
        hide_index=True,
    )
    st.write(t("results.edge_anchor", value=t("common.yes") if cap.is_edge_anchor else t("common.no")))

    st.subheader(t("results.strength"))
    sv = cap.strength_values
    cols = st.columns(3)
    cols[0].metric(t("results.fck"), f"{sv.cylindrical_strength} MPa")
    cols[1].metric(t("results.fck_cube"), f"{sv.cubic_strength} MPa")
    cols[2].metric(t("results.fctm"), f"{sv.tensile_strength:.2f} MPa")

    with st.expander(t("results.details")):
        bd = capacity_breakdown(config.properties, config.concrete, config.anchor)
        st.json(
            {
                "minEdgeDistance": bd.min_edge_distance,
                "criticalEdgeDistance": bd.critical_edge_distance,
                "baseCapacity": round(bd.base_capacity, 1),
                "edgeReductionFactor": bd.edge_reduction_factor,
                "crackedReductionFactor": bd.cracked_reduction_factor,
            }
        )
