"""
components/detail.py — Modal with every attribute of the selected opportunity.
"""

import streamlit as st

from components.matrix import risk_badge
from opportunity_matrix.models.opportunity import SCORE_FIELD_LABELS, OpportunityDetail
from session import on_dismiss_detail


@st.dialog("Opportunity Details", width="large", on_dismiss=on_dismiss_detail)
def show_detail(detail: OpportunityDetail) -> None:
    op = detail.opportunity

    st.markdown(f"## {op.name}")
    st.caption(f"#{op.id} · {detail.quadrant_label} · {op.technology_type.value}")

    c1, c2, c3 = st.columns(3)
    c1.metric("Impact", detail.impact_category.value, f"{op.overall_business_impact}/10", delta_color="off")
    c2.metric("Feasibility", detail.feasibility_category.value, f"{op.overall_feasibility_readiness}/10", delta_color="off")
    c3.metric("Overall Risk", op.overall_risk, detail.risk_category.value, delta_color="off")

    st.markdown(f"**Risk Rating:** {risk_badge(detail.risk_category.value, op.overall_risk)}")
    if op.quick_win_potential:
        st.markdown("⚡ **Quick-win potential**")
    if op.description:
        st.markdown(f"_{op.description}_")

    st.markdown("#### Scores")
    left, right = st.columns(2)
    for i, (field, label) in enumerate(SCORE_FIELD_LABELS.items()):
        target = left if i % 2 == 0 else right
        target.markdown(f"- {label}: **{getattr(op, field.value)}**")

    if st.button("Close", type="primary", key="detail_close"):
        on_dismiss_detail()
        st.rerun()
