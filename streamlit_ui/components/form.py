"""
components/form.py — Creation form for new opportunities.
"""

import streamlit as st

from opportunity_matrix.models.draft import NUMERIC_FIELDS
from opportunity_matrix.models.enumerations import ScoreField, TechnologyType
from opportunity_matrix.models.opportunity import SCORE_FIELD_LABELS
from opportunity_matrix.scoring.utils import SCORE_MAX, SCORE_MIN
from session import (
    field_errors,
    on_cancel,
    on_field_change,
    on_submit,
    sync_draft_widgets,
    widget_key,
)

TECHNOLOGY_OPTIONS = [t.value for t in TechnologyType]


def _error(field: str) -> None:
    err = field_errors().get(field)
    if err is not None:
        st.caption(f":red[{err.message}]")


def render_form() -> None:
    sync_draft_widgets()

    with st.container(border=True):
        st.subheader("➕ New AI Opportunity")

        st.text_input(
            "Name", key=widget_key("name"),
            on_change=on_field_change, args=("name",),
        )
        _error("name")
        st.text_area(
            "Description", key=widget_key("description"),
            on_change=on_field_change, args=("description",),
        )
        _error("description")

        st.markdown("**Scores** (1 = lowest, 10 = highest)")
        cols = st.columns(2)
        for i, field in enumerate(NUMERIC_FIELDS):
            with cols[i % 2]:
                st.number_input(
                    SCORE_FIELD_LABELS[ScoreField(field)],
                    min_value=SCORE_MIN, max_value=SCORE_MAX, step=1,
                    key=widget_key(field),
                    on_change=on_field_change, args=(field,),
                )
                _error(field)

        c1, c2 = st.columns(2)
        with c1:
            st.checkbox(
                "Quick-win potential", key=widget_key("quick_win_potential"),
                on_change=on_field_change, args=("quick_win_potential",),
            )
        with c2:
            st.selectbox(
                "Technology type", TECHNOLOGY_OPTIONS,
                key=widget_key("technology_type"),
                on_change=on_field_change, args=("technology_type",),
            )
            _error("technology_type")

        b1, b2, _ = st.columns([1, 1, 4])
        b1.button("Add Opportunity", type="primary", on_click=on_submit, key="form_submit")
        b2.button("Cancel", on_click=on_cancel, key="form_cancel")
