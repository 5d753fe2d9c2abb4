"""
session.py — Per-session controller and the widget callbacks that feed it.

Widgets never mutate state directly: each callback turns a widget event into
a dashboard command and dispatches it.
"""

from typing import Dict

import streamlit as st

from opportunity_matrix.core.dependencies import get_dashboard_controller
from opportunity_matrix.models.draft import DRAFT_FIELDS, FieldValidationError
from opportunity_matrix.models.events import (
    CancelDraft,
    DismissDetail,
    DraftChanged,
    DraftRejected,
    SelectOpportunity,
    SubmitDraft,
    ToggleForm,
    UpdateDraftField,
)
from opportunity_matrix.services.dashboard import DashboardController

CONTROLLER_KEY = "controller"
ERRORS_KEY = "draft_errors"


def widget_key(field: str) -> str:
    return f"draft_{field}"


def get_controller() -> DashboardController:
    if CONTROLLER_KEY not in st.session_state:
        st.session_state[CONTROLLER_KEY] = get_dashboard_controller()
    return st.session_state[CONTROLLER_KEY]


def field_errors() -> Dict[str, FieldValidationError]:
    return st.session_state.get(ERRORS_KEY, {})


def sync_draft_widgets() -> None:
    """Seed widget state from the draft for any field without a widget value."""
    draft = get_controller().form.draft
    for field in DRAFT_FIELDS:
        key = widget_key(field)
        if key not in st.session_state:
            st.session_state[key] = draft[field]


def _clear_draft_widgets() -> None:
    for field in DRAFT_FIELDS:
        st.session_state.pop(widget_key(field), None)
    st.session_state[ERRORS_KEY] = {}


# ---------------------------------------------------------------------------
# Callbacks
# ---------------------------------------------------------------------------

def on_toggle_form() -> None:
    get_controller().dispatch(ToggleForm())


def on_field_change(field: str) -> None:
    update = get_controller().dispatch(UpdateDraftField(field, st.session_state[widget_key(field)]))
    if isinstance(update, DraftChanged):
        errors = dict(field_errors())
        errors.pop(field, None)
        for e in update.errors:
            errors[e.field] = e
        st.session_state[ERRORS_KEY] = errors


def on_submit() -> None:
    update = get_controller().dispatch(SubmitDraft())
    if isinstance(update, DraftRejected):
        st.session_state[ERRORS_KEY] = {e.field: e for e in update.errors}
    else:
        _clear_draft_widgets()


def on_cancel() -> None:
    get_controller().dispatch(CancelDraft())
    _clear_draft_widgets()


def on_select(opportunity_id: int) -> None:
    get_controller().dispatch(SelectOpportunity(opportunity_id))


def on_dismiss_detail() -> None:
    get_controller().dispatch(DismissDetail())

