# tests/test_dashboard.py

"""
Dashboard Controller Tests - command dispatch, published updates and views
"""

import pytest

from opportunity_matrix.core.exceptions import EntityNotFoundException, FormStateException
from opportunity_matrix.models.events import (
    CancelDraft,
    DismissDetail,
    DraftChanged,
    DraftRejected,
    FormVisibilityChanged,
    OpportunityCreated,
    SelectionChanged,
    SelectOpportunity,
    SubmitDraft,
    ToggleForm,
    UpdateDraftField,
)


@pytest.fixture
def updates(controller):
    received = []
    controller.subscribe(received.append)
    return received


def fill(controller, data):
    for field, value in data.items():
        controller.dispatch(UpdateDraftField(field, value))


class TestFormCommands:

    def test_toggle(self, controller, updates):
        assert controller.dispatch(ToggleForm()) == FormVisibilityChanged(visible=True)
        assert controller.dispatch(ToggleForm()) == FormVisibilityChanged(visible=False)
        assert updates == [FormVisibilityChanged(True), FormVisibilityChanged(False)]

    def test_update_field_reports_only_its_errors(self, controller):
        controller.dispatch(ToggleForm())
        update = controller.dispatch(UpdateDraftField("data_quality", "abc"))
        assert isinstance(update, DraftChanged)
        assert update.value == "abc"
        assert [e.field for e in update.errors] == ["data_quality"]

    def test_update_valid_field_has_no_errors(self, controller):
        update = controller.dispatch(UpdateDraftField("data_quality", "7"))
        assert update == DraftChanged(field="data_quality", value=7, errors=[])

    def test_submit_valid_draft(self, controller, updates, quick_win_data):
        controller.dispatch(ToggleForm())
        fill(controller, quick_win_data)
        update = controller.dispatch(SubmitDraft())

        assert isinstance(update, OpportunityCreated)
        assert update.opportunity.id == 15
        assert update.opportunity.overall_risk == 2
        assert updates[-1] is update
        assert controller.form.visible is False

        grid = controller.grid()
        assert grid.total == 15
        assert [i.id for i in grid.cell("0-0").items] == [1, 2, 15]

    def test_submit_invalid_draft(self, controller):
        controller.dispatch(ToggleForm())
        update = controller.dispatch(SubmitDraft())
        assert isinstance(update, DraftRejected)
        assert [e.field for e in update.errors] == ["name"]
        assert len(controller.repository) == 14
        assert controller.form.visible is True

    def test_submit_long_name_is_rejected(self, controller, updates, valid_opportunity_data):
        controller.dispatch(ToggleForm())
        fill(controller, {**valid_opportunity_data, "name": "A" * 300})
        update = controller.dispatch(SubmitDraft())
        assert isinstance(update, DraftRejected)
        assert [e.field for e in update.errors] == ["name"]
        assert updates[-1] is update
        assert len(controller.repository) == 14

    def test_submit_hidden_form_raises(self, controller):
        with pytest.raises(FormStateException):
            controller.dispatch(SubmitDraft())

    def test_cancel(self, controller, valid_opportunity_data):
        controller.dispatch(ToggleForm())
        fill(controller, valid_opportunity_data)
        assert controller.dispatch(CancelDraft()) == FormVisibilityChanged(visible=False)
        assert controller.form.draft["name"] == ""
        assert len(controller.repository) == 14


class TestSelection:

    def test_select_and_dismiss(self, controller, updates):
        assert controller.selected is None
        assert controller.dispatch(SelectOpportunity(5)) == SelectionChanged(opportunity_id=5)

        detail = controller.selected
        assert detail.opportunity.id == 5
        assert detail.cell_id == "0-2"

        assert controller.dispatch(DismissDetail()) == SelectionChanged(opportunity_id=None)
        assert controller.selected is None
        assert len(updates) == 2

    def test_select_unknown_raises(self, controller, updates):
        with pytest.raises(EntityNotFoundException):
            controller.dispatch(SelectOpportunity(999))
        assert controller.selected_id is None
        assert updates == []

    def test_selecting_another_replaces(self, controller):
        controller.dispatch(SelectOpportunity(1))
        controller.dispatch(SelectOpportunity(2))
        assert controller.selected.opportunity.id == 2


class TestSubscriptions:

    def test_unsubscribe(self, controller):
        received = []
        unsubscribe = controller.subscribe(received.append)
        controller.dispatch(ToggleForm())
        unsubscribe()
        controller.dispatch(ToggleForm())
        assert len(received) == 1

    def test_unsubscribe_twice_is_harmless(self, controller):
        unsubscribe = controller.subscribe(lambda update: None)
        unsubscribe()
        unsubscribe()

    def test_unknown_command(self, controller):
        with pytest.raises(TypeError):
            controller.dispatch("toggle")
