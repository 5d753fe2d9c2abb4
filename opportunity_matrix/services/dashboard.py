"""
Dashboard Controller - AI Opportunities Prioritization Matrix
opportunity_matrix/services/dashboard.py

Single owner of session state: the store, the creation form and the
detail selection. Every change goes through dispatch(); listeners are told
about each change with a DashboardUpdate.
"""

from typing import Callable, Dict, List, Optional, Type

import structlog

from opportunity_matrix.core.exceptions import DraftValidationException
from opportunity_matrix.models.events import (
    CancelDraft,
    DashboardUpdate,
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
from opportunity_matrix.models.grid import GridView
from opportunity_matrix.models.opportunity import OpportunityDetail
from opportunity_matrix.repositories.opportunity_repository import OpportunityRepository
from opportunity_matrix.services.form_controller import FormController
from opportunity_matrix.services.grid_presenter import GridPresenter

logger = structlog.get_logger(__name__)

Listener = Callable[[DashboardUpdate], None]


class DashboardController:
    """Top-level controller for one dashboard session."""

    def __init__(
        self,
        repository: OpportunityRepository,
        form: Optional[FormController] = None,
        presenter: Optional[GridPresenter] = None,
    ):
        self.repository = repository
        self.form = form or FormController(repository)
        self.presenter = presenter or GridPresenter()
        self.selected_id: Optional[int] = None
        self._listeners: List[Listener] = []
        self._handlers: Dict[Type, Callable] = {
            ToggleForm: self._on_toggle_form,
            UpdateDraftField: self._on_update_draft_field,
            SubmitDraft: self._on_submit_draft,
            CancelDraft: self._on_cancel_draft,
            SelectOpportunity: self._on_select_opportunity,
            DismissDetail: self._on_dismiss_detail,
        }

    # ------------------------------------------------------------------
    # Observation
    # ------------------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _publish(self, update: DashboardUpdate) -> DashboardUpdate:
        for listener in list(self._listeners):
            listener(update)
        return update

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def dispatch(self, command) -> DashboardUpdate:
        """Apply one command and publish the resulting update."""
        handler = self._handlers.get(type(command))
        if handler is None:
            raise TypeError(f"Unsupported dashboard command: {type(command).__name__}")
        update = handler(command)
        logger.debug("dashboard_dispatch", command=type(command).__name__, update=type(update).__name__)
        return self._publish(update)

    def _on_toggle_form(self, command: ToggleForm) -> DashboardUpdate:
        return FormVisibilityChanged(visible=self.form.toggle())

    def _on_update_draft_field(self, command: UpdateDraftField) -> DashboardUpdate:
        stored = self.form.update_field(command.field, command.value)
        field_errors = [e for e in self.form.validate() if e.field == command.field]
        return DraftChanged(field=command.field, value=stored, errors=field_errors)

    def _on_submit_draft(self, command: SubmitDraft) -> DashboardUpdate:
        try:
            opportunity = self.form.submit()
        except DraftValidationException as e:
            return DraftRejected(errors=e.errors)
        return OpportunityCreated(opportunity=opportunity)

    def _on_cancel_draft(self, command: CancelDraft) -> DashboardUpdate:
        self.form.cancel()
        return FormVisibilityChanged(visible=False)

    def _on_select_opportunity(self, command: SelectOpportunity) -> DashboardUpdate:
        self.repository.get(command.opportunity_id)
        self.selected_id = command.opportunity_id
        return SelectionChanged(opportunity_id=self.selected_id)

    def _on_dismiss_detail(self, command: DismissDetail) -> DashboardUpdate:
        self.selected_id = None
        return SelectionChanged(opportunity_id=None)

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def grid(self) -> GridView:
        return self.presenter.present(self.repository)

    @property
    def selected(self) -> Optional[OpportunityDetail]:
        if self.selected_id is None:
            return None
        return self.presenter.detail(self.repository.get(self.selected_id))
