"""
Dashboard commands and updates.

Commands go into DashboardController.dispatch(); every dispatch yields one
DashboardUpdate that is returned and published to subscribers.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional

from opportunity_matrix.models.draft import FieldValidationError
from opportunity_matrix.models.opportunity import Opportunity


# Commands

@dataclass(frozen=True)
class ToggleForm:
    pass


@dataclass(frozen=True)
class UpdateDraftField:
    field: str
    value: Any


@dataclass(frozen=True)
class SubmitDraft:
    pass


@dataclass(frozen=True)
class CancelDraft:
    pass


@dataclass(frozen=True)
class SelectOpportunity:
    opportunity_id: int


@dataclass(frozen=True)
class DismissDetail:
    pass


# Updates

@dataclass(frozen=True)
class DashboardUpdate:
    pass


@dataclass(frozen=True)
class FormVisibilityChanged(DashboardUpdate):
    visible: bool


@dataclass(frozen=True)
class DraftChanged(DashboardUpdate):
    field: str
    value: Any
    errors: List[FieldValidationError] = field(default_factory=list)


@dataclass(frozen=True)
class DraftRejected(DashboardUpdate):
    errors: List[FieldValidationError]


@dataclass(frozen=True)
class OpportunityCreated(DashboardUpdate):
    opportunity: Opportunity


@dataclass(frozen=True)
class SelectionChanged(DashboardUpdate):
    opportunity_id: Optional[int]
