"""
Form Controller - AI Opportunities Prioritization Matrix
opportunity_matrix/services/form_controller.py

Holds the creation form's visibility and its draft record, coerces field
input, validates it per field, and turns a valid draft into a stored
Opportunity.
"""

import math
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List

import structlog
from pydantic import ValidationError

from opportunity_matrix.core.exceptions import (
    DraftValidationException,
    FormStateException,
    UnknownFieldException,
)
from opportunity_matrix.models.draft import (
    BOOLEAN_FIELDS,
    DEFAULT_SCORE,
    DRAFT_FIELDS,
    NUMERIC_FIELDS,
    FieldValidationError,
    default_draft,
)
from opportunity_matrix.models.enumerations import ScoreField, TechnologyType
from opportunity_matrix.models.opportunity import (
    NAME_MAX_LENGTH,
    SCORE_FIELD_LABELS,
    Opportunity,
    OpportunityCreate,
)
from opportunity_matrix.repositories.opportunity_repository import OpportunityRepository
from opportunity_matrix.scoring.categorizer import risk_score_to_category
from opportunity_matrix.scoring.utils import SCORE_MAX, SCORE_MIN

logger = structlog.get_logger(__name__)

_TRUTHY = {"true", "on", "1", "yes", "y"}
_MAX_EXPONENT = 3


def coerce_bool(value: Any) -> bool:
    """Checkbox coercion; strings are truthy only for on/true/yes/1."""
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY
    return bool(value)


def coerce_int(value: Any) -> int:
    """
    Parse a form value as a whole number.

    Accepts ints, integral floats and numeric text ("7", " 7 ", "7.0").
    Raises ValueError for anything else.
    """
    if isinstance(value, bool):
        raise ValueError(f"not a number: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer():
            return int(value)
        raise ValueError(f"not a whole number: {value!r}")

    text = "" if value is None else str(value).strip()
    if not text:
        raise ValueError("empty value")
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = Decimal(text)
    except InvalidOperation:
        raise ValueError(f"not a number: {value!r}") from None
    # Magnitudes of 10**4 and up are rejected before int()
    if not number.is_finite() or number.adjusted() > _MAX_EXPONENT:
        raise ValueError(f"number out of range: {value!r}")
    if number == number.to_integral_value():
        return int(number)
    raise ValueError(f"not a whole number: {value!r}")


class FormController:
    """
    Two-state (hidden / visible) form with a staged draft.

    The draft survives hide-by-toggle; cancel() and a successful submit()
    reset it to defaults.
    """

    def __init__(
        self,
        repository: OpportunityRepository,
        default_score: int = DEFAULT_SCORE,
        default_technology_type: TechnologyType = TechnologyType.MACHINE_LEARNING,
    ):
        self._repository = repository
        self._default_score = default_score
        self._default_technology_type = default_technology_type
        self.visible = False
        self._draft: Dict[str, Any] = self._fresh_draft()

    def _fresh_draft(self) -> Dict[str, Any]:
        return default_draft(self._default_score, self._default_technology_type)

    @property
    def draft(self) -> Dict[str, Any]:
        return dict(self._draft)

    @property
    def errors(self) -> List[FieldValidationError]:
        return self.validate()

    # ------------------------------------------------------------------
    # Visibility
    # ------------------------------------------------------------------

    def toggle(self) -> bool:
        """Flip visibility and return the new state."""
        self.visible = not self.visible
        logger.debug("form_toggled", visible=self.visible)
        return self.visible

    def cancel(self) -> None:
        """Hide the form and discard the draft. The store is untouched."""
        self.visible = False
        self.reset()
        logger.debug("draft_cancelled")

    def reset(self) -> None:
        self._draft = self._fresh_draft()

    # ------------------------------------------------------------------
    # Field updates
    # ------------------------------------------------------------------

    def update_field(self, field: str, value: Any) -> Any:
        """
        Update exactly one draft attribute and return the stored value.

        Numeric fields keep the raw input when it does not parse so that
        validate() can report it against the field.
        """
        if field not in DRAFT_FIELDS:
            raise UnknownFieldException(field)

        if field in BOOLEAN_FIELDS:
            stored: Any = coerce_bool(value)
        elif field in NUMERIC_FIELDS:
            try:
                stored = coerce_int(value)
            except ValueError:
                stored = value
        elif field == "technology_type" and isinstance(value, TechnologyType):
            stored = value.value
        else:
            stored = "" if value is None else str(value)

        self._draft[field] = stored
        return stored

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate(self) -> List[FieldValidationError]:
        """Field-level errors for the current draft, in form order."""
        errors: List[FieldValidationError] = []

        name = self._draft.get("name", "")
        if not str(name).strip():
            errors.append(FieldValidationError(field="name", message="Name is required", value=name))
        elif len(str(name)) > NAME_MAX_LENGTH:
            errors.append(FieldValidationError(
                field="name",
                message=f"Name must be at most {NAME_MAX_LENGTH} characters",
                value=name,
            ))

        for field in NUMERIC_FIELDS:
            raw = self._draft.get(field)
            label = SCORE_FIELD_LABELS[ScoreField(field)]
            try:
                number = coerce_int(raw)
            except ValueError:
                errors.append(FieldValidationError(
                    field=field,
                    message=f"{label} must be a whole number",
                    value=raw,
                ))
                continue
            if not SCORE_MIN <= number <= SCORE_MAX:
                errors.append(FieldValidationError(
                    field=field,
                    message=f"{label} must be between {SCORE_MIN} and {SCORE_MAX}",
                    value=raw,
                ))

        tech = self._draft.get("technology_type")
        try:
            TechnologyType(tech)
        except ValueError:
            errors.append(FieldValidationError(
                field="technology_type",
                message=f"Unknown technology type '{tech}'",
                value=tech,
            ))

        return errors

    def _coerced_draft(self) -> Dict[str, Any]:
        data = dict(self._draft)
        for field in NUMERIC_FIELDS:
            data[field] = coerce_int(data[field])
        data["quick_win_potential"] = coerce_bool(data["quick_win_potential"])
        return data

    # ------------------------------------------------------------------
    # Submission
    # ------------------------------------------------------------------

    def submit(self) -> Opportunity:
        """
        Turn the draft into a stored Opportunity.

        Raises:
            FormStateException: the form is hidden.
            DraftValidationException: one or more fields are invalid; the
                store and the draft are left as they were.
        """
        if not self.visible:
            raise FormStateException("Cannot submit: form is hidden")

        errors = self.validate()
        if errors:
            logger.warning("draft_rejected", fields=[e.field for e in errors])
            raise DraftValidationException(errors)

        try:
            data = OpportunityCreate(**self._coerced_draft())
            opportunity = Opportunity.create(self._repository.next_id(), data)
        except ValidationError as exc:
            errors = [
                FieldValidationError(
                    field=str(err["loc"][0]) if err["loc"] else "draft",
                    message=err["msg"],
                    value=err.get("input"),
                )
                for err in exc.errors()
            ]
            logger.warning("draft_rejected", fields=[err.field for err in errors])
            raise DraftValidationException(errors) from exc
        self._repository.append(opportunity)

        self.reset()
        self.visible = False

        logger.info(
            "draft_submitted",
            opportunity_id=opportunity.id,
            overall_risk=opportunity.overall_risk,
            risk_category=risk_score_to_category(opportunity.overall_risk).value,
        )
        return opportunity
