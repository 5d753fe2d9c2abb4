from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List

from opportunity_matrix.models.enumerations import TechnologyType
from opportunity_matrix.models.opportunity import SCORE_FIELDS


NUMERIC_FIELDS: List[str] = list(SCORE_FIELDS)
BOOLEAN_FIELDS: List[str] = ["quick_win_potential"]

# Form order: name, description, 14 scores, quick win, technology type
DRAFT_FIELDS: List[str] = ["name", "description"] + NUMERIC_FIELDS + BOOLEAN_FIELDS + ["technology_type"]

DEFAULT_SCORE = 5


class FieldValidationError(BaseModel):
    """
    One field-level problem that blocks submission.
    """

    model_config = ConfigDict(frozen=True)

    field: str = Field(..., description="Draft field name")
    message: str = Field(..., description="Human-readable error message")
    value: Any = Field(default=None, description="Offending raw value")


def default_draft(
    default_score: int = DEFAULT_SCORE,
    technology_type: TechnologyType = TechnologyType.MACHINE_LEARNING,
) -> Dict[str, Any]:
    """Fresh draft: every score at default_score, empty text, no quick win."""
    draft: Dict[str, Any] = {"name": "", "description": ""}
    for field in NUMERIC_FIELDS:
        draft[field] = default_score
    draft["quick_win_potential"] = False
    draft["technology_type"] = TechnologyType(technology_type).value
    return draft
