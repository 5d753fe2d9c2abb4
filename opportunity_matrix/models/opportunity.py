from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Dict, List

from opportunity_matrix.models.enumerations import Category, ScoreField, TechnologyType
from opportunity_matrix.scoring.risk_calculator import calculate_overall_risk
from opportunity_matrix.scoring.utils import SCORE_MAX, SCORE_MIN


# Display labels for the 14 scored attributes, in form order
SCORE_FIELD_LABELS: Dict[ScoreField, str] = {
    ScoreField.OVERALL_BUSINESS_IMPACT: "Overall Business Impact",
    ScoreField.OVERALL_FEASIBILITY_READINESS: "Overall Feasibility / Readiness",
    ScoreField.COST_SAVINGS_POTENTIAL: "Cost Savings Potential",
    ScoreField.REVENUE_POTENTIAL: "Revenue Potential",
    ScoreField.EFFICIENCY_IMPROVEMENT: "Efficiency Improvement",
    ScoreField.EXPERIENCE_IMPROVEMENT: "Experience Improvement",
    ScoreField.STRATEGIC_ALIGNMENT: "Strategic Alignment",
    ScoreField.CUSTOMER_NEEDS_ALIGNMENT: "Customer Needs Alignment",
    ScoreField.DATA_QUALITY: "Data Quality",
    ScoreField.TECHNICAL_COMPLEXITY: "Technical Complexity",
    ScoreField.INTERNAL_EXPERTISE: "Internal Expertise Availability",
    ScoreField.USER_ADOPTION_LIKELIHOOD: "User Adoption Likelihood",
    ScoreField.MODEL_BIAS_RISK: "Model Bias Risk",
    ScoreField.COST_VS_ROI_ASSESSMENT: "Cost vs ROI Assessment",
}

SCORE_FIELDS: List[str] = [f.value for f in ScoreField]

NAME_MAX_LENGTH = 255


def _score(description: str):
    return Field(..., ge=SCORE_MIN, le=SCORE_MAX, description=description)


class OpportunityBase(BaseModel):
    """
    Base Pydantic model for an AI opportunity.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        ...,
        min_length=1,
        max_length=NAME_MAX_LENGTH,
        description="Opportunity name"
    )

    description: str = Field(
        default="",
        description="Free-text description"
    )

    overall_business_impact: int = _score("Overall business impact (1-10)")
    overall_feasibility_readiness: int = _score("Overall feasibility / readiness (1-10)")
    cost_savings_potential: int = _score("Cost savings potential (1-10)")
    revenue_potential: int = _score("Revenue potential (1-10)")
    efficiency_improvement: int = _score("Efficiency improvement (1-10)")
    experience_improvement: int = _score("Customer / employee experience improvement (1-10)")
    strategic_alignment: int = _score("Alignment with strategic goals (1-10)")
    customer_needs_alignment: int = _score("Alignment with customer needs (1-10)")
    data_quality: int = _score("Data quality and availability (1-10)")
    technical_complexity: int = _score("Technical complexity (1-10)")
    internal_expertise: int = _score("Internal expertise availability (1-10)")
    user_adoption_likelihood: int = _score("User adoption likelihood (1-10)")
    model_bias_risk: int = _score("Model bias risk (1-10)")
    cost_vs_roi_assessment: int = _score("Cost vs ROI assessment (1-10)")

    quick_win_potential: bool = Field(
        default=False,
        description="Whether the opportunity is a potential quick win"
    )

    technology_type: TechnologyType = Field(
        default=TechnologyType.MACHINE_LEARNING,
        description="Primary AI technology"
    )

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be blank")
        return value


class OpportunityCreate(OpportunityBase):
    """
    Model for creating a new opportunity (no id, no derived risk).
    """
    pass


class Opportunity(OpportunityBase):
    """
    Stored opportunity. Immutable once created.
    """

    id: int = Field(
        ...,
        gt=0,
        description="Unique opportunity identifier"
    )

    overall_risk: int = Field(
        ...,
        ge=SCORE_MIN,
        le=SCORE_MAX,
        description="Derived from model bias, cost vs ROI and technical complexity"
    )

    @model_validator(mode="after")
    def validate_overall_risk(self):
        """Ensure overall_risk matches its three sub-scores."""
        expected = calculate_overall_risk(
            self.model_bias_risk,
            self.cost_vs_roi_assessment,
            self.technical_complexity,
        )
        if self.overall_risk != expected:
            raise ValueError(
                f"overall_risk must be {expected} for the given sub-scores, got {self.overall_risk}"
            )
        return self

    @classmethod
    def create(cls, opportunity_id: int, data: OpportunityCreate) -> "Opportunity":
        """Build a stored opportunity, deriving overall_risk from data."""
        overall_risk = calculate_overall_risk(
            data.model_bias_risk,
            data.cost_vs_roi_assessment,
            data.technical_complexity,
        )
        return cls(id=opportunity_id, overall_risk=overall_risk, **data.model_dump())


class OpportunitySummary(BaseModel):
    """
    What a grid cell shows for one opportunity.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    overall_risk: int
    risk_category: Category


class OpportunityDetail(BaseModel):
    """
    Full record plus every derived category, for the detail view.
    """

    model_config = ConfigDict(frozen=True)

    opportunity: Opportunity
    impact_category: Category
    feasibility_category: Category
    risk_category: Category
    cell_id: str
    quadrant_label: str
