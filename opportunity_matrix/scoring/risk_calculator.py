# opportunity_matrix/scoring/risk_calculator.py
"""
Overall Risk Calculator
-----------------------
Derives an opportunity's overall risk from three of its sub-scores.

Formula:
    weighted_sum = 0.4 × model_bias_risk
                 + 0.3 × cost_vs_roi_assessment
                 + 0.3 × technical_complexity
    overall_risk = round(weighted_sum)   clamped to [1, 10]

Rounding is half-up (4.5 -> 5). Inputs are expected in [1, 10] but are not
checked; only the output is clamped.
"""
import structlog
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict

from opportunity_matrix.models.enumerations import Category, ScoreField
from opportunity_matrix.scoring.categorizer import risk_score_to_category
from opportunity_matrix.scoring.utils import clamp, round_half_up, weighted_sum

logger = structlog.get_logger(__name__)

RISK_WEIGHTS: Dict[str, Decimal] = {
    ScoreField.MODEL_BIAS_RISK.value:        Decimal("0.4"),
    ScoreField.COST_VS_ROI_ASSESSMENT.value: Decimal("0.3"),
    ScoreField.TECHNICAL_COMPLEXITY.value:   Decimal("0.3"),
}


@dataclass
class RiskResult:
    """Output of RiskCalculator.calculate()."""
    overall_risk: int             # Final risk in [1, 10]
    weighted_sum: Decimal         # Exact weighted sum before rounding
    rounded: int                  # Half-up rounded sum before clamping
    risk_category: Category
    bias_contribution: Decimal    # 0.4 × model_bias_risk
    roi_contribution: Decimal     # 0.3 × cost_vs_roi_assessment
    complexity_contribution: Decimal  # 0.3 × technical_complexity


class RiskCalculator:
    """Calculate overall risk from bias, cost-vs-ROI and complexity."""

    def calculate(
        self,
        model_bias_risk: int,
        cost_vs_roi_assessment: int,
        technical_complexity: int,
    ) -> RiskResult:
        """
        Args:
            model_bias_risk: Model bias risk score (1-10).
            cost_vs_roi_assessment: Cost vs ROI assessment score (1-10).
            technical_complexity: Technical complexity score (1-10).

        Returns:
            RiskResult with overall_risk and its breakdown.

        Examples:
            >>> RiskCalculator().calculate(5, 5, 5).overall_risk
            5
        """
        values = [
            Decimal(str(model_bias_risk)),
            Decimal(str(cost_vs_roi_assessment)),
            Decimal(str(technical_complexity)),
        ]
        weights = list(RISK_WEIGHTS.values())

        total = weighted_sum(values, weights)
        rounded = round_half_up(total)
        overall = int(clamp(Decimal(rounded)))
        category = risk_score_to_category(overall)

        logger.debug(
            "risk_calculated",
            model_bias_risk=model_bias_risk,
            cost_vs_roi_assessment=cost_vs_roi_assessment,
            technical_complexity=technical_complexity,
            weighted_sum=float(total),
            overall_risk=overall,
            risk_category=category.value,
        )

        return RiskResult(
            overall_risk=overall,
            weighted_sum=total,
            rounded=rounded,
            risk_category=category,
            bias_contribution=values[0] * weights[0],
            roi_contribution=values[1] * weights[1],
            complexity_contribution=values[2] * weights[2],
        )


def calculate_overall_risk(
    model_bias_risk: int,
    cost_vs_roi_assessment: int,
    technical_complexity: int,
) -> int:
    """Overall risk in [1, 10] for the three sub-scores."""
    return RiskCalculator().calculate(
        model_bias_risk, cost_vs_roi_assessment, technical_complexity
    ).overall_risk
