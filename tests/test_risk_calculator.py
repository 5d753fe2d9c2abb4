# tests/test_risk_calculator.py

"""
Risk Calculator Tests - weighted sum, half-up rounding and clamping
"""

from decimal import Decimal

import pytest

from opportunity_matrix.models.enumerations import Category
from opportunity_matrix.scoring.risk_calculator import (
    RISK_WEIGHTS,
    RiskCalculator,
    calculate_overall_risk,
)


class TestRiskWeights:
    """Tests for the fixed risk weights."""

    def test_weights_sum_to_one(self):
        assert sum(RISK_WEIGHTS.values()) == Decimal("1.0")

    def test_expected_weight_values(self):
        assert RISK_WEIGHTS["model_bias_risk"] == Decimal("0.4")
        assert RISK_WEIGHTS["cost_vs_roi_assessment"] == Decimal("0.3")
        assert RISK_WEIGHTS["technical_complexity"] == Decimal("0.3")


class TestCalculateOverallRisk:
    """Tests for calculate_overall_risk()."""

    def test_midpoint(self):
        """bias=5, roi=5, complexity=5 -> weighted sum 5.0 -> 5."""
        assert calculate_overall_risk(5, 5, 5) == 5

    def test_maximum(self):
        assert calculate_overall_risk(10, 10, 10) == 10

    def test_minimum(self):
        assert calculate_overall_risk(1, 1, 1) == 1

    def test_low_risk_example(self):
        """0.4*2 + 0.3*2 + 0.3*2 = 2.0 -> 2."""
        assert calculate_overall_risk(2, 2, 2) == 2

    def test_bias_weighs_more_than_roi(self):
        assert calculate_overall_risk(10, 1, 1) > calculate_overall_risk(1, 10, 1)

    @pytest.mark.parametrize(
        "bias, roi, complexity, expected",
        [
            (2, 4, 5, 4),   # 0.8 + 1.2 + 1.5 = 3.5 -> 4 (half up)
            (7, 3, 2, 4),   # 2.8 + 0.9 + 0.6 = 4.3 -> 4
            (9, 7, 7, 8),   # 7.8 -> 8
            (8, 7, 9, 8),   # 8.0 -> 8
            (6, 5, 7, 6),   # 6.0 -> 6
            (1, 2, 1, 1),   # 1.3 -> 1
        ],
    )
    def test_rounding(self, bias, roi, complexity, expected):
        assert calculate_overall_risk(bias, roi, complexity) == expected

    def test_out_of_range_inputs_clamp_output_only(self):
        """Inputs are not validated; only the result is clamped to [1, 10]."""
        assert calculate_overall_risk(20, 20, 20) == 10
        assert calculate_overall_risk(0, 0, 0) == 1
        assert calculate_overall_risk(-5, 1, 1) == 1


class TestRiskCalculatorBreakdown:
    """Tests for RiskCalculator.calculate() breakdown fields."""

    def test_breakdown_components(self):
        result = RiskCalculator().calculate(2, 4, 5)
        assert result.weighted_sum == Decimal("3.5")
        assert result.rounded == 4
        assert result.overall_risk == 4
        assert result.bias_contribution == Decimal("0.8")
        assert result.roi_contribution == Decimal("1.2")
        assert result.complexity_contribution == Decimal("1.5")

    def test_contributions_add_up(self):
        result = RiskCalculator().calculate(9, 3, 6)
        total = result.bias_contribution + result.roi_contribution + result.complexity_contribution
        assert total == result.weighted_sum

    def test_category_attached(self):
        assert RiskCalculator().calculate(9, 9, 9).risk_category == Category.HIGH
        assert RiskCalculator().calculate(5, 5, 5).risk_category == Category.MEDIUM
        assert RiskCalculator().calculate(1, 1, 1).risk_category == Category.LOW

    def test_clamped_result_keeps_unclamped_rounding(self):
        result = RiskCalculator().calculate(20, 20, 20)
        assert result.rounded == 20
        assert result.overall_risk == 10
