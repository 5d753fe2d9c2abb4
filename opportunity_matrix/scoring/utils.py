"""
Decimal Utilities - AI Opportunities Prioritization Matrix
opportunity_matrix/scoring/utils.py

Precision-safe decimal math for the 1-10 scoring scale.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import List


SCORE_MIN = 1
SCORE_MAX = 10


def clamp(
    value: Decimal,
    min_val: Decimal = Decimal(SCORE_MIN),
    max_val: Decimal = Decimal(SCORE_MAX),
) -> Decimal:
    """Clamp value to range [min_val, max_val]."""
    return max(min_val, min(max_val, value))


def weighted_sum(values: List[Decimal], weights: List[Decimal]) -> Decimal:
    """
    Calculate a plain weighted sum.

    Formula: Σ(value_i × weight_i)
    """
    if len(values) != len(weights):
        raise ValueError("values and weights must have same length")

    return sum((v * w for v, w in zip(values, weights)), Decimal("0"))


def round_half_up(value: Decimal) -> int:
    """Round to the nearest integer, halves away from zero (3.5 -> 4)."""
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
