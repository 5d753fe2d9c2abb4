# scoring/categorizer.py
"""
Categorizer

Maps 1-10 scores to High / Medium / Low and category pairs to one of the
nine prioritization-grid cells.

Impact and feasibility:  High >= 7, Medium 4-6, Low <= 3
Risk:                    High >= 8, Medium 4-7, Low <= 3

A score of 7 is High for impact/feasibility but Medium for risk.

Cell id = "{row}-{col}" where row comes from impact and col from
feasibility (High=0, Medium=1, Low=2), so "0-0" is top-left.
"""

from dataclasses import dataclass
from typing import Dict, List

from opportunity_matrix.models.enumerations import Category


@dataclass(frozen=True)
class QuadrantInfo:
    label: str
    color: str


IMPACT_ROWS: Dict[Category, int] = {
    Category.HIGH: 0,    # Top row
    Category.MEDIUM: 1,  # Middle row
    Category.LOW: 2,     # Bottom row
}

FEASIBILITY_COLUMNS: Dict[Category, int] = {
    Category.HIGH: 0,    # Left column
    Category.MEDIUM: 1,  # Middle column
    Category.LOW: 2,     # Right column
}

QUADRANTS: Dict[str, QuadrantInfo] = {
    "0-0": QuadrantInfo("1. Quick Wins / Must-Dos", "green"),
    "0-1": QuadrantInfo("2. Strategic Investments", "blue"),
    "0-2": QuadrantInfo("3. Long-Term Bets", "purple"),
    "1-0": QuadrantInfo("4. Good Candidates", "teal"),
    "1-1": QuadrantInfo("5. Evaluate Further", "orange"),
    "1-2": QuadrantInfo("6. Reconsider / Park", "red"),
    "2-0": QuadrantInfo("7. Low Priority (Easier)", "gray-light"),
    "2-1": QuadrantInfo("8. Low Priority (Moderate)", "gray"),
    "2-2": QuadrantInfo("9. Avoid / Sunset", "gray-dark"),
}

CELL_IDS: List[str] = list(QUADRANTS.keys())


def score_to_category(score: float) -> Category:
    """Impact / feasibility category for a score."""
    if score >= 7:
        return Category.HIGH
    if score >= 4:
        return Category.MEDIUM
    return Category.LOW


def risk_score_to_category(score: float) -> Category:
    """Risk category for a score."""
    if score >= 8:
        return Category.HIGH
    if score >= 4:
        return Category.MEDIUM
    return Category.LOW


def impact_row(category: Category) -> int:
    return IMPACT_ROWS[category]


def feasibility_column(category: Category) -> int:
    return FEASIBILITY_COLUMNS[category]


def cell_id(impact_category: Category, feasibility_category: Category) -> str:
    """Grid cell id for an (impact, feasibility) category pair."""
    return f"{impact_row(impact_category)}-{feasibility_column(feasibility_category)}"


def cell_id_for(opportunity) -> str:
    """Grid cell id for anything carrying impact and feasibility scores."""
    return cell_id(
        score_to_category(opportunity.overall_business_impact),
        score_to_category(opportunity.overall_feasibility_readiness),
    )
