"""
Grid Presenter - AI Opportunities Prioritization Matrix
opportunity_matrix/services/grid_presenter.py

Derived views over the store: the 3x3 grid, the detail record and a flat
table. Everything is recomputed from the repository on each call.
"""

from typing import List

import pandas as pd

from opportunity_matrix.models.grid import CellView, GridView
from opportunity_matrix.models.opportunity import (
    SCORE_FIELD_LABELS,
    Opportunity,
    OpportunityDetail,
    OpportunitySummary,
)
from opportunity_matrix.repositories.opportunity_repository import OpportunityRepository
from opportunity_matrix.scoring.categorizer import (
    CELL_IDS,
    QUADRANTS,
    cell_id_for,
    risk_score_to_category,
    score_to_category,
)

TABLE_COLUMNS: List[str] = [
    "ID", "Name", "Quadrant", "Impact", "Feasibility", "Overall Risk", "Risk",
    "Technology", "Quick Win",
]


class GridPresenter:
    """Build render-ready views from an OpportunityRepository."""

    def summarize(self, opportunity: Opportunity) -> OpportunitySummary:
        return OpportunitySummary(
            id=opportunity.id,
            name=opportunity.name,
            overall_risk=opportunity.overall_risk,
            risk_category=risk_score_to_category(opportunity.overall_risk),
        )

    def present(self, repository: OpportunityRepository) -> GridView:
        """All nine cells in row-major order, each with its summaries."""
        buckets = repository.group_by_cell()
        cells = []
        for cid in CELL_IDS:
            row, col = (int(part) for part in cid.split("-"))
            info = QUADRANTS[cid]
            cells.append(CellView(
                cell_id=cid,
                row=row,
                col=col,
                label=info.label,
                color=info.color,
                items=[self.summarize(op) for op in buckets.get(cid, [])],
            ))
        return GridView(cells=cells, total=len(repository))

    def detail(self, opportunity: Opportunity) -> OpportunityDetail:
        """The unmodified record plus its derived categories."""
        cid = cell_id_for(opportunity)
        return OpportunityDetail(
            opportunity=opportunity,
            impact_category=score_to_category(opportunity.overall_business_impact),
            feasibility_category=score_to_category(opportunity.overall_feasibility_readiness),
            risk_category=risk_score_to_category(opportunity.overall_risk),
            cell_id=cid,
            quadrant_label=QUADRANTS[cid].label,
        )

    def to_dataframe(self, repository: OpportunityRepository) -> pd.DataFrame:
        """One row per opportunity, insertion order, every score as a column."""
        rows = []
        for op in repository.all():
            d = self.detail(op)
            row = {
                "ID": op.id,
                "Name": op.name,
                "Quadrant": d.quadrant_label,
                "Impact": d.impact_category.value,
                "Feasibility": d.feasibility_category.value,
                "Overall Risk": op.overall_risk,
                "Risk": d.risk_category.value,
                "Technology": op.technology_type.value,
                "Quick Win": op.quick_win_potential,
            }
            for field, label in SCORE_FIELD_LABELS.items():
                row[label] = getattr(op, field.value)
            rows.append(row)

        columns = TABLE_COLUMNS + list(SCORE_FIELD_LABELS.values())
        return pd.DataFrame(rows, columns=columns)
