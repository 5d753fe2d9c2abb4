"""
Opportunity Repository - AI Opportunities Prioritization Matrix
opportunity_matrix/repositories/opportunity_repository.py

Append-only, insertion-ordered in-memory store of opportunities.
"""

from typing import Dict, Iterable, List

import structlog

from opportunity_matrix.core.exceptions import DuplicateEntityException, EntityNotFoundException
from opportunity_matrix.models.opportunity import Opportunity
from opportunity_matrix.scoring.categorizer import CELL_IDS, cell_id_for

logger = structlog.get_logger(__name__)


class OpportunityRepository:
    """In-memory opportunity store. Records are never updated or removed."""

    def __init__(self, opportunities: Iterable[Opportunity] = ()):
        self._items: Dict[int, Opportunity] = {}
        self._cells: Dict[str, List[Opportunity]] = {cid: [] for cid in CELL_IDS}
        for opportunity in opportunities:
            self.append(opportunity)

    def append(self, opportunity: Opportunity) -> Opportunity:
        """Add an opportunity at the end of the collection."""
        if opportunity.id in self._items:
            raise DuplicateEntityException(f"Opportunity with ID {opportunity.id} already exists")

        cid = cell_id_for(opportunity)
        self._items[opportunity.id] = opportunity
        self._cells[cid].append(opportunity)

        logger.info(
            "opportunity_appended",
            opportunity_id=opportunity.id,
            name=opportunity.name,
            cell_id=cid,
            overall_risk=opportunity.overall_risk,
            total=len(self._items),
        )
        return opportunity

    def next_id(self) -> int:
        """max(existing ids, 0) + 1"""
        return max(self._items.keys(), default=0) + 1

    def all(self) -> List[Opportunity]:
        return list(self._items.values())

    def get(self, opportunity_id: int) -> Opportunity:
        try:
            return self._items[opportunity_id]
        except KeyError:
            raise EntityNotFoundException("Opportunity", opportunity_id) from None

    def group_by_cell(self) -> Dict[str, List[Opportunity]]:
        """
        Partition all opportunities into the nine grid cells.

        Every cell id is present (possibly with an empty list) and members keep
        insertion order.
        """
        return {cid: list(members) for cid, members in self._cells.items()}

    def count(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, opportunity_id: object) -> bool:
        return opportunity_id in self._items
