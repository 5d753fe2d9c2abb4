from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

from opportunity_matrix.models.opportunity import OpportunitySummary


EMPTY_CELL_MESSAGE = "No opportunities here."


class CellView(BaseModel):
    """
    One of the nine prioritization cells, ready to render.
    """

    model_config = ConfigDict(frozen=True)

    cell_id: str = Field(..., pattern=r"^[0-2]-[0-2]$")
    row: int = Field(..., ge=0, le=2)
    col: int = Field(..., ge=0, le=2)
    label: str
    color: str
    items: List[OpportunitySummary] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def placeholder(self) -> Optional[str]:
        return EMPTY_CELL_MESSAGE if self.is_empty else None


class GridView(BaseModel):
    """
    The full 3x3 grid, cells in row-major order.
    """

    model_config = ConfigDict(frozen=True)

    cells: List[CellView]
    total: int

    def cell(self, cell_id: str) -> CellView:
        for c in self.cells:
            if c.cell_id == cell_id:
                return c
        raise KeyError(cell_id)

    def rows(self) -> List[List[CellView]]:
        return [self.cells[i:i + 3] for i in range(0, len(self.cells), 3)]
