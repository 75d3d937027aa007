from __future__ import annotations

import math
from typing import List, NamedTuple, Tuple

from pydantic import BaseModel, ConfigDict

HEADERS: Tuple[str, ...] = (
    "Record creation date",
    "Last Update date",
    "BIC",
    "Brch Code",
    "Full legal name",
    "Registered address",
    "Operational address",
    "Branch description",
    "Branch address",
    "Instit. Type",
)

ColumnBoundaries = Tuple[float, ...]
AssignedRow = List[str]
Record = List[str]


class Operation(NamedTuple):
    operator: str
    operands: tuple = ()


class TextFragment(BaseModel):
    """
    One decoded text run and the text cursor it was drawn at.
    """
    model_config = ConfigDict(frozen=True)

    text: str
    x: float
    y: float

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)


class VisualRow(BaseModel):
    """
    Fragments sharing a y bucket, cells in left-to-right order.
    """
    model_config = ConfigDict(frozen=True)

    y: float
    cells: Tuple[Tuple[float, str], ...] = ()

    @property
    def texts(self) -> list[str]:
        return [t for _, t in self.cells]
