from __future__ import annotations

from typing import List, Sequence

from .models import AssignedRow, VisualRow
from .text_utils import _normalize_cell


def _column_index(x: float, boundaries: Sequence[float]) -> int:
    for i in range(len(boundaries) - 1):
        if boundaries[i] <= x < boundaries[i + 1]:
            return i
    return -1


def assign_cells_to_columns(row: VisualRow, boundaries: Sequence[float]) -> AssignedRow:
    """
    Place each cell of a row into the column whose [left, right) interval
    holds its x. Cells left of the first boundary are dropped.
    """
    num_columns = max(0, len(boundaries) - 1)
    columns: List[List[str]] = [[] for _ in range(num_columns)]
    for x, text in row.cells:
        idx = _column_index(x, boundaries)
        if idx < 0:
            continue
        columns[idx].append(text)
    return [_normalize_cell(" ".join(parts)) for parts in columns]


def is_empty_row(cells: Sequence[str]) -> bool:
    return all(not c for c in cells)
