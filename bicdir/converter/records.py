from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence

from .heuristics import is_data_row, is_header_row
from .models import HEADERS, Record
from .tables import is_empty_row

logger = logging.getLogger(__name__)


def merge_continuation_row(record: List[str], continuation: Sequence[str]) -> List[str]:
    """
    Append each non-empty continuation column to the same column of the
    open record. Wrapped address lines end up space-joined in one field.
    """
    for i, cell in enumerate(continuation):
        if i >= len(record) or not cell:
            continue
        if record[i]:
            record[i] = record[i] + " " + cell
        else:
            record[i] = cell
    return record


def _fit_width(record: Sequence[str], width: int) -> Record:
    out = list(record[:width])
    if len(out) < width:
        out.extend([""] * (width - len(out)))
    return out


class RecordAssembler:
    """
    Record boundary state machine for one document.

    A row whose first column is a date opens a record; every later row that
    is neither a header nor a new date row extends it. The open record is kept
    between `feed` calls so records wrapping onto the next page stay whole.
    """

    def __init__(self, width: int = len(HEADERS)):
        self.width = width
        self.current: Optional[List[str]] = None
        self.orphans = 0

    @property
    def has_open_record(self) -> bool:
        return self.current is not None

    def feed(self, rows: Iterable[Sequence[str]]) -> List[Record]:
        closed: List[Record] = []
        for cells in rows:
            if is_empty_row(cells):
                continue
            if is_header_row(cells):
                continue
            if is_data_row(cells):
                if self.current is not None:
                    closed.append(_fit_width(self.current, self.width))
                self.current = [c.strip() for c in cells]
            elif self.current is not None:
                merge_continuation_row(self.current, cells)
            else:
                self.orphans += 1
                logger.debug("Dropping continuation row with no open record: %r", list(cells))
        return closed

    def finish(self) -> List[Record]:
        if self.current is None:
            return []
        rec = _fit_width(self.current, self.width)
        self.current = None
        return [rec]
