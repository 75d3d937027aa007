from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Sequence, Union

from .config import ExtractConfig
from .content_stream import decode_text_fragments
from .document import PdfSource, iter_page_operations, open_document
from .export import write_records_csv
from .layout_analysis import group_into_rows, resolve_column_boundaries
from .models import HEADERS, ColumnBoundaries, Operation, Record
from .records import RecordAssembler
from .tables import assign_cells_to_columns, is_empty_row

logger = logging.getLogger(__name__)


def extract_page_rows(
    ops: Sequence[Operation],
    boundaries: ColumnBoundaries,
    cfg: ExtractConfig,
) -> List[List[str]]:
    fragments = decode_text_fragments(ops, cfg)
    if not fragments:
        return []
    rows = group_into_rows(fragments, cfg.y_tolerance)
    assigned: List[List[str]] = []
    for row in rows:
        cells = assign_cells_to_columns(row, boundaries)
        if row.cells and is_empty_row(cells):
            logger.debug("Row at y=%.1f lies outside the table columns: %r", row.y, row.texts)
        assigned.append(cells)
    return assigned


class BicDirectoryExtractor:
    """
    Rebuilds the ISO 9362 BIC directory table from its PDF rendering.

    Column boundaries come from the vertical rules of the first content page
    and are reused for every page. The record state runs across pages so a
    record split by a page break is still emitted once.
    """

    def __init__(self, cfg: Optional[ExtractConfig] = None):
        self.cfg = cfg or ExtractConfig()

    def extract(self, source: PdfSource) -> List[Record]:
        cfg = self.cfg
        boundaries: Optional[ColumnBoundaries] = None
        assembler = RecordAssembler(width=cfg.column_count)
        records: List[Record] = []
        pages_seen = 0

        with open_document(source) as pdf:
            for page_index, ops in iter_page_operations(pdf, skip_pages=cfg.skip_pages):
                if ops is None:
                    logger.debug("Page %d has no content stream", page_index)
                    continue
                if boundaries is None:
                    boundaries = resolve_column_boundaries(ops, cfg, page_index=page_index)
                    logger.info("Column boundaries from page %d: %s", page_index, list(boundaries[:-1]))
                rows = extract_page_rows(ops, boundaries, cfg)
                closed = assembler.feed(rows)
                records.extend(closed)
                pages_seen += 1
                logger.debug("Page %d: %d rows, %d records closed", page_index, len(rows), len(closed))
                if assembler.has_open_record:
                    logger.debug("Record still open at end of page %d", page_index)

        records.extend(assembler.finish())
        if assembler.orphans:
            logger.warning("Dropped %d continuation rows with no open record", assembler.orphans)
        logger.info("Extracted %d records from %d pages", len(records), pages_seen)
        return records

    def convert(self, source: PdfSource, destination: Union[str, Path]) -> int:
        records = self.extract(source)
        return write_records_csv(records, destination, HEADERS)


def headers() -> List[str]:
    return list(HEADERS)


def extract(source: PdfSource, cfg: Optional[ExtractConfig] = None) -> List[Record]:
    return BicDirectoryExtractor(cfg).extract(source)


def convert_to_csv(
    source: PdfSource,
    destination: Union[str, Path],
    cfg: Optional[ExtractConfig] = None,
) -> int:
    return BicDirectoryExtractor(cfg).convert(source, destination)
