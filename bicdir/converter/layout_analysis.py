from __future__ import annotations

import logging
import math
from typing import Dict, Iterable, List, Optional, Tuple

from .config import ExtractConfig
from .errors import LayoutMismatchError
from .models import ColumnBoundaries, Operation, TextFragment, VisualRow
from .text_utils import _round_half_away

logger = logging.getLogger(__name__)

_DEFAULT_CFG = ExtractConfig()


def group_into_rows(fragments: Iterable[TextFragment], y_tolerance: Optional[float] = None) -> List[VisualRow]:
    """
    Bucket fragments into printed lines by y and order them for reading.

    PDF y grows upward, so rows come out top-to-bottom by descending y.
    Cells within a row are sorted by x; equal x keeps input order.
    """
    if y_tolerance is None:
        y_tolerance = _DEFAULT_CFG.y_tolerance
    buckets: Dict[int, List[Tuple[float, str]]] = {}
    for frag in fragments:
        if not frag.is_finite():
            continue
        key = _round_half_away(frag.y / y_tolerance)
        buckets.setdefault(key, []).append((frag.x, frag.text))

    rows: List[VisualRow] = []
    for key, cells in buckets.items():
        cells.sort(key=lambda c: c[0])
        rows.append(VisualRow(y=key * y_tolerance, cells=tuple(cells)))
    rows.sort(key=lambda r: r.y, reverse=True)
    return rows


def _vertical_line_xs(ops: Iterable[Operation], tolerance: float) -> List[float]:
    xs: List[float] = []
    last_move_x: Optional[float] = None
    for op in ops:
        if op.operator == "m":
            last_move_x = None
            if len(op.operands) >= 2 and isinstance(op.operands[-2], (int, float)):
                last_move_x = float(op.operands[-2])
        elif op.operator == "l":
            if last_move_x is not None and len(op.operands) >= 2:
                x = op.operands[-2]
                if isinstance(x, (int, float)) and abs(last_move_x - float(x)) < tolerance:
                    xs.append(last_move_x)
            last_move_x = None
    return [x for x in xs if math.isfinite(x)]


def _dedup_sorted(values: List[float], tolerance: float) -> List[float]:
    out: List[float] = []
    for v in sorted(values):
        if out and abs(v - out[-1]) < tolerance:
            continue
        out.append(v)
    return out


def detect_column_boundaries(ops: Iterable[Operation], cfg: Optional[ExtractConfig] = None) -> List[float]:
    """
    Distinct x positions of vertical ruling lines (MoveTo/LineTo pairs with
    the same x), ascending. No sentinel is appended here.
    """
    cfg = cfg or _DEFAULT_CFG
    xs = _vertical_line_xs(ops, cfg.vertical_line_tolerance)
    return _dedup_sorted(xs, cfg.line_dedup_tolerance)


def resolve_column_boundaries(
    ops: Iterable[Operation],
    cfg: Optional[ExtractConfig] = None,
    *,
    page_index: Optional[int] = None,
) -> ColumnBoundaries:
    cfg = cfg or _DEFAULT_CFG
    lines = detect_column_boundaries(ops, cfg)
    needed = cfg.column_count
    if len(lines) < needed:
        raise LayoutMismatchError(needed, len(lines), page_index=page_index)
    if len(lines) > needed:
        logger.debug("Ignoring %d extra vertical lines right of x=%.2f", len(lines) - needed, lines[needed - 1])
    return tuple(lines[:needed]) + (math.inf,)
