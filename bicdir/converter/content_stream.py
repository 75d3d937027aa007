from __future__ import annotations

import logging
import math
from typing import Iterable, List, Optional, Sequence

from pdfminer.pdfinterp import PDFContentParser
from pdfminer.psparser import PSEOF, PSKeyword

from .config import ExtractConfig
from .models import Operation, TextFragment
from .text_utils import decode_pdf_string, _is_blank

logger = logging.getLogger(__name__)

_DEFAULT_CFG = ExtractConfig()


def _keyword_str(kw: PSKeyword) -> str:
    name = kw.name
    if isinstance(name, bytes):
        return name.decode("latin-1")
    return str(name)


def parse_operations(streams: Sequence[object]) -> List[Operation]:
    """
    Tokenize page content streams into (operator, operands) pairs.

    Operands are collected until the next keyword; pdfminer raises on
    undecodable streams and that is left to the caller.
    """
    parser = PDFContentParser(list(streams))
    ops: List[Operation] = []
    operands: list = []
    while True:
        try:
            _, obj = parser.nextobject()
        except PSEOF:
            break
        if isinstance(obj, PSKeyword):
            ops.append(Operation(_keyword_str(obj), tuple(operands)))
            operands = []
        else:
            operands.append(obj)
    return ops


def _num(v) -> float:
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        raise TypeError(f"expected number, got {type(v).__name__}")
    return float(v)


class _TextCursor:
    """
    Text position state while walking one page.

    Only translation is tracked; the directory never scales or rotates text.
    """

    def __init__(self, cfg: ExtractConfig):
        self.cfg = cfg
        self.x = 0.0
        self.y = 0.0
        self.line_x = 0.0
        self.fragments: List[TextFragment] = []

    def begin_text(self) -> None:
        self.x = 0.0
        self.y = 0.0

    def set_matrix(self, operands: tuple) -> None:
        if len(operands) < 6:
            raise ValueError(f"Tm needs 6 operands, got {len(operands)}")
        e = _num(operands[4])
        f = _num(operands[5])
        self.x = e
        self.y = f
        self.line_x = e

    def move_by(self, operands: tuple) -> None:
        if len(operands) < 2:
            raise ValueError(f"Td needs 2 operands, got {len(operands)}")
        dx = _num(operands[0])
        dy = _num(operands[1])
        self.x += dx
        self.y += dy

    def next_line(self) -> None:
        self.y -= self.cfg.default_line_height
        self.x = self.line_x

    def show_text(self, raw) -> None:
        if not isinstance(raw, (bytes, bytearray, str)):
            raise TypeError(f"expected string operand, got {type(raw).__name__}")
        self._emit(decode_pdf_string(raw), self.x, self.y)

    def show_text_adjusted(self, items) -> None:
        if not isinstance(items, (list, tuple)):
            raise TypeError(f"TJ expects an array, got {type(items).__name__}")
        start_x = self.x
        parts: list[str] = []
        for item in items:
            if isinstance(item, (bytes, bytearray, str)):
                parts.append(decode_pdf_string(item))
            elif isinstance(item, (int, float)) and not isinstance(item, bool):
                spacing = float(item)
                if spacing < self.cfg.space_threshold:
                    parts.append(" ")
                self.x -= spacing / self.cfg.spacing_divisor
        self._emit("".join(parts), start_x, self.y)

    def _emit(self, text: str, x: float, y: float) -> None:
        if _is_blank(text):
            return
        if not (math.isfinite(x) and math.isfinite(y)):
            logger.debug("Dropping fragment %r at non-finite position (%s, %s)", text, x, y)
            return
        self.fragments.append(TextFragment(text=text, x=x, y=y))


def decode_text_fragments(
    ops: Iterable[Operation],
    cfg: Optional[ExtractConfig] = None,
) -> List[TextFragment]:
    """
    Walk a page's operators and return every non-blank text run with the
    cursor position it was drawn at.
    """
    cursor = _TextCursor(cfg or _DEFAULT_CFG)
    for op in ops:
        name = op.operator
        args = op.operands
        try:
            if name == "BT":
                cursor.begin_text()
            elif name == "Tm":
                cursor.set_matrix(args)
            elif name in ("Td", "TD"):
                cursor.move_by(args)
            elif name == "T*":
                cursor.next_line()
            elif name == "Tj":
                if args:
                    cursor.show_text(args[-1])
            elif name == "'":
                cursor.next_line()
                if args:
                    cursor.show_text(args[-1])
            elif name == '"':
                cursor.next_line()
                if len(args) >= 3:
                    cursor.show_text(args[-1])
            elif name == "TJ":
                if args:
                    cursor.show_text_adjusted(args[-1])
        except (TypeError, ValueError) as e:
            logger.debug("Skipping malformed %s operator: %s", name, e)
            continue
    return cursor.fragments
