from __future__ import annotations

import re

_UTF16_BOM = b"\xfe\xff"
_WS_RE = re.compile(r"\s+")


def decode_pdf_string(raw) -> str:
    """
    Decode a PDF string operand.

    The directory writes accented names and addresses as UTF-16BE with a BOM;
    everything else is PDFDocEncoding, read here as Latin-1.
    """
    if raw is None:
        return ""
    if isinstance(raw, str):
        return raw
    data = bytes(raw)
    if data[:2] == _UTF16_BOM:
        body = data[2:]
        if len(body) % 2:
            body = body[:-1]
        return body.decode("utf-16-be", errors="replace")
    return data.decode("latin-1")


def _normalize_cell(s: str) -> str:
    if not s:
        return ""
    return _WS_RE.sub(" ", s).strip()


def _is_blank(s: str) -> bool:
    return not (s or "").strip()


def _round_half_away(v: float) -> int:
    if v < 0:
        return -int(-v + 0.5)
    return int(v + 0.5)
