from __future__ import annotations

from typing import Sequence

# The directory repeats its column header and title block on every page.
_HEADER_PHRASES = (
    "last update",
    "brch code",
    "bic brch",
    "full legal name",
    "instit. type",
    "inst. type",
    "iso bic directory",
    "registration authority",
    "iso 9362",
)


def is_header_row(cells: Sequence[str]) -> bool:
    combined = " ".join(cells).lower()
    if "record" in combined and "creation" in combined:
        return True
    return any(p in combined for p in _HEADER_PHRASES)


def _is_ascii_digits(s: str) -> bool:
    return bool(s) and all("0" <= ch <= "9" for ch in s)


def is_data_row(cells: Sequence[str]) -> bool:
    """
    True when the first column has the shape of a YYYY-MM-DD creation date,
    which only the first line of a record carries.
    """
    if not cells or not cells[0]:
        return False
    first = cells[0].strip()
    if len(first) < 10:
        return False
    parts = first.split("-")
    if len(parts) < 3:
        return False
    return len(parts[0]) == 4 and _is_ascii_digits(parts[0]) and len(parts[1]) == 2 and len(parts[2]) >= 2
