from __future__ import annotations

from typing import Optional


class BicExtractError(Exception):
    """Base class for every classified extraction failure."""


class ContainerError(BicExtractError):
    """The PDF could not be opened or its page tree decoded."""


class PageReadError(BicExtractError):
    def __init__(self, page_index: int, reason: str = ""):
        self.page_index = page_index
        msg = f"Failed to parse operations on page {page_index}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class LayoutMismatchError(BicExtractError):
    def __init__(self, expected: int, found: int, page_index: Optional[int] = None):
        self.expected = expected
        self.found = found
        self.page_index = page_index
        super().__init__(
            f"Failed to detect column boundaries from PDF. Expected at least {expected} "
            f"vertical lines, found {found}. This PDF may have a different format than "
            f"the standard ISO BIC directory."
        )


class OutputWriteError(BicExtractError):
    """The CSV destination could not be created or written."""
