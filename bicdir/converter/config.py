from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ExtractConfig:
    # Tuned for the ISO BIC directory typography.
    default_line_height: float = 12.0
    # TJ adjustments below this are word spaces, above it kerning.
    space_threshold: float = -100.0
    spacing_divisor: float = 1000.0

    y_tolerance: float = 3.0
    vertical_line_tolerance: float = 1.0
    line_dedup_tolerance: float = 2.0
    # 10 columns = 10 separator lines + the open-ended sentinel.
    required_boundaries: int = 11

    # Page 0 is the cover page.
    skip_pages: int = 1

    @property
    def column_count(self) -> int:
        return self.required_boundaries - 1
