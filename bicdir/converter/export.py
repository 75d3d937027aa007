from __future__ import annotations

import csv
from pathlib import Path
from typing import Iterable, Sequence, Union

from .errors import OutputWriteError
from .models import HEADERS


def write_records_csv(
    records: Iterable[Sequence[str]],
    destination: Union[str, Path],
    headers: Sequence[str] = HEADERS,
) -> int:
    """
    Write the header row and one row per record. Returns the record count.
    """
    dest = Path(destination)
    count = 0
    try:
        with dest.open("w", encoding="utf-8", newline="") as f:
            writer = csv.writer(f, lineterminator="\n")
            writer.writerow(list(headers))
            for rec in records:
                writer.writerow(list(rec))
                count += 1
    except OSError as e:
        raise OutputWriteError(f"Failed to write CSV output {dest}: {e}") from e
    return count
