from __future__ import annotations

from .csvname import CsvNamer


def csv_name(pattern: str, sheet_index: int) -> str:
    """Public API (CsvNamer)

    Contract:
    - Empty pattern -> "" (caller writes to stdout).
    - No extension -> ".csv"; spreadsheet extensions (.xlsx, ...) become ".csv".
    - sheet_index >= 0: first "%d" replaced by the index, else ".<index>" appended to the base.
    - sheet_index < 0: first "%d" removed.
    - Extension appended after index insertion.
    """
    return CsvNamer().csv_name(pattern, sheet_index)
