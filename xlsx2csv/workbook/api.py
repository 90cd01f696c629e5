from __future__ import annotations

from typing import Any

from .formatter import CellFormatter
from .model import Sheet, Workbook
from .workbook import CellFormatError, WorkbookError, WorkbookReader


def open_workbook(xlsx_path: str) -> Workbook:
    """Public API (WorkbookReader)

    Contract:
    - openpyxl, read-only, data_only (formulas yield their cached results).
    - Read by content: any file name or extension is accepted.
    - Stored sheet dimensions are ignored; every stored row is read.
    - Any open/parse failure -> WorkbookError.
    - Workbook is a context manager; closing releases the archive.
    """
    return WorkbookReader().open(xlsx_path)


def formatted_value(cell: Any) -> str:
    """Public API (CellFormatter)

    Contract:
    - Display string for cell.value honoring common number formats.
    - Datetimes: ISO date only when the format has no time part, else ISO date and time.
    - Empty cell -> "".
    - Unsupported value type -> CellFormatError.
    """
    return CellFormatter().formatted_value(cell)
