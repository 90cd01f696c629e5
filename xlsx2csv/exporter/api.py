from __future__ import annotations

from typing import Any

from .exporter import ExportError, SheetExporter
from .model import ExportResult


def export_sheet(workbook: Any, sheet_index: int, delimiter: str, out_name: str) -> ExportResult:
    """Public API (SheetExporter)

    Contract:
    - No sheets / sheet_index out of [0, count-1] -> ExportError, destination untouched.
    - out_name "" -> stdout (left open); otherwise file created/truncated and always closed.
    - One CSV record per row position; absent rows give an empty record.
    - No header row, minimal quoting, "\\n" line terminator.
    - Cell formatting errors propagate; I/O errors -> ExportError.
    - No cleanup of a partially written file.
    """
    return SheetExporter().export_sheet(workbook, sheet_index, delimiter, out_name)
