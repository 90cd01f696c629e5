from __future__ import annotations

import logging

from openpyxl import load_workbook

from .model import Sheet, Workbook

logger = logging.getLogger(__name__)


class WorkbookError(RuntimeError):
    pass


class CellFormatError(WorkbookError):
    pass


class WorkbookReader:
    """Opens XLSX files with openpyxl (read-only, cached formula values)."""

    def open(self, xlsx_path: str) -> Workbook:
        try:
            stream = open(xlsx_path, "rb")
        except OSError as e:
            raise WorkbookError(f"Cannot open {xlsx_path}: {e}") from e

        # a file object skips openpyxl's file-extension check
        try:
            book = load_workbook(stream, read_only=True, data_only=True)
        except Exception as e:
            stream.close()
            raise WorkbookError(f"Cannot open {xlsx_path}: {e}") from e

        sheets = []
        for i, ws in enumerate(book.worksheets):
            # stored <dimension> is often stale; scan the real extent instead
            ws.reset_dimensions()
            sheets.append(Sheet(index=i, name=ws.title, worksheet=ws))

        logger.debug("Opened %s: %d sheet(s) %s", xlsx_path, len(sheets), [s.name for s in sheets])
        return Workbook(source_path=xlsx_path, sheets=sheets, book=book, stream=stream)
