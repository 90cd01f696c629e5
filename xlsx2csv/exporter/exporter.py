from __future__ import annotations

import csv
import logging
import sys
from typing import Any, List, TextIO

from xlsx2csv.config.settings import LINE_TERMINATOR, OUTPUT_ENCODING
from xlsx2csv.workbook.api import Sheet, formatted_value
from .model import ExportResult

logger = logging.getLogger(__name__)


class ExportError(RuntimeError):
    pass


class SheetExporter:
    def export_sheet(self, workbook: Any, sheet_index: int, delimiter: str, out_name: str) -> ExportResult:
        # validate before the destination is created
        sheet = self._select_sheet(workbook, sheet_index)

        if not out_name:
            rows = self._write_sheet(sys.stdout, sheet, delimiter, "<stdout>")
        else:
            try:
                f = open(out_name, "w", newline="", encoding=OUTPUT_ENCODING)
            except OSError as e:
                raise ExportError(f"Cannot create {out_name}: {e}") from e
            with f:
                rows = self._write_sheet(f, sheet, delimiter, out_name)

        logger.info(
            "Sheet %d (%s): %d row(s) written to %s",
            sheet_index, sheet.name, rows, out_name or "<stdout>",
        )
        return ExportResult(sheet_index=sheet_index, sheet_name=sheet.name, out_name=out_name, rows=rows)

    def _select_sheet(self, workbook: Any, sheet_index: int) -> Sheet:
        sheet_len = len(workbook.sheets)
        if sheet_len == 0:
            raise ExportError("This XLSX file contains no sheets.")
        if sheet_index < 0 or sheet_index >= sheet_len:
            raise ExportError(
                f"No sheet {sheet_index} available, please select a sheet between 0 and {sheet_len - 1}"
            )
        return workbook.sheets[sheet_index]

    def _write_sheet(self, stream: TextIO, sheet: Sheet, delimiter: str, target: str) -> int:
        writer = csv.writer(stream, delimiter=delimiter, lineterminator=LINE_TERMINATOR)
        rows = 0
        for row in sheet.rows():
            vals: List[str] = []
            if row is not None:
                # CellFormatError propagates as is
                vals = [formatted_value(cell) for cell in row]
            try:
                writer.writerow(vals)
            except (OSError, UnicodeEncodeError) as e:
                raise ExportError(f"Cannot write to {target}: {e}") from e
            rows += 1

        try:
            stream.flush()
        except (OSError, UnicodeEncodeError) as e:
            raise ExportError(f"Cannot write to {target}: {e}") from e
        return rows
