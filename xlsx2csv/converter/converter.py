from __future__ import annotations

import logging
import os
from typing import Callable, List

from xlsx2csv.config.settings import ALL_SHEETS, STDOUT_MARKER
from xlsx2csv.csvname.api import csv_name
from xlsx2csv.exporter.api import ExportResult, export_sheet
from xlsx2csv.workbook.api import open_workbook
from .model import ConvertResult

logger = logging.getLogger(__name__)


class ConvertError(RuntimeError):
    pass


class Converter:
    def convert(self, xlsx_path: str, out_pattern: str, sheet_index: int, delimiter: str) -> ConvertResult:
        out_name = self._resolve_out_pattern(xlsx_path, out_pattern)
        if out_name == "" and sheet_index < 0:
            # stdout gets a single sheet
            sheet_index = 0

        with open_workbook(xlsx_path) as workbook:
            sheet_len = len(workbook.sheets)
            if sheet_len == 0:
                raise ConvertError("This XLSX file contains no sheets.")
            if sheet_index >= sheet_len:
                raise ConvertError(
                    f"No sheet {sheet_index} available, please select a sheet between 0 and {sheet_len - 1}. "
                    "Or -1 to convert all sheets."
                )

            first, last = 0, sheet_len - 1
            if sheet_index >= 0:
                first, last = sheet_index, sheet_index

            name_for: Callable[[int], str] = lambda i: csv_name(out_name, i)
            if first == last:
                name_for = lambda i: csv_name(out_name, ALL_SHEETS)

            logger.debug("Converting sheets %d..%d of %s", first, last, xlsx_path)
            exports: List[ExportResult] = []
            for i in range(first, last + 1):
                # first failure ends the run
                exports.append(export_sheet(workbook, i, delimiter, name_for(i)))

        return ConvertResult(xlsx_path=xlsx_path, out_pattern=out_name, exports=exports)

    def _resolve_out_pattern(self, xlsx_path: str, out_pattern: str) -> str:
        if out_pattern == "":
            return os.path.splitext(xlsx_path)[0] + ".csv"
        if out_pattern == STDOUT_MARKER:
            return ""
        return out_pattern
