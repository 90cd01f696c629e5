from __future__ import annotations

from xlsx2csv.config.settings import ALL_SHEETS
from .converter import ConvertError, Converter
from .model import ConvertResult


def convert(xlsx_path: str, out_pattern: str = "", sheet_index: int = ALL_SHEETS, delimiter: str = ",") -> ConvertResult:
    """Public API (Converter)

    Contract:
    - out_pattern "" -> input path with its extension replaced by ".csv"; "stdout" -> standard output.
    - Standard output without a sheet index converts sheet 0.
    - sheet_index < 0 converts every sheet, one file each, named csv_name(pattern, i).
    - A single converted sheet is named csv_name(pattern, -1).
    - No sheets / index out of range -> ConvertError.
    - Serial; the first failing sheet stops the run.
    """
    return Converter().convert(xlsx_path, out_pattern, sheet_index, delimiter)
