from __future__ import annotations

from typing import Tuple


INDEX_TOKEN: str = "%d"
DEFAULT_EXT: str = ".csv"
# Workbook extensions never make sense on a CSV output name.
SPREADSHEET_EXTS = frozenset({".xlsx", ".xlsm", ".xltx", ".xltm", ".xls"})


class CsvNamer:
    def csv_name(self, pattern: str, sheet_index: int) -> str:
        if pattern == "":
            return ""

        base, ext = self._split_ext(pattern)
        if ext == "":
            ext = DEFAULT_EXT
        elif ext.lower() in SPREADSHEET_EXTS:
            ext = DEFAULT_EXT

        if sheet_index >= 0:
            index_str = str(sheet_index)
            if INDEX_TOKEN in base:
                base = base.replace(INDEX_TOKEN, index_str, 1)
            else:
                base = f"{base}.{index_str}"
        else:
            base = base.replace(INDEX_TOKEN, "", 1)
        return base + ext

    def _split_ext(self, pattern: str) -> Tuple[str, str]:
        # extension = from the last dot of the final path element
        for pos in range(len(pattern) - 1, -1, -1):
            ch = pattern[pos]
            if ch in "/\\":
                break
            if ch == ".":
                return pattern[:pos], pattern[pos:]
        return pattern, ""
