from __future__ import annotations

import datetime
import re
from typing import Any, Union

from .workbook import CellFormatError


GENERAL: str = "General"
# 0 / 0.00 / #,##0 / #,##0.00 / 0% / 0.00%
_FIXED_RE = re.compile(r"^(#,##)?0(?:\.(0+))?(%)?$")
_TIME_TOKEN_RE = re.compile(r"[hs]|am/pm", re.IGNORECASE)
# integral floats above this are left to repr() (exponent notation)
_MAX_PLAIN_INT: float = 1e15


class CellFormatter:
    def formatted_value(self, cell: Any) -> str:
        value = cell.value
        number_format = getattr(cell, "number_format", None) or GENERAL

        if value is None:
            return ""
        if isinstance(value, bool):
            return "TRUE" if value else "FALSE"
        if isinstance(value, str):
            return value
        if isinstance(value, datetime.datetime):
            return self._format_datetime(value, number_format)
        if isinstance(value, datetime.date):
            return value.isoformat()
        if isinstance(value, datetime.time):
            return value.isoformat()
        if isinstance(value, datetime.timedelta):
            return self._format_timedelta(value)
        if isinstance(value, (int, float)):
            return self._format_number(value, number_format)

        coordinate = getattr(cell, "coordinate", "?")
        raise CellFormatError(f"Cannot format {type(value).__name__} value in cell {coordinate}")

    def _format_number(self, value: Union[int, float], number_format: str) -> str:
        section = number_format.split(";", 1)[0].strip()
        m = _FIXED_RE.match(section)
        if not m:
            return self._format_general(value)

        grouping = "," if m.group(1) else ""
        decimals = len(m.group(2) or "")
        if m.group(3):
            return f"{value * 100:{grouping}.{decimals}f}%"
        return f"{value:{grouping}.{decimals}f}"

    def _format_general(self, value: Union[int, float]) -> str:
        if isinstance(value, int):
            return str(value)
        if value.is_integer() and abs(value) < _MAX_PLAIN_INT:
            return str(int(value))
        return repr(value)

    def _format_datetime(self, value: datetime.datetime, number_format: str) -> str:
        if number_format == GENERAL:
            has_time_part = value.time() != datetime.time(0, 0)
        else:
            has_time_part = bool(_TIME_TOKEN_RE.search(number_format))
        if not has_time_part:
            return value.date().isoformat()
        return value.isoformat(sep=" ")

    def _format_timedelta(self, value: datetime.timedelta) -> str:
        total = int(value.total_seconds())
        sign = "-" if total < 0 else ""
        hours, rest = divmod(abs(total), 3600)
        minutes, seconds = divmod(rest, 60)
        return f"{sign}{hours}:{minutes:02d}:{seconds:02d}"
