from dataclasses import dataclass
from typing import List

from xlsx2csv.exporter.model import ExportResult

@dataclass(frozen=True)
class ConvertResult:
    xlsx_path: str
    out_pattern: str  # resolved; "" = stdout
    exports: List[ExportResult]
