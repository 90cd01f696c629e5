from dataclasses import dataclass

@dataclass(frozen=True)
class ExportResult:
    sheet_index: int
    sheet_name: str
    out_name: str  # "" = stdout
    rows: int
