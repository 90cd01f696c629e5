from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, List, Optional, Sequence

from openpyxl.cell.read_only import EMPTY_CELL


@dataclass(frozen=True)
class Sheet:
    index: int
    name: str
    worksheet: Any = field(repr=False)

    def rows(self) -> Iterator[Optional[Sequence[Any]]]:
        """Rows top to bottom; None for a row position with no stored cells.

        Each call starts a fresh pass over the sheet.
        """
        for row in self.worksheet.iter_rows():
            if not row or all(cell is EMPTY_CELL for cell in row):
                yield None
            else:
                yield row


@dataclass(frozen=True)
class Workbook:
    source_path: str
    sheets: List[Sheet]
    book: Any = field(repr=False)
    stream: Any = field(default=None, repr=False)

    def close(self) -> None:
        try:
            self.book.close()
        finally:
            if self.stream is not None:
                self.stream.close()

    def __enter__(self) -> Workbook:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
