import logging
import zipfile
from pathlib import Path
from typing import Callable, Dict, List

import pytest
from openpyxl import Workbook

from xlsx2csv.utils.logger import LOGGER_NAME


@pytest.fixture
def make_xlsx(tmp_path: Path) -> Callable[..., Path]:
    """Build an .xlsx file from {sheet_title: [row, ...]}; a row of None leaves that row absent."""

    def _make(sheets: Dict[str, List[object]], name: str = "book.xlsx") -> Path:
        wb = Workbook()
        wb.remove(wb.active)
        for title, rows in sheets.items():
            ws = wb.create_sheet(title)
            for r, row in enumerate(rows, start=1):
                if row is None:
                    continue
                for c, value in enumerate(row, start=1):
                    ws.cell(row=r, column=c, value=value)
        path = tmp_path / name
        wb.save(path)
        return path

    return _make


@pytest.fixture(autouse=True)
def _reset_app_logger():
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def rewrite_sheet_xml() -> Callable[..., Path]:
    """Rewrite one worksheet part of a saved .xlsx, as third-party writers produce them."""

    def _rewrite(path: Path, edit: Callable[[bytes], bytes], part: str = "xl/worksheets/sheet1.xml") -> Path:
        with zipfile.ZipFile(path) as src:
            entries = [(info, src.read(info.filename)) for info in src.infolist()]
        with zipfile.ZipFile(path, "w", zipfile.ZIP_DEFLATED) as dst:
            for info, data in entries:
                if info.filename == part:
                    data = edit(data)
                dst.writestr(info, data)
        return path

    return _rewrite
