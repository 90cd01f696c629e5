import re
from pathlib import Path
from types import SimpleNamespace

import pytest

from xlsx2csv.converter.api import ConvertError, convert
from xlsx2csv.exporter.api import ExportError
from xlsx2csv.workbook.api import Workbook, WorkbookError


def _lines(path: Path):
    return path.read_text(encoding="utf-8").splitlines()


def test_all_sheets_one_file_each(make_xlsx, tmp_path: Path):
    path = make_xlsx({"A": [["a1"], ["a2"]], "B": [["b1"]], "C": [["c1"], ["c2"], ["c3"]]})
    res = convert(str(path))

    assert res.out_pattern == str(tmp_path / "book.csv")
    assert [e.sheet_index for e in res.exports] == [0, 1, 2]
    assert _lines(tmp_path / "book.0.csv") == ["a1", "a2"]
    assert _lines(tmp_path / "book.1.csv") == ["b1"]
    assert _lines(tmp_path / "book.2.csv") == ["c1", "c2", "c3"]
    assert [e.rows for e in res.exports] == [2, 1, 3]


def test_single_sheet_omits_index(make_xlsx, tmp_path: Path):
    path = make_xlsx({"A": [["a"]], "B": [["b"]]})
    res = convert(str(path), sheet_index=1)

    assert [e.out_name for e in res.exports] == [str(tmp_path / "book.csv")]
    assert _lines(tmp_path / "book.csv") == ["b"]
    assert not (tmp_path / "book.1.csv").exists()


def test_workbook_with_one_sheet_omits_index(make_xlsx, tmp_path: Path):
    path = make_xlsx({"Only": [["x"]]})
    convert(str(path))
    assert (tmp_path / "book.csv").exists()


def test_pattern_with_token(make_xlsx, tmp_path: Path):
    path = make_xlsx({"A": [["a"]], "B": [["b"]]})
    pattern = str(tmp_path / "sheet_%d_out.txt")
    convert(str(path), out_pattern=pattern, delimiter=";")

    assert _lines(tmp_path / "sheet_0_out.txt") == ["a"]
    assert _lines(tmp_path / "sheet_1_out.txt") == ["b"]


def test_stdout_defaults_to_first_sheet(make_xlsx, tmp_path: Path, capsys):
    path = make_xlsx({"A": [["a", "1"]], "B": [["b", "2"]]})
    res = convert(str(path), out_pattern="stdout")

    assert res.out_pattern == ""
    assert [e.sheet_index for e in res.exports] == [0]
    assert capsys.readouterr().out == "a,1\n"
    assert list(tmp_path.glob("*.csv")) == []


def test_stdout_with_index(make_xlsx, capsys):
    path = make_xlsx({"A": [["a"]], "B": [["b"]]})
    convert(str(path), out_pattern="stdout", sheet_index=1)
    assert capsys.readouterr().out == "b\n"


def test_index_out_of_range(make_xlsx, tmp_path: Path):
    path = make_xlsx({"A": [["a"]], "B": [["b"]]})
    with pytest.raises(ConvertError) as exc:
        convert(str(path), sheet_index=5)
    assert "between 0 and 1" in str(exc.value)
    assert list(tmp_path.glob("*.csv")) == []


def test_no_sheets(monkeypatch, tmp_path: Path):
    closed = []
    empty = Workbook(source_path="empty.xlsx", sheets=[], book=SimpleNamespace(close=lambda: closed.append(True)))
    monkeypatch.setattr("xlsx2csv.converter.converter.open_workbook", lambda path: empty)

    for index in (-1, 0, 2):
        with pytest.raises(ConvertError) as exc:
            convert("empty.xlsx", out_pattern=str(tmp_path / "out.csv"), sheet_index=index)
        assert "no sheets" in str(exc.value)
    assert closed == [True, True, True]


def test_first_failure_stops_the_run(make_xlsx, monkeypatch, tmp_path: Path):
    path = make_xlsx({"A": [["a"]], "B": [["b"]], "C": [["c"]]})
    calls = []

    def failing_export(workbook, sheet_index, delimiter, out_name):
        calls.append(sheet_index)
        if sheet_index == 1:
            raise ExportError("disk full")
        return SimpleNamespace(sheet_index=sheet_index)

    monkeypatch.setattr("xlsx2csv.converter.converter.export_sheet", failing_export)
    with pytest.raises(ExportError):
        convert(str(path))
    assert calls == [0, 1]


def test_unreadable_workbook(tmp_path: Path):
    bogus = tmp_path / "bad.xlsx"
    bogus.write_bytes(b"\x00\x01garbage")
    with pytest.raises(WorkbookError):
        convert(str(bogus))


def test_stale_dimension_keeps_all_rows(make_xlsx, rewrite_sheet_xml, tmp_path: Path):
    path = make_xlsx({"S": [["a", "b"], ["c", "d"], ["e", "f"]]})
    rewrite_sheet_xml(path, lambda xml: re.sub(rb'<dimension ref="[^"]*"\s*/>', b'<dimension ref="A1:A1"/>', xml))

    res = convert(str(path))
    assert [e.rows for e in res.exports] == [3]
    assert _lines(tmp_path / "book.csv") == ["a,b", "c,d", "e,f"]


def test_source_without_extension(make_xlsx, tmp_path: Path):
    path = make_xlsx({"A": [["a"]], "B": [["b"]]})
    upload = tmp_path / "upload"
    upload.write_bytes(path.read_bytes())

    convert(str(upload))
    assert _lines(tmp_path / "upload.0.csv") == ["a"]
    assert _lines(tmp_path / "upload.1.csv") == ["b"]
