from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional

from xlsx2csv.config.settings import ALL_SHEETS, DEFAULT_DELIMITER, STDOUT_MARKER, VERSION
from xlsx2csv.converter.api import ConvertError, convert
from xlsx2csv.exporter.api import ExportError
from xlsx2csv.utils.logger import setup_logger
from xlsx2csv.workbook.api import WorkbookError

logger = logging.getLogger("xlsx2csv.cli")

EPILOG = """\
Defaults :
- If -i is not given or is negative, all sheets are converted.
- If -o is not given, output filename is derived from input filename by replacing its extension with .csv
- If -o is "{stdout}", output is written to standard output (first sheet unless -i is given)
- If multiple sheets are converted, the sheet index is added to the output filename.
  If the output filename has a %d, it is replaced with the sheet index,
  if not, the index is added before the extension.
- If -d is not given, comma (,) is used as the delimiter

Examples:
- Convert all sheets in input.xlsx to CSV files named input.0.csv, input.1.csv, etc:
> {prog} input.xlsx
- Convert only the second sheet (index 1) in input.xlsx to output.csv using semicolon as delimiter:
> {prog} -i 1 -o output.csv -d ';' input.xlsx
- Convert the first sheet to stdout:
> {prog} -o stdout input.xlsx
"""


class _ArgumentParser(argparse.ArgumentParser):
    """Usage errors exit with status 1."""

    def error(self, message: str) -> None:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _delimiter(value: str) -> str:
    if not value:
        raise argparse.ArgumentTypeError("delimiter must not be empty")
    delim = value[0]
    if delim in ('"', "\r", "\n"):
        raise argparse.ArgumentTypeError(f"invalid delimiter {delim!r}")
    if len(value) > 1:
        logger.warning("Delimiter %r is longer than one character, using %r", value, delim)
    return delim


def build_parser(prog: Optional[str] = None) -> argparse.ArgumentParser:
    prog = prog or os.path.splitext(os.path.basename(sys.argv[0]))[0] or "xlsx2csv"
    parser = _ArgumentParser(
        prog=prog,
        usage="%(prog)s [flags] <xlsx-to-be-read>",
        description=(
            f"{prog} (version: {VERSION})\n"
            "\tdumps the given xlsx file's chosen sheet as a CSV,\n"
            "\twith the specified delimiter, into the specified output."
        ),
        epilog=EPILOG.format(prog=prog, stdout=STDOUT_MARKER),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("xlsx", help="xlsx file to convert")
    parser.add_argument("-o", dest="out_file", default="", metavar="PATTERN", help="filename to output to.")
    parser.add_argument(
        "-i", dest="sheet_index", type=int, default=ALL_SHEETS, metavar="INDEX",
        help="Index of sheet to convert, zero based.",
    )
    parser.add_argument(
        "-d", dest="delimiter", type=_delimiter, default=DEFAULT_DELIMITER, metavar="DELIM",
        help="Delimiter to use between fields",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    setup_logger()
    args = build_parser().parse_args(argv)

    try:
        result = convert(args.xlsx, args.out_file, args.sheet_index, args.delimiter)
    except (WorkbookError, ExportError, ConvertError, OSError) as e:
        logger.error("%s", e)
        return 1

    logger.debug("Converted %d sheet(s) from %s", len(result.exports), result.xlsx_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
