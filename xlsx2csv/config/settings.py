"""
Configuration settings for the xlsx to csv converter
"""
import os
from importlib.metadata import PackageNotFoundError, version

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Logging
LOG_LEVEL = os.getenv('XLSX2CSV_LOG_LEVEL', 'WARNING').upper()
LOG_FILE = os.getenv('XLSX2CSV_LOG_FILE') or None

# CSV output
DEFAULT_DELIMITER = os.getenv('XLSX2CSV_DELIMITER', ',')
LINE_TERMINATOR = '\n'
OUTPUT_ENCODING = 'utf-8'

# -o value that redirects output to standard output
STDOUT_MARKER = 'stdout'

# Sheet index meaning "every sheet in the workbook"
ALL_SHEETS = -1

try:
    VERSION = version('xlsx2csv')
except PackageNotFoundError:
    VERSION = 'dev'
