"""
Logging configuration
"""
import logging
import sys
from pathlib import Path
from typing import Optional

from xlsx2csv.config.settings import LOG_FILE, LOG_LEVEL

LOGGER_NAME = 'xlsx2csv'


def setup_logger(level: Optional[str] = None, log_file: Optional[str] = LOG_FILE) -> logging.Logger:
    """Configure logging for the application.

    Console output goes to stderr: stdout may be carrying CSV data.
    Calling this again replaces the handlers installed by a previous call.
    """
    level_name = (level or LOG_LEVEL).upper()

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_formatter = logging.Formatter('%(levelname)s: %(message)s')

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(getattr(logging, level_name, logging.INFO))
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    logger.setLevel(logging.DEBUG)

    # Reduce noise from the parser
    logging.getLogger('openpyxl').setLevel(logging.WARNING)

    return logger
