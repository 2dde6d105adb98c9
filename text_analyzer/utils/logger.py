"""
logger.py

Configures the application-wide logger using Python's standard `logging` module.

A single logger named 'text_analyzer' is set up on first access with:

1.  Stream Handler (stdout):
    - Level taken from `config["logging"]["level"]` (defaults to DEBUG).
    - Format: Time, Level, Message.

2.  File Handler:
    - Writes to `config["paths"]["logs_dir"]/text_analyzer.log`.
    - Level: `INFO` and above.
    - Format: Timestamp, Level, LoggerName:FuncName:LineNo, Message.
    - Failures while creating the directory or file disable file logging only.

Subsequent calls to `get_logger` return the same configured instance.
"""

import logging
import sys
from pathlib import Path

from text_analyzer.config import config

_logger_instance = None
_DEFAULT_LOG_DIR = "./logs"
_DEFAULT_LOG_FILENAME = "text_analyzer.log"
_APP_LOGGER_NAME = "text_analyzer"


def _setup_logger() -> logging.Logger:
    global _logger_instance
    if _logger_instance:
        return _logger_instance

    logger = logging.getLogger(_APP_LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    if logger.hasHandlers():
        logger.handlers.clear()

    file_formatter = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d - %(message)s"
    )
    console_formatter = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(message)s", datefmt="%H:%M:%S"
    )

    console_level_name = str(config.get("logging", {}).get("level", "DEBUG")).upper()
    console_level = logging.getLevelName(console_level_name)
    if not isinstance(console_level, int):
        console_level = logging.DEBUG

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    log_dir_path_str = config.get("paths", {}).get("logs_dir", _DEFAULT_LOG_DIR)
    try:
        log_dir = Path(log_dir_path_str)
        log_dir.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(
            log_dir / _DEFAULT_LOG_FILENAME, encoding="utf-8"
        )
        file_handler.setLevel(logging.INFO)
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)
    except OSError as e:
        logger.error(
            f"Failed to create log directory or file at '{log_dir_path_str}': {e}. "
            "File logging disabled."
        )

    _logger_instance = logger
    return _logger_instance


def get_logger() -> logging.Logger:
    """
    Returns the application's configured logger instance.

    The first call performs the handler setup; later calls reuse it.
    """
    return _setup_logger()
