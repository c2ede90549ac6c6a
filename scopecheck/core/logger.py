"""
logger.py
==========
Provides a centralized logger for ScopeCheck.
Handles console and file logging with consistent formatting.
"""

import logging
import os
import sys
from datetime import datetime

DEFAULT_LOGGER_NAME = "ScopeCheck"
DEFAULT_LOG_DIR = "logs"


# ----------------------------------------------------------------------
# Logger Configuration
# ----------------------------------------------------------------------
def get_logger(name: str = DEFAULT_LOGGER_NAME, log_dir: str = DEFAULT_LOG_DIR,
               console_level: str = None) -> logging.Logger:
    """
    Create or return a logger instance with both console and file handlers.
    :param name: Logger name, default is 'ScopeCheck'
    :param log_dir: Directory for the daily log file, created if missing
    :param console_level: Level name for the console handler (INFO when unset).
                          On an already configured logger only this level changes.
    :return: Configured logger instance
    """

    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)

    if logger.handlers:
        # Already configured; never add a second set of handlers
        if console_level:
            for handler in logger.handlers:
                if not isinstance(handler, logging.FileHandler):
                    handler.setLevel(_level(console_level))
        return logger

    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, f"scopecheck_{datetime.now().strftime('%Y%m%d')}.log")

    # ------------------------------------------------------------------
    # File Handler (writes to <log_dir>/scopecheck_YYYYMMDD.log)
    # ------------------------------------------------------------------
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    file_handler.setFormatter(file_formatter)
    file_handler.setLevel(logging.DEBUG)

    # ------------------------------------------------------------------
    # Console Handler (stderr, so stdout stays clean for reports)
    # ------------------------------------------------------------------
    console_handler = logging.StreamHandler(sys.stderr)
    console_formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(message)s",
        datefmt="%H:%M:%S"
    )
    console_handler.setFormatter(console_formatter)
    console_handler.setLevel(_level(console_level or "INFO"))

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    return logger


def _level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)
