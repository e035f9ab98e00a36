"""
Logging setup shared by the library and the command line script.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

CONSOLE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Get a logger with a console handler attached.

    Args:
        name: Logger name (usually __name__)
        level: Optional logging level, INFO when omitted

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        if level is None:
            level = logging.INFO
        logger.setLevel(level)

        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(console_handler)

    return logger


def set_level(level: int) -> None:
    """Change the level of the package logger and its console handlers."""
    logger = logging.getLogger("spreadsplit")
    logger.setLevel(level)
    for handler in logger.handlers:
        if not isinstance(handler, logging.FileHandler):
            handler.setLevel(level)


def setup_file_logging(log_dir: str = "logs", log_file: Optional[str] = None) -> Path:
    """
    Send everything the package logs, DEBUG included, to a file.

    Args:
        log_dir: Directory to store log files
        log_file: Optional specific log file name

    Returns:
        Path of the log file
    """
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    if log_file is None:
        log_file = f"split_spreads_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"

    file_path = log_path / log_file

    file_handler = logging.FileHandler(file_path, encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))

    logger = logging.getLogger("spreadsplit")
    logger.setLevel(logging.DEBUG)
    logger.addHandler(file_handler)
    return file_path
