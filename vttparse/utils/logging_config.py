"""
Logging setup for vttparse.

Library modules only ask for a logger named after themselves; nothing is
printed until an application (the CLI, or a caller's own code) installs
handlers on the package logger with setup_logging(). Diagnostics always go
to stderr so JSON written to stdout stays machine-readable.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO
from .constants import APP_NAME, DEFAULT_LOG_FORMAT, DEFAULT_LOG_DATE_FORMAT


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level name for terminal output."""

    LEVEL_COLORS = {
        logging.DEBUG: '\033[36m',
        logging.INFO: '\033[32m',
        logging.WARNING: '\033[33m',
        logging.ERROR: '\033[31m',
        logging.CRITICAL: '\033[35m',
    }
    RESET = '\033[0m'

    def format(self, record: logging.LogRecord) -> str:
        color = self.LEVEL_COLORS.get(record.levelno)
        if color is None:
            return super().format(record)
        # The file handler sees the same record, so color a copy
        colored = logging.makeLogRecord(record.__dict__)
        colored.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(colored)


def _console_formatter(stream: TextIO, use_colors: bool) -> logging.Formatter:
    if use_colors and stream.isatty():
        return ColoredFormatter(DEFAULT_LOG_FORMAT, datefmt=DEFAULT_LOG_DATE_FORMAT)
    return logging.Formatter(DEFAULT_LOG_FORMAT, datefmt=DEFAULT_LOG_DATE_FORMAT)


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Path] = None,
    use_colors: bool = True,
    logger_name: str = APP_NAME
) -> logging.Logger:
    """
    Install stderr (and optionally file) handlers on the package logger.

    Calling it again replaces the handlers from the previous call, so the CLI
    can be run several times in one process without duplicated output.

    Args:
        level: Threshold for the logger and every handler
        log_file: Extra UTF-8 log file; parent directories are created
        use_colors: Color level names when stderr is a terminal
        logger_name: Logger to configure; module loggers below it inherit

    Returns:
        The configured logger

    Example:
        >>> setup_logging(logging.DEBUG, Path("logs/vttparse.log"))
        >>> get_logger("vttparse.core.scanner").debug("now visible")
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(_console_formatter(sys.stderr, use_colors))
    logger.addHandler(console)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter(DEFAULT_LOG_FORMAT, datefmt=DEFAULT_LOG_DATE_FORMAT))
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = APP_NAME) -> logging.Logger:
    """Logger for a module; pass ``__name__`` so it sits under the package logger."""
    return logging.getLogger(name)
