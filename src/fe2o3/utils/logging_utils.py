"""Logging utilities for fe2o3."""

import functools
import logging
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Optional, Union

PACKAGE_LOGGER = "fe2o3"
DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class ColoredFormatter(logging.Formatter):
    """Console formatter that colors the level name."""

    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
    }
    RESET = '\033[0m'

    def format(self, record):
        color = self.COLORS.get(record.levelname)
        if color is None:
            return super().format(record)
        # Color a copy so file handlers sharing the record stay plain
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


def setup_logging(
    level: Union[str, int] = logging.INFO,
    format_string: Optional[str] = None,
    log_file: Optional[Union[str, Path]] = None,
    console_output: bool = True,
    colored_console: bool = True
) -> logging.Logger:
    """
    Configure the ``fe2o3`` package logger.

    Only the package logger is touched, so applications embedding the
    library keep control of the root logger.

    Args:
        level: Logging level
        format_string: Custom format string
        log_file: Path to log file (optional)
        console_output: Enable console output
        colored_console: Use colored console output

    Returns:
        The configured package logger
    """
    if format_string is None:
        format_string = DEFAULT_FORMAT

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    if console_output:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        if colored_console:
            console_handler.setFormatter(ColoredFormatter(format_string))
        else:
            console_handler.setFormatter(logging.Formatter(format_string))
        package_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path)
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(format_string))
        package_logger.addHandler(file_handler)

    package_logger.debug(f"Logging initialized: level={logging.getLevelName(level)}, "
                         f"console={console_output}, file={log_file is not None}")
    return package_logger


def get_logger(name: str, level: Optional[Union[str, int]] = None) -> logging.Logger:
    """
    Get a logger, optionally overriding its level.

    Args:
        name: Logger name (typically __name__)
        level: Optional override level for this logger
    """
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    return logger


class LoggingContext:
    """Context manager for a temporary logging level."""

    def __init__(self, level: Union[str, int], logger_name: Optional[str] = PACKAGE_LOGGER):
        self.new_level = level
        self.logger_name = logger_name
        self.original_level = None
        self.logger = None

    def __enter__(self):
        self.logger = logging.getLogger(self.logger_name)
        self.original_level = self.logger.level
        self.logger.setLevel(self.new_level)
        return self.logger

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.logger is not None and self.original_level is not None:
            self.logger.setLevel(self.original_level)


@contextmanager
def silence_logger(logger_name: str = PACKAGE_LOGGER):
    """Temporarily silence a logger."""
    with LoggingContext(logging.CRITICAL + 1, logger_name) as logger:
        yield logger


@contextmanager
def debug_logging(logger_name: str = PACKAGE_LOGGER):
    """Temporarily enable debug logging."""
    with LoggingContext(logging.DEBUG, logger_name) as logger:
        yield logger


def log_function_call(func):
    """Decorator logging entry, exit and exceptions of a function at DEBUG."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger(func.__module__)
        logger.debug(f"Entering {func.__name__}")
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            logger.debug(f"Exception in {func.__name__}: {e!r}")
            raise
        logger.debug(f"Exiting {func.__name__}")
        return result

    return wrapper
