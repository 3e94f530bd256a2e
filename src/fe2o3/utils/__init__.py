"""Utility functions for fe2o3."""

from .logging_utils import (
    setup_logging,
    get_logger,
    LoggingContext,
    silence_logger,
    debug_logging,
    log_function_call,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "LoggingContext",
    "silence_logger",
    "debug_logging",
    "log_function_call",
]
