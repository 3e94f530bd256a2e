"""Configuration management for fe2o3."""

from .settings import (
    Fe2O3Config,
    ArrayConfig,
    LoggingConfig,
    create_default_config,
    create_debug_config,
)

__all__ = [
    "Fe2O3Config",
    "ArrayConfig",
    "LoggingConfig",
    "create_default_config",
    "create_debug_config",
]
