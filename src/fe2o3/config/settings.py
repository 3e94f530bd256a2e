"""Configuration classes for fe2o3."""

import json
import yaml
from dataclasses import dataclass, asdict
from typing import Dict, Any, Optional, Union
from pathlib import Path
import logging

import numpy as np

from ..core.arrays import borrow
from ..core.types import set_default_types
from ..utils.logging_utils import setup_logging

logger = logging.getLogger(__name__)


@dataclass
class ArrayConfig:
    """
    Configuration for the array layer.

    ``default_dtype`` and ``index_dtype`` are the element and handle types of
    data the library allocates itself, such as empty sets and the cells of
    structured grids.
    """
    default_dtype: str = "float64"
    index_dtype: str = "int32"
    enforce_borrows: bool = True

    def validate(self) -> None:
        """Validate array configuration."""
        try:
            np.dtype(self.default_dtype)
        except TypeError as exc:
            raise ValueError(f"Unsupported dtype: {self.default_dtype}") from exc

        try:
            index_dtype = np.dtype(self.index_dtype)
        except TypeError as exc:
            raise ValueError(f"Unsupported index dtype: {self.index_dtype}") from exc
        if not np.issubdtype(index_dtype, np.integer):
            raise ValueError(f"Index dtype must be an integer type, got {self.index_dtype}")

    def element_type(self) -> np.dtype:
        return np.dtype(self.default_dtype)

    def handle_type(self) -> np.dtype:
        return np.dtype(self.index_dtype)


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file_output: Optional[str] = None
    console_output: bool = True

    def validate(self) -> None:
        """Validate logging configuration."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if self.level not in valid_levels:
            raise ValueError(f"Invalid logging level: {self.level}")


@dataclass
class Fe2O3Config:
    """Complete configuration for fe2o3."""
    arrays: ArrayConfig = None
    logging: LoggingConfig = None

    def __post_init__(self):
        """Initialize default configurations if not provided."""
        if self.arrays is None:
            self.arrays = ArrayConfig()
        if self.logging is None:
            self.logging = LoggingConfig()

    def validate(self) -> None:
        """Validate all configuration sections."""
        self.arrays.validate()
        self.logging.validate()

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'Fe2O3Config':
        """Create configuration from dictionary."""
        config = cls()
        if not config_dict:
            return config

        unknown = set(config_dict) - {'arrays', 'logging'}
        if unknown:
            raise ValueError(f"Unknown configuration sections: {sorted(unknown)}")

        if 'arrays' in config_dict:
            config.arrays = ArrayConfig(**config_dict['arrays'])

        if 'logging' in config_dict:
            config.logging = LoggingConfig(**config_dict['logging'])

        return config

    @classmethod
    def from_json(cls, json_path: Union[str, Path]) -> 'Fe2O3Config':
        """Load configuration from JSON file."""
        json_path = Path(json_path)

        if not json_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {json_path}")

        with open(json_path, 'r') as f:
            config_dict = json.load(f)

        config = cls.from_dict(config_dict)
        config.validate()

        logger.info(f"Loaded configuration from {json_path}")
        return config

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path]) -> 'Fe2O3Config':
        """Load configuration from YAML file."""
        yaml_path = Path(yaml_path)

        if not yaml_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {yaml_path}")

        with open(yaml_path, 'r') as f:
            config_dict = yaml.safe_load(f)

        config = cls.from_dict(config_dict)
        config.validate()

        logger.info(f"Loaded configuration from {yaml_path}")
        return config

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            'arrays': asdict(self.arrays),
            'logging': asdict(self.logging)
        }

    def to_json(self, json_path: Union[str, Path], indent: int = 2) -> None:
        """Save configuration to JSON file."""
        json_path = Path(json_path)
        json_path.parent.mkdir(parents=True, exist_ok=True)

        with open(json_path, 'w') as f:
            json.dump(self.to_dict(), f, indent=indent)

        logger.info(f"Saved configuration to {json_path}")

    def to_yaml(self, yaml_path: Union[str, Path]) -> None:
        """Save configuration to YAML file."""
        yaml_path = Path(yaml_path)
        yaml_path.parent.mkdir(parents=True, exist_ok=True)

        with open(yaml_path, 'w') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, indent=2)

        logger.info(f"Saved configuration to {yaml_path}")

    def setup_logging(self) -> None:
        """Setup logging based on configuration."""
        numeric_level = getattr(logging, self.logging.level.upper(), None)
        if not isinstance(numeric_level, int):
            raise ValueError(f'Invalid log level: {self.logging.level}')

        setup_logging(
            level=numeric_level,
            format_string=self.logging.format,
            log_file=self.logging.file_output,
            console_output=self.logging.console_output,
            colored_console=False
        )

    def apply(self) -> None:
        """Validate, then push this configuration into the library."""
        self.validate()
        self.setup_logging()
        set_default_types(self.arrays.element_type(), self.arrays.handle_type())
        borrow.set_enforcement(self.arrays.enforce_borrows)
        logger.info(f"Applied configuration: {self}")

    def __str__(self) -> str:
        return (f"Fe2O3Config(dtype={self.arrays.default_dtype}, "
                f"index_dtype={self.arrays.index_dtype}, "
                f"enforce_borrows={self.arrays.enforce_borrows}, "
                f"log_level={self.logging.level})")


def create_default_config() -> Fe2O3Config:
    """Create default configuration."""
    return Fe2O3Config()


def create_debug_config() -> Fe2O3Config:
    """Create configuration with verbose logging."""
    config = Fe2O3Config()
    config.logging.level = "DEBUG"
    return config
