"""Shared pytest fixtures."""

import gc
import logging
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from fe2o3.core.arrays.borrow import get_registry
from fe2o3.core.types import set_default_types
from fe2o3.utils.logging_utils import PACKAGE_LOGGER


@pytest.fixture(autouse=True)
def clean_borrow_registry():
    """Start and end every test with no live borrows, enforcement on and default types."""
    registry = get_registry()
    registry.clear()
    registry.enforce = True
    yield registry
    gc.collect()
    registry.clear()
    registry.enforce = True
    set_default_types()


@pytest.fixture
def package_logger():
    """The fe2o3 package logger, with its level and handlers restored afterwards."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    level = logger.level
    handlers = list(logger.handlers)
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)
