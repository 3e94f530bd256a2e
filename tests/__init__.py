"""
Test Suite for fe2o3

Test Categories:
    - Unit tests: arrays, sets, topology bases, configuration, logging
    - Integration tests: structured and unstructured mesh topologies built
      end to end on top of the array layer
"""

import sys
from pathlib import Path

import numpy as np

# Add src directory to path for imports
test_dir = Path(__file__).parent
src_dir = test_dir.parent / 'src'
sys.path.insert(0, str(src_dir))

# Shapes exercised by the exhaustive indexing tests
TEST_SHAPES = [(8,), (4, 2), (2, 4), (3, 1, 2), (6, 3, 5), (2, 2, 2, 2), (1,), (5, 1)]


def arange_buffer(n, dtype=np.int64):
    """Contiguous buffer holding 0..n-1."""
    return np.arange(n, dtype=dtype)


__all__ = ['TEST_SHAPES', 'arange_buffer']
