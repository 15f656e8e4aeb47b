"""Shared pytest configuration for the balancedbst test suite."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from balancedbst import Tree


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: long-running tests excluded by run_tests.py")


@pytest.fixture
def sample_tree():
    """The seven-value tree used throughout the suite.

    Structure:
             5
           /   \\
          3     8
         / \\   / \\
        1   4 7   9
    """
    return Tree([5, 3, 8, 1, 4, 7, 9])
