#!/usr/bin/env python3
"""
Pytest configuration and fixtures for sumnation tests.

This file contains shared test fixtures, configuration, and utilities
used across the test suite.
"""

import pytest
import numpy as np
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))


@pytest.fixture
def small_limits():
    """Series bounds small enough for fast tests."""
    return 1, 1000


@pytest.fixture
def integer_bounds():
    """Pairs of integer bounds with a <= b."""
    return [(1, 1), (1, 10), (0, 100), (-5, 5), (-20, -3), (7, 1000)]


@pytest.fixture
def reference_zeta():
    """Vectorised reference for truncated zeta sums."""
    def zeta(s, lower_limit, upper_limit):
        n = np.arange(lower_limit, upper_limit + 1, dtype=np.float64)
        return float(np.sum(1.0 / n ** s))
    return zeta


class AccuracyChecker:
    """Utility class for checking numerical accuracy."""

    @staticmethod
    def relative_error(computed: float, reference: float) -> float:
        """Calculate relative error."""
        if reference == 0:
            return abs(computed)
        return abs(computed - reference) / abs(reference)

    @staticmethod
    def zeta_tail_bound(s: float, upper_limit: int) -> float:
        """Upper bound of the zeta series tail beyond upper_limit."""
        return upper_limit ** (1 - s) / (s - 1)


@pytest.fixture
def accuracy_checker():
    """Fixture providing accuracy checking utilities."""
    return AccuracyChecker()


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers automatically."""
    for item in items:
        # Mark tests that take long time as slow
        if "full_limit" in item.name or "million" in item.name:
            item.add_marker(pytest.mark.slow)

        # Mark integration tests
        if "integration" in item.name or "end_to_end" in item.name:
            item.add_marker(pytest.mark.integration)
