"""
Test suite for Sumnation Library.

Test Structure:
- test_core.py: Tests for the sumnation procedure and its wrappers
- test_algorithms.py: Tests for the demonstration computations
- test_demo.py: End-to-end tests of the demonstration script
- test_accuracy.py: Tests for the truncation accuracy report
- conftest.py: Shared fixtures and configuration

Usage:
    # Run all tests
    pytest

    # Run tests with coverage
    pytest --cov=sumnation

    # Run only fast tests
    pytest -m "not slow"
"""

__version__ = "1.0.0"
