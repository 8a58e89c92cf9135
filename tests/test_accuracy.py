#!/usr/bin/env python3
"""
Unit tests for the truncation accuracy report.
"""

import math
import pytest
import pandas as pd

from sumnation.accuracy import AccuracyBenchmark, CASE_TYPES


class TestAccuracyBenchmark:
    """Test cases for AccuracyBenchmark."""

    @pytest.mark.parametrize("case_type, exact", [
        ('basel', math.pi ** 2 / 6),
        ('apery', 1.2020569031595942),
        ('pi', math.pi),
        ('simpson_cubic', 0.25),
    ])
    def test_generate_test_case(self, case_type, exact):
        """Test that each case approximates its exact value."""
        func, expected = AccuracyBenchmark().generate_test_case(case_type, 1000)
        assert expected == pytest.approx(exact)
        assert float(func()) == pytest.approx(exact, abs=1e-3)

    def test_unknown_case_type(self):
        """Test that unknown case types are rejected."""
        with pytest.raises(ValueError, match="Unknown test case type"):
            AccuracyBenchmark().generate_test_case('catalan', 10)

    def test_run_single_benchmark(self):
        """Test the recorded error metrics."""
        result = AccuracyBenchmark().run_single_benchmark('constant', lambda: 1.5, 2.0, 10)

        assert result['result'] == 1.5
        assert result['abs_error'] == 0.5
        assert result['rel_error'] == 0.25
        assert result['tail_bound'] == 0.1
        assert result['time'] >= 0

    def test_zero_exact_uses_absolute_error(self):
        """Test the relative error fallback for an exact value of zero."""
        result = AccuracyBenchmark().run_single_benchmark('zero', lambda: -0.5, 0.0)
        assert result['rel_error'] == 0.5

    def test_comprehensive_benchmark(self, capsys):
        """Test the report over every case type."""
        benchmark = AccuracyBenchmark()
        df = benchmark.run_comprehensive_benchmark(upper_limits=[10, 100])

        assert isinstance(df, pd.DataFrame)
        assert len(df) == len(CASE_TYPES) * 2
        assert set(df['case_type']) == set(CASE_TYPES)

        # Truncation error shrinks as the series grows
        for case_type in ('basel', 'apery', 'pi'):
            errors = df[df['case_type'] == case_type].sort_values('upper_limit')['abs_error']
            assert errors.is_monotonic_decreasing

        basel = df[df['case_type'] == 'basel']
        assert (basel['abs_error'] <= basel['tail_bound']).all()

        benchmark.analyze_results(df)
        out = capsys.readouterr().out
        assert "TRUNCATION ACCURACY ANALYSIS" in out
        assert "simpson_cubic" in out
