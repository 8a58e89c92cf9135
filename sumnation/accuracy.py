#!/usr/bin/env python3
"""
Truncation-error report for the demonstration computations.

Measures how far the truncated series and Simpson's rule land from the
constants they approximate, across a range of upper limits.
"""

import math
import time
import numpy as np
import pandas as pd
from typing import Callable, Dict, List, Optional, Tuple

from .algorithms import (
    APERY_CONSTANT,
    BASEL_CONSTANT,
    LOWER_LIMIT,
    riemann_zeta_function,
    pi_from_basel,
    simpsons_rule,
)

CASE_TYPES = ['basel', 'apery', 'pi', 'simpson_cubic']
UPPER_LIMITS = [10, 100, 1000, 10000]


class AccuracyBenchmark:
    """
    Accuracy report for the truncated demonstration computations.
    """

    def __init__(self, lower_limit: int = LOWER_LIMIT):
        self.lower_limit = lower_limit
        self.results = []

    def generate_test_case(self, case_type: str, upper_limit: int) -> Tuple[Callable[[], float], float]:
        """
        Generate a computation with its known exact result.

        Args:
            case_type: Type of test case
            upper_limit: Last index of the series (subintervals for Simpson's rule)

        Returns:
            Tuple of (computation, exact_result)
        """
        lower_limit = self.lower_limit

        if case_type == 'basel':
            func = lambda: riemann_zeta_function(2, lower_limit, upper_limit)
            exact = BASEL_CONSTANT

        elif case_type == 'apery':
            func = lambda: riemann_zeta_function(3, lower_limit, upper_limit)
            exact = APERY_CONSTANT

        elif case_type == 'pi':
            func = lambda: pi_from_basel(riemann_zeta_function(2, lower_limit, upper_limit))
            exact = math.pi

        elif case_type == 'simpson_cubic':
            # Simpson's rule is exact for cubics
            func = lambda: simpsons_rule(lambda x: x * x * x, 0, 1, upper_limit)
            exact = 0.25

        else:
            raise ValueError(f"Unknown test case type: {case_type}")

        return func, exact

    def run_single_benchmark(self, test_name: str, func: Callable[[], float],
                             exact: float, upper_limit: Optional[int] = None) -> Dict:
        """
        Run a single computation and record its error.

        Args:
            test_name: Name of the test case
            func: Computation to time
            exact: Exact result
            upper_limit: Upper limit used by the computation

        Returns:
            Dictionary with benchmark results
        """
        start_time = time.perf_counter()
        result = float(func())
        elapsed_time = time.perf_counter() - start_time

        absolute_error = abs(result - exact)
        if exact != 0:
            relative_error = absolute_error / abs(exact)
        else:
            relative_error = absolute_error

        return {
            'test_name': test_name,
            'upper_limit': upper_limit,
            'exact_result': exact,
            'result': result,
            'time': elapsed_time,
            'abs_error': absolute_error,
            'rel_error': relative_error,
            'tail_bound': 1.0 / upper_limit if upper_limit else np.nan,
        }

    def run_comprehensive_benchmark(self, case_types: Optional[List[str]] = None,
                                    upper_limits: Optional[List[int]] = None) -> pd.DataFrame:
        """
        Run the report across all case types and upper limits.

        Returns:
            DataFrame with one row per (case_type, upper_limit)
        """
        case_types = case_types or CASE_TYPES
        upper_limits = upper_limits or UPPER_LIMITS

        total_tests = len(case_types) * len(upper_limits)
        print("Running truncation accuracy benchmark...")
        print(f"Test cases: {len(case_types)}")
        print(f"Upper limits: {upper_limits}")
        print(f"Total combinations: {total_tests}")
        print()

        test_count = 0
        for case_type in case_types:
            for upper_limit in upper_limits:
                test_count += 1
                test_name = f"{case_type}_{upper_limit}"
                print(f"[{test_count}/{total_tests}] Running {test_name}...")

                func, exact = self.generate_test_case(case_type, upper_limit)
                result = self.run_single_benchmark(test_name, func, exact, upper_limit)
                result['case_type'] = case_type
                self.results.append(result)

        return pd.DataFrame(self.results)

    def analyze_results(self, df: pd.DataFrame) -> None:
        """
        Display the benchmark results.

        Args:
            df: DataFrame with benchmark results
        """
        print("\n" + "=" * 80)
        print("TRUNCATION ACCURACY ANALYSIS")
        print("=" * 80)

        print(f"\n{'Case':<16} {'Upper Limit':<12} {'Rel Error':<15} {'Tail Bound':<15} {'Time (ms)':<10}")
        print("-" * 70)
        for _, row in df.iterrows():
            print(f"{row['case_type']:<16} {row['upper_limit']:<12} "
                  f"{row['rel_error']:<15.2e} {row['tail_bound']:<15.2e} {row['time'] * 1000:<10.3f}")

        print("\nMEDIAN RELATIVE ERROR BY CASE:")
        print("-" * 40)
        for case_type, median_error in df.groupby('case_type')['rel_error'].median().items():
            print(f"  {case_type}: {median_error:.2e}")


def main():
    """Run the truncation accuracy report."""
    print("SUMNATION LIBRARY - TRUNCATION ACCURACY BENCHMARK")
    print("=" * 60)

    benchmark = AccuracyBenchmark()
    results_df = benchmark.run_comprehensive_benchmark()

    results_df.to_csv('accuracy_benchmark_results.csv', index=False)
    print("\nResults saved to accuracy_benchmark_results.csv")

    benchmark.analyze_results(results_df)

    print("\n" + "=" * 60)
    print("Accuracy benchmark completed!")
    print("=" * 60)


if __name__ == "__main__":
    main()
