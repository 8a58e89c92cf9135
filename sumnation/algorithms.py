"""
Demonstration computations built on sumnation.

This module approximates well-known constants with truncated series
(Riemann zeta values, Apéry's constant, the Euler-Mascheroni constant),
integrates functions with Simpson's rule and provides coprimality filters.

Terms are evaluated as numpy float64 scalars so that numeric anomalies
surface as IEEE-754 inf/nan instead of Python exceptions.
"""

import math
import numpy as np
from typing import Callable
from .core import addition

# Default interval of the truncated series
LOWER_LIMIT = 1
UPPER_LIMIT = 1000000

# Reference values
BASEL_CONSTANT = math.pi ** 2 / 6
APERY_CONSTANT = 1.2020569031595942
EULER_MASCHERONI_CONSTANT = float(np.euler_gamma)


def inverse_exponentiation(exp: float) -> Callable[[float], np.float64]:
    """
    Build the term ``n -> 1 / (n ** exp)``.

    Args:
        exp: Exponent captured by the returned function

    Returns:
        Unary function computing the inverse power in float64
    """
    def term(n):
        return np.true_divide(1.0, np.power(np.float64(n), exp))
    return term


def riemann_zeta_function(s: float,
                          lower_limit: int = LOWER_LIMIT,
                          upper_limit: int = UPPER_LIMIT) -> np.float64:
    """
    Approximate the Riemann zeta function by a truncated series.

    Assumes that ``s`` is the real part of a complex number. The tail
    of the series beyond ``upper_limit`` is dropped.

    Args:
        s: Exponent of the series
        lower_limit: First index of the series
        upper_limit: Last index of the series

    Returns:
        Partial sum of 1 / (n ** s)
    """
    with np.errstate(divide='ignore', over='ignore', invalid='ignore'):
        return addition(inverse_exponentiation(s), lower_limit, upper_limit)


def gamma_expression(m: int,
                     lower_limit: int = LOWER_LIMIT,
                     upper_limit: int = UPPER_LIMIT) -> np.float64:
    """Single term (-1)^m * zeta(m) / m of the Euler-Mascheroni series."""
    zeta = riemann_zeta_function(m, lower_limit, upper_limit)
    with np.errstate(divide='ignore', invalid='ignore'):
        return ((-1) ** m) * np.true_divide(zeta, m)


def euler_mascheroni_constant(lower_limit: int = 2,
                              upper_limit: int = UPPER_LIMIT,
                              zeta_upper_limit: int = UPPER_LIMIT) -> np.float64:
    """
    Approximate the Euler-Mascheroni constant.

    Sums (-1)^m * zeta(m) / m for m in [lower_limit, upper_limit]. Every
    term evaluates a truncated zeta series, so the default bounds cost on
    the order of upper_limit * zeta_upper_limit operations. Only run it with
    the defaults on a powerful machine.
    """
    return addition(lambda m: gamma_expression(m, LOWER_LIMIT, zeta_upper_limit),
                    lower_limit,
                    upper_limit)


def simpsons_rule(f: Callable[[float], float], a: float, b: float, n: int) -> np.float64:
    """
    Integrate ``f`` over ``[a, b]`` with the composite Simpson's rule.

    Args:
        f: Integrand
        a: Lower bound of the interval
        b: Upper bound of the interval
        n: Number of subintervals, expected to be even

    Returns:
        Approximation of the integral
    """
    with np.errstate(divide='ignore', invalid='ignore'):
        h = np.true_divide(np.float64(b - a), n)

        def y(k):
            return f(a + (k * h))

        def simpson_coefficient(k):
            if k == 0 or k == n:
                return y(k)
            elif k % 2 == 0:
                return 2 * y(k)
            else:
                return 4 * y(k)

        return (h / 3) * addition(simpson_coefficient, 0, n)


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    if b == 0:
        return a
    return gcd(b, a % b)


def coprime(n: int) -> Callable[[int], bool]:
    """
    Build a filter accepting the numbers coprime with ``n``.

    Args:
        n: Number the sequence elements are compared against

    Returns:
        Predicate ``i -> gcd(i, n) == 1``
    """
    return lambda i: gcd(i, n) == 1


def coprime_probability(basel: float) -> np.float64:
    """Probability that two random integers are coprime, 1 / zeta(2)."""
    with np.errstate(divide='ignore'):
        return np.true_divide(1.0, basel)


def pi_from_basel(basel: float) -> np.float64:
    """Recover pi from a solution to the Basel problem."""
    with np.errstate(invalid='ignore'):
        return np.sqrt(6 * np.float64(basel))
