#!/usr/bin/env python3
"""
Demonstration of the sumnation library.

Approximates the Basel problem, the probability that two integers are
coprime, pi, Apéry's constant, the integral of x^3 on [0, 1] and the sum
of the coprimes of the upper limit, then prints the results.
"""

from typing import Dict

from .algorithms import (
    LOWER_LIMIT,
    UPPER_LIMIT,
    riemann_zeta_function,
    simpsons_rule,
    coprime,
    coprime_probability,
    pi_from_basel,
    euler_mascheroni_constant,
)
from .core import filtered_add


def compute_demonstrations(lower_limit: int = LOWER_LIMIT,
                           upper_limit: int = UPPER_LIMIT,
                           include_euler_mascheroni: bool = False) -> Dict[str, float]:
    """
    Compute every demonstration result.

    Args:
        lower_limit: First index of the summed sequences
        upper_limit: Last index of the summed sequences
        include_euler_mascheroni: Also compute the Euler-Mascheroni constant,
            which is quadratic in ``upper_limit``

    Returns:
        Mapping of descriptive labels to results, in print order
    """
    basel_problem = riemann_zeta_function(2, lower_limit, upper_limit)
    aperys_constant = riemann_zeta_function(3, lower_limit, upper_limit)
    integral_of_cube_between_0_and_1 = simpsons_rule(lambda x: x * x * x, 0, 1, upper_limit)
    sum_of_coprimes = filtered_add(coprime(upper_limit), lower_limit, upper_limit)

    results = {
        "An approximation of the solution to the Basel Problem:": basel_problem,
        "The probability that two randomly selected numbers are coprime is:":
            coprime_probability(basel_problem),
        "The approximation of pi using our solution to the Basel problem:":
            pi_from_basel(basel_problem),
        "Apéry's Constant is:": aperys_constant,
        "The area under the curve between 0 and 1 of the function f(x) = x^3 is:":
            integral_of_cube_between_0_and_1,
        f"The sum of the coprimes between {lower_limit} and {upper_limit} is:": sum_of_coprimes,
    }

    if include_euler_mascheroni:
        results["The Euler-Mascheroni Constant is:"] = euler_mascheroni_constant(
            2, upper_limit, upper_limit
        )

    return results


def main():
    """Run the demonstrations and print the results."""
    results = compute_demonstrations(LOWER_LIMIT, UPPER_LIMIT)
    for label, value in results.items():
        print(label, value)


if __name__ == "__main__":
    main()
