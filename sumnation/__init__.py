"""
Sumnation Library

A small library for summing sequences of numbers under a user-supplied
transform, filter and successor rule, written in a functional style to
express the concept of summation concisely rather than quickly.

This library provides:
- The generic sumnation procedure
- Wrappers ignoring the features of sumnation a caller does not need
- Demonstrations: the Basel problem, Apéry's constant, pi, Simpson's rule
  and coprime sums
"""

from .core import (
    sumnation,
    add,
    filtered_add,
    addition,
    filtered_addition,
    identity,
    always,
    increment,
)
from .algorithms import (
    inverse_exponentiation,
    riemann_zeta_function,
    gamma_expression,
    euler_mascheroni_constant,
    simpsons_rule,
    gcd,
    coprime,
    coprime_probability,
    pi_from_basel,
)

__version__ = "1.0.0"
__author__ = "Sumnation Contributors"

__all__ = [
    "sumnation",
    "add",
    "filtered_add",
    "addition",
    "filtered_addition",
    "identity",
    "always",
    "increment",
    "inverse_exponentiation",
    "riemann_zeta_function",
    "gamma_expression",
    "euler_mascheroni_constant",
    "simpsons_rule",
    "gcd",
    "coprime",
    "coprime_probability",
    "pi_from_basel",
]
