"""
Core sumnation implementation.

This module contains the generic sequence-summation primitive and the
fixed-parameter wrappers built on top of it.
"""

from typing import Callable, Union

Number = Union[int, float]


def identity(x):
    """Return the term unchanged."""
    return x


def always(x) -> bool:
    """Inclusion filter accepting every element of the sequence."""
    return True


def increment(x):
    """Successor rule stepping to the next integer."""
    return x + 1


def sumnation(f: Callable[[Number], Number],
              filter: Callable[[Number], bool],
              a: Number,
              next: Callable[[Number], Number],
              b: Number) -> Number:
    """
    Sum a sequence of numbers.

    Starting at ``a``, every element ``i`` with ``i <= b`` is visited in the
    order produced by ``next``. Elements accepted by ``filter`` contribute
    ``f(i)`` to the sum.

    ``next`` must strictly increase its argument, otherwise the loop never
    terminates. ``f`` and ``filter`` are expected to be pure.

    Args:
        f: Transform applied to each included element
        filter: Predicate deciding whether an element is included
        a: First element of the sequence
        next: Function computing the element following its argument
        b: Last element of the sequence

    Returns:
        Sum of the transformed, included elements (0 when ``a > b``)
    """
    i = a
    answer = 0
    while i <= b:
        if filter(i):
            answer += f(i)
        i = next(i)
    return answer


def add(a: Number, b: Number) -> Number:
    """Sum the integers from ``a`` to ``b`` inclusive."""
    return sumnation(identity, always, a, increment, b)


def filtered_add(filter: Callable[[Number], bool], a: Number, b: Number) -> Number:
    """
    Sum the elements between ``a`` and ``b`` accepted by ``filter``.

    Useful for e.g. the sum of the primes between 1 and 1000.
    """
    return sumnation(identity, filter, a, increment, b)


def addition(f: Callable[[Number], Number], a: Number, b: Number) -> Number:
    """
    Sum ``f(i)`` for every integer ``i`` from ``a`` to ``b``.

    Useful for e.g. the sum of the cubes of the numbers between 1 and 1000.
    """
    return sumnation(f, always, a, increment, b)


def filtered_addition(f: Callable[[Number], Number],
                      filter: Callable[[Number], bool],
                      a: Number,
                      b: Number) -> Number:
    """Sum ``f(i)`` for every integer ``i`` in ``[a, b]`` accepted by ``filter``."""
    return sumnation(f, filter, a, increment, b)
