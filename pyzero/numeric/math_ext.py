"""
Math Extensions (:mod:`pyzero.numeric.math_ext`)
================================================

.. currentmodule:: pyzero.numeric.math_ext

Small mathematical helpers that work on any ordered numeric type
(`float`, `int`, `fractions.Fraction`, `decimal.Decimal`, NumPy
scalars), not only on floats.
"""
from __future__ import annotations

from typing import TypeVar

_T = TypeVar('_T')


# Written by Eric J. Whitney, August 2026.

# ======================================================================

def sign(x) -> int:
    """
    Return the sign of `x` as an integer -1, 0 or +1.  Unlike
    ``np.sign()`` the result type does not depend on the type of `x`,
    so it can be used with user numeric types.  `NaN` gives 0.

    Examples
    --------
    >>> sign(-3.5), sign(0.0), sign(2)
    (-1, 0, 1)
    >>> from fractions import Fraction
    >>> sign(Fraction(-1, 3))
    -1
    """
    return (x > 0) - (x < 0)


def is_sequence(start: _T, mid: _T, end: _T) -> bool:
    """
    Returns ``True`` if ``start < mid < end`` (strictly).

    Examples
    --------
    >>> is_sequence(1, 2, 3)
    True
    >>> is_sequence(1, 1, 3)
    False
    """
    return (start < mid) and (mid < end)
