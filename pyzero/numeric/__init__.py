"""
Numeric (:mod:`pyzero.numeric`)
===============================

.. currentmodule:: pyzero.numeric

Core numeric functions used by the solvers.

.. autosummary::
    :toctree:

    math_ext
    polynomial

"""
from .math_ext import is_sequence, sign
from .polynomial import (deflate, newton_poly, newton_poly_coeff,
                         poly_eval_derivs)
