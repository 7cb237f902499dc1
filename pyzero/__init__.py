"""
.. This module acts as the top-level API documentation.

.. module: pyzero

PyZero provides iterative algorithms for finding the zeros (roots) of
univariate functions and polynomials.

Subpackages
-----------

- :mod:`pyzero.numeric`: Support functions (signs, divided differences,
  polynomial evaluation and deflation).
- :mod:`pyzero.solve`: Root finding solvers and bracketing utilities.
"""

__version__ = "0.1.0"

import sys

# ======================================================================

assert sys.version_info >= (3, 10)
