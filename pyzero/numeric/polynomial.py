"""
Polynomials (:mod:`pyzero.numeric.polynomial`)
==============================================

.. currentmodule:: pyzero.numeric.polynomial

Polynomial operations needed by the solvers and not otherwise covered by
`NumPy`:

- Newton form interpolation which also works for exact numeric types
  such as `fractions.Fraction` and `decimal.Decimal`.
- Simultaneous evaluation of a (complex) polynomial and its first two
  derivatives.
- Deflation of a polynomial by a known root.

Coefficients are always ordered by increasing degree, i.e.
``c[0] + c[1]*x + c[2]*x**2 + ...``, matching `numpy.polynomial`.
"""
from __future__ import annotations

from collections.abc import Sequence

import numpy as np
import numpy.typing as npt


# Written by Eric J. Whitney, August 2026.

# ======================================================================

def newton_poly_coeff(x: npt.ArrayLike, y: npt.ArrayLike) -> np.ndarray:
    """
    Generate an array of increasing divided differences for multiple
    points `(x, y)`. These are the coefficients of the interpolating
    polynomial in Newton form.

    The array contains the divided differences arranged as follows::

        `[[y0], [y0, y1], [y0, y1, y2], ...]`

    Where `[y_i, ..., y_j]` is the divided difference operator that also
    depends on the `x` values.  This can also be written `f[x_i, ...,
    x_j]`.

    Parameters
    ----------
    x, y : array_like, shape (n,)
        Arrays of `x` and `y` values.  `x` values must be distinct but
        need not be sorted.

    Returns
    -------
    np.ndarray, shape (n,)
        Array of divided differences, as the coefficients of the
        interpolating polynomial in Newton form `[f[x0], f[x1, x0],
        f[x2, x1, x0], ...]`.

    Notes
    -----
    - Float and object inputs (e.g. `Fraction`) keep their type so that
      exact arithmetic is preserved.  Integer and boolean inputs are
      cast to `float` as integer division would otherwise truncate.

    References
    ----------
    .. [1] Divided differences (matrix form):
           https://en.wikipedia.org/wiki/Divided_differences#Matrix_form

    Examples
    --------
    >>> newton_poly_coeff([0, 1, 2], [1, 3, 7])
    array([1., 2., 1.])
    """
    x, a = _as_working_array(x), _as_working_array(y, copy=True)
    if (np.ndim(x) != 1) or (x.shape != a.shape):
        raise ValueError("'x' and 'y' must have the same shape (n,).")

    n = len(x)
    for i in range(1, n):
        a[i:n] = (a[i:n] - a[i - 1]) / (x[i:n] - x[i - 1])

    return a


# ----------------------------------------------------------------------

def newton_poly(x_pts: npt.ArrayLike, y_pts: npt.ArrayLike, x):
    # noinspection PyShadowingNames
    """
    Evaluate the Newton interpolating polynomial passing through the
    known points `x_pts`, `y_pts` at the given point/s `x`.

    The Newton polynomial of degree `n` is given by::

        :math:`P_{n}(x) = [y_0] + [y_0, y_1](x - x_0) + ... +
        [y_0, ..., y_n](x - x_0)(x - x_1)...(x - x_{n-1})`

    Parameters
    ----------
    x_pts, y_pts : array_like, shape (n + 1,)
        `x` and `y` coordinates of the data points.

    x : scalar or array_like
        New `x`-coordinate/s at which to evaluate the polynomial.

    Returns
    -------
    scalar or np.ndarray
        The interpolated value/s at `x`.

    Examples
    --------
    Swapping the roles of `x` and `y` gives inverse interpolation, here
    estimating where :math:`y = x^3` passes through `y = 0.125`:
    >>> float(newton_poly([0.0, 0.125, 1.0], [0.0, 0.5, 1.0], 0.125))
    0.5
    """
    a = newton_poly_coeff(x_pts, y_pts)
    x_pts = _as_working_array(x_pts)
    n = len(x_pts) - 1  # Degree of interpolating polynomial.
    p = a[n]

    for k in range(1, n + 1):
        p = a[n - k] + (x - x_pts[n - k]) * p

    return p


def _as_working_array(v: npt.ArrayLike, copy: bool = False) -> np.ndarray:
    v = np.array(v, copy=copy) if copy else np.asarray(v)
    if v.dtype.kind in 'biu':
        v = v.astype(float)
    return v


# ======================================================================

def poly_eval_derivs(coeffs: Sequence[complex],
                     z: complex) -> tuple[complex, complex, complex]:
    """
    Evaluate a polynomial :math:`p(z)` and its first and second
    derivatives in a single downward pass over the coefficients
    (Horner's scheme extended to derivatives).

    Parameters
    ----------
    coeffs : Sequence[complex]
        Polynomial coefficients, by increasing degree.
    z : complex
        Point of evaluation.

    Returns
    -------
    p, dp, d2p : complex, complex, complex
        :math:`p(z)`, :math:`p'(z)` and :math:`p''(z)`.

    Examples
    --------
    For :math:`p(z) = z^3 - 1` at `z = 2`:
    >>> poly_eval_derivs([-1, 0, 0, 1], 2)
    (7, 12, 12)
    """
    n = len(coeffs) - 1
    if n < 0:
        raise ValueError("At least one coefficient is required.")

    pv, dv, d2v = coeffs[n], 0, 0
    for j in range(n - 1, -1, -1):
        d2v = dv + z * d2v
        dv = pv + z * dv
        pv = coeffs[j] + z * pv

    return pv, dv, 2 * d2v


def deflate(coeffs: Sequence[complex], root: complex) -> list[complex]:
    """
    Divide the polynomial given by `coeffs` by the factor :math:`(z -
    root)` using synthetic division, returning the quotient polynomial
    (degree reduced by one).  The remainder is discarded; it is
    approximately zero when `root` is accurate.

    Parameters
    ----------
    coeffs : Sequence[complex]
        Polynomial coefficients, by increasing degree.  This sequence is
        not modified.
    root : complex
        Root to remove.

    Returns
    -------
    list[complex]
        Coefficients of the quotient polynomial, by increasing degree.

    Examples
    --------
    :math:`(z^2 - 3z + 2) / (z - 1) = z - 2`:
    >>> deflate([2, -3, 1], 1)
    [-2, 1]
    """
    n = len(coeffs) - 1
    if n < 1:
        raise ValueError("Polynomial degree must be >= 1 to deflate.")

    quotient = list(coeffs[:n])
    carry = coeffs[n]
    for j in range(n - 1, -1, -1):
        quotient[j], carry = carry, coeffs[j] + carry * root

    return quotient
