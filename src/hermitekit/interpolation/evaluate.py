"""Evaluation of Newton-form polynomials and the ``interpolate`` entry point.

A Newton-form polynomial with coefficients ``a`` and nodes ``z`` is

``p(t) = a[0] + sum_{j >= 1} a[j] * prod_{k < j} (t - z[k])``.

It is evaluated by nested multiplication, accumulating terms from ``j = 1``
upwards so that each running basis product reuses the previous one. The
terms are always added in this order, which keeps results reproducible to
the last bit for identical inputs.

Example:
>>> import numpy as np
>>> from hermitekit.interpolation.evaluate import interpolate
>>> x = np.array([0.0, 1.0])
>>> q, v = interpolate(x, x**3, 3 * x**2, [0.5, 2.0])
>>> np.allclose(v, [0.125, 8.0])
True
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from hermitekit.interpolation.divided_differences import (
    doubled_nodes,
    hermite_coefficients,
)
from hermitekit.utils.validate import validate_query_points

__all__ = [
    "interpolate",
    "newton_polynomial",
    "newton_polynomial_derivative",
]


def newton_polynomial(
    coefficients: NDArray[np.floating],
    nodes: NDArray[np.floating],
    query_points: ArrayLike,
) -> NDArray[np.float64]:
    """Evaluates a Newton-form polynomial at the query points.

    Args:
        coefficients: Newton coefficients ``a`` of length ``m``.
        nodes: Node sequence ``z``; only its first ``m - 1`` entries are used.
        query_points: Points of any shape at which to evaluate.

    Returns:
        Polynomial values with the same shape as ``query_points``.
    """
    q = validate_query_points(query_points)
    basis = np.ones_like(q)
    result = np.full_like(q, coefficients[0])
    for j in range(1, len(coefficients)):
        basis = basis * (q - nodes[j - 1])
        result = result + coefficients[j] * basis
    return result


def newton_polynomial_derivative(
    coefficients: NDArray[np.floating],
    nodes: NDArray[np.floating],
    query_points: ArrayLike,
) -> NDArray[np.float64]:
    """Evaluates the first derivative of a Newton-form polynomial.

    The derivative of each running basis product is carried along with the
    product itself (product rule), in the same left-to-right pass as
    :func:`newton_polynomial`.

    Args:
        coefficients: Newton coefficients ``a`` of length ``m``.
        nodes: Node sequence ``z``; only its first ``m - 1`` entries are used.
        query_points: Points of any shape at which to evaluate.

    Returns:
        Derivative values with the same shape as ``query_points``.
    """
    q = validate_query_points(query_points)
    basis = np.ones_like(q)
    d_basis = np.zeros_like(q)
    result = np.zeros_like(q)
    for j in range(1, len(coefficients)):
        offset = q - nodes[j - 1]
        d_basis = d_basis * offset + basis
        basis = basis * offset
        result = result + coefficients[j] * d_basis
    return result


def interpolate(
    x: ArrayLike,
    y: ArrayLike,
    dy: ArrayLike | None,
    query_points: ArrayLike,
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Interpolates samples and their derivatives with a Hermite polynomial.

    Builds the Hermite coefficients once and evaluates the resulting
    polynomial at every query point. Query points are handled independently
    and in order; an empty query gives an empty result.

    Args:
        x: 1D array-like of distinct interpolation nodes.
        y: 1D array-like of function values at ``x``.
        dy: 1D array-like of first derivatives at ``x``.
        query_points: Points at which the polynomial is evaluated.

    Returns:
        A tuple ``(query_points, values)`` where ``values[i]`` is the value of
        the interpolant at ``query_points[i]``.

    Raises:
        InvalidInputError: If the sample arrays are inconsistent or ``dy``
            is missing.
    """
    coefficients = hermite_coefficients(x, y, dy)
    nodes = doubled_nodes(x)
    q = validate_query_points(query_points)
    return q, newton_polynomial(coefficients, nodes, q)
