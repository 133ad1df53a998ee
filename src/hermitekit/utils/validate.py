"""Validation utilities for HermiteKit."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from hermitekit.exceptions import InvalidInputError
from hermitekit.utils.numerics import as_1d_float_array

__all__ = [
    "validate_hermite_samples",
    "validate_query_points",
]


def validate_hermite_samples(
    x: ArrayLike,
    y: ArrayLike,
    dy: ArrayLike | None,
) -> tuple[NDArray[np.float64], NDArray[np.float64], NDArray[np.float64]]:
    """Validates and converts Hermite sample data into NumPy arrays.

    Requirements:
      - ``x``, ``y`` and ``dy`` are 1D and non-empty.
      - ``len(x) == len(y)``.
      - ``dy`` is given and ``len(dy) == len(y)``. Derivatives are never
        estimated from ``y``.

    Distinctness of ``x`` is not checked here; repeated nodes are reported
    when the divided differences are built.

    Args:
        x: 1D array-like of interpolation nodes.
        y: 1D array-like of function values at ``x``.
        dy: 1D array-like of first derivatives at ``x``.

    Returns:
        Tuple of (x_array, y_array, dy_array) as float64 NumPy arrays.

    Raises:
        InvalidInputError: If the inputs do not meet the required conditions.
    """
    if dy is None:
        raise InvalidInputError("derivative data required and must match sample count")

    x_arr = as_1d_float_array(x, name="x")
    y_arr = as_1d_float_array(y, name="y")
    dy_arr = as_1d_float_array(dy, name="dy")

    if x_arr.size == 0:
        raise InvalidInputError("at least one sample is required.")
    if x_arr.shape[0] != y_arr.shape[0]:
        raise InvalidInputError(
            f"x and y must have the same length; got {x_arr.shape[0]} and {y_arr.shape[0]}."
        )
    if dy_arr.shape[0] != y_arr.shape[0]:
        raise InvalidInputError("derivative data required and must match sample count")

    return x_arr, y_arr, dy_arr


def validate_query_points(query_points: ArrayLike) -> NDArray[np.float64]:
    """Converts query points into a float64 NumPy array.

    Any shape is accepted, including 0-d (a single point) and empty arrays.

    Args:
        query_points: Points at which a polynomial is to be evaluated.

    Returns:
        Float64 array with the same shape as ``query_points``.

    Raises:
        InvalidInputError: If the query points are not real numbers.
    """
    try:
        return np.asarray(query_points, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidInputError("query points must contain real numbers.") from e
