"""Numerical utilities."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from hermitekit.exceptions import InvalidInputError

__all__ = [
    "as_1d_float_array",
    "has_repeated_nodes",
]


def as_1d_float_array(x: ArrayLike, *, name: str = "x") -> NDArray[np.float64]:
    """Convert input to a 1D float array.

    Performs a minimal shape check (must be 1D) and ensures a float dtype.
    The input itself is never modified; a copy is made whenever the
    conversion requires one.

    Args:
        x: Input array-like.
        name: Name used in error messages.

    Returns:
        1D NumPy array with dtype float64.

    Raises:
        InvalidInputError: If the input cannot be converted to floats or the
            converted array is not 1D.
    """
    try:
        arr = np.asarray(x, dtype=float)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"{name} must contain real numbers.") from e
    if arr.ndim != 1:
        raise InvalidInputError(f"{name} must be 1D, got shape {arr.shape}")
    return arr.astype(np.float64, copy=False)


def has_repeated_nodes(x: NDArray[np.floating]) -> bool:
    """Checks whether a node array contains the same value more than once.

    Args:
        x: 1D array of interpolation nodes.

    Returns:
        True if at least two entries of ``x`` are equal.
    """
    return np.unique(x).size != x.size
