"""Divided-difference construction of Hermite interpolation coefficients.

Each node is repeated twice in the node sequence used for the Newton
divided-difference table. A first-order divided difference over two copies
of the same node is a window of zero width, which is replaced by the
supplied derivative at that node. The higher-order columns then follow the
usual Newton recurrence, and the first row of the table gives the
coefficients of the Hermite interpolating polynomial in Newton form.

For ``n`` samples the polynomial has degree ``2n - 1`` and is described by
``2n`` coefficients.

Examples:
=========

Cubic Hermite fit of ``sin`` on ``[0, pi/2]``::
>>> import numpy as np
>>> from hermitekit.interpolation.divided_differences import hermite_coefficients
>>> coeffs = hermite_coefficients([0.0, np.pi / 2], [0.0, 1.0], [1.0, 0.0])
>>> coeffs.shape
(4,)
>>> float(coeffs[0]), float(coeffs[1])
(0.0, 1.0)

The full table is available for inspection::
>>> from hermitekit.interpolation.divided_differences import divided_difference_table
>>> divided_difference_table([0.0, 1.0], [0.0, 1.0], [0.0, 3.0]).shape
(4, 3)
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from hermitekit.logger import hermitekit_logger
from hermitekit.utils.numerics import has_repeated_nodes
from hermitekit.utils.validate import validate_hermite_samples

__all__ = [
    "doubled_nodes",
    "divided_difference_table",
    "hermite_coefficients",
]


def doubled_nodes(values: ArrayLike) -> NDArray[np.float64]:
    """Repeats every entry twice, ``(v0, v0, v1, v1, ...)``.

    Args:
        values: 1D array-like of nodes or function values.

    Returns:
        Float64 array of length ``2 * len(values)``.
    """
    return np.repeat(np.asarray(values, dtype=np.float64), 2)


def divided_difference_table(
    x: ArrayLike,
    y: ArrayLike,
    dy: ArrayLike | None,
) -> NDArray[np.float64]:
    """Builds the Hermite divided-difference table over the doubled nodes.

    The table has ``2n`` rows and ``2n - 1`` columns. Column ``c`` holds the
    divided differences of order ``c + 1`` and is active on rows
    ``0 .. 2n - 2 - c``; entries outside that triangle stay zero.

    Column 0 alternates between the supplied derivative (zero-width window
    at a repeated node) and the secant slope between two neighbouring nodes.
    The derivative at the last node has no following secant and closes the
    column on its last active row.

    Repeated entries in ``x`` make some denominators vanish. No error is
    raised in that case: the resulting ``inf``/``nan`` values propagate
    through the table and a warning is logged.

    Args:
        x: 1D array-like of distinct interpolation nodes.
        y: 1D array-like of function values at ``x``.
        dy: 1D array-like of first derivatives at ``x``.

    Returns:
        The divided-difference table as an array of shape ``(2n, 2n - 1)``.

    Raises:
        InvalidInputError: If the sample arrays are inconsistent or ``dy``
            is missing.
    """
    x_arr, y_arr, dy_arr = validate_hermite_samples(x, y, dy)
    n = x_arr.size
    m = 2 * n

    if has_repeated_nodes(x_arr):
        hermitekit_logger.warning(
            "Interpolation nodes are not distinct; the divided differences "
            "will contain inf or nan values."
        )

    z = doubled_nodes(x_arr)
    w = doubled_nodes(y_arr)
    table = np.zeros((m, m - 1), dtype=np.float64)

    with np.errstate(divide="ignore", invalid="ignore"):
        table[0:m - 2:2, 0] = dy_arr[:-1]
        table[1:m - 2:2, 0] = (w[2::2] - w[1:-1:2]) / (z[2::2] - z[1:-1:2])
        table[m - 2, 0] = dy_arr[-1]

        # The apex (last column, single row) follows the same recurrence.
        for c in range(1, m - 1):
            rows = m - 1 - c
            table[:rows, c] = (
                (table[1:rows + 1, c - 1] - table[:rows, c - 1])
                / (z[c + 1:c + 1 + rows] - z[:rows])
            )

    hermitekit_logger.debug("Built %dx%d divided-difference table.", m, m - 1)
    return table


def hermite_coefficients(
    x: ArrayLike,
    y: ArrayLike,
    dy: ArrayLike | None,
) -> NDArray[np.float64]:
    """Computes the Newton-form coefficients of the Hermite interpolant.

    The returned coefficients ``a`` describe the polynomial

    ``p(t) = a[0] + a[1] (t - z[0]) + a[2] (t - z[0]) (t - z[1]) + ...``

    where ``z`` is the doubled node sequence of ``x``. ``p`` matches ``y``
    and ``dy`` at every node.

    Args:
        x: 1D array-like of distinct interpolation nodes.
        y: 1D array-like of function values at ``x``.
        dy: 1D array-like of first derivatives at ``x``. Must be supplied and
            have the same length as ``y``.

    Returns:
        Float64 array of length ``2n`` with ``a[0] = y[0]`` followed by the
        first row of the divided-difference table.

    Raises:
        InvalidInputError: If the sample arrays are inconsistent or ``dy``
            is missing.
    """
    table = divided_difference_table(x, y, dy)
    y0 = np.asarray(y, dtype=np.float64)[0]
    return np.concatenate(([y0], table[0, :]))
