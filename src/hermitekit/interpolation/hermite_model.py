"""Hermite interpolation model for 1D sampled functions.

Wraps a single coefficient build so that the interpolating polynomial can be
evaluated, and differentiated, repeatedly without rebuilding the
divided-difference table.

Two common entry points are:

* Direct construction with ``(x, y, dy)`` arrays of shape ``(N,)``.
* :func:`hermite_from_table` for simple 2D tables holding x, y and dy in
  columns (or rows).
"""


from __future__ import annotations

from collections.abc import Callable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from hermitekit.exceptions import InvalidInputError
from hermitekit.interpolation.divided_differences import (
    doubled_nodes,
    hermite_coefficients,
)
from hermitekit.interpolation.evaluate import (
    newton_polynomial,
    newton_polynomial_derivative,
)
from hermitekit.utils.types import ArrayLike1D, ArrayLike2D, FloatArray
from hermitekit.utils.validate import validate_hermite_samples

__all__ = ["HermiteInterpolant", "hermite_from_table", "parse_xydy_table"]


class HermiteInterpolant:
    """Hermite interpolating polynomial of sampled values and derivatives.

    For ``N`` samples the interpolant is the unique polynomial of degree at
    most ``2N - 1`` that matches ``y`` and ``dy`` at every node. It is stored
    in Newton form over the doubled node sequence.

    Attributes:
        x: Interpolation nodes.
        y: Function values at the nodes.
        dy: First derivatives at the nodes.
        nodes: Doubled node sequence ``(x0, x0, x1, x1, ...)``.
        coefficients: Newton coefficients, one per doubled node.

    Example:
        >>> import numpy as np
        >>> from hermitekit.interpolation.hermite_model import HermiteInterpolant
        >>>
        >>> x_tab = np.array([0.0, 1.0, 2.0])
        >>> model = HermiteInterpolant(x_tab, x_tab**4, 4 * x_tab**3)
        >>> model.degree
        5
        >>> bool(np.isclose(model(1.5), 1.5**4))
        True
        >>> bool(np.isclose(model.derivative(1.5), 4 * 1.5**3))
        True
    """
    def __init__(
        self,
        x: ArrayLike1D,
        y: ArrayLike1D,
        dy: ArrayLike1D,
    ) -> None:
        """Initializes the interpolant and builds its coefficients.

        Args:
            x: Distinct interpolation nodes with shape ``(N,)``.
            y: Function values with shape ``(N,)``.
            dy: First derivatives with shape ``(N,)``.

        Raises:
            InvalidInputError: If the sample arrays are inconsistent or
                ``dy`` is missing.
        """
        x_arr, y_arr, dy_arr = validate_hermite_samples(x, y, dy)

        self.x = x_arr.copy()
        self.y = y_arr.copy()
        self.dy = dy_arr.copy()
        self.nodes = doubled_nodes(x_arr)
        self.coefficients = hermite_coefficients(x_arr, y_arr, dy_arr)

    @classmethod
    def from_function(
        cls,
        function: Callable[[FloatArray], ArrayLike],
        derivative: Callable[[FloatArray], ArrayLike],
        x: ArrayLike1D,
    ) -> HermiteInterpolant:
        """Samples a function and its analytic derivative at ``x``.

        Both callables are called once with the full node array.

        Examples:
        ---------
        >>> import numpy as np
        >>> from hermitekit.interpolation.hermite_model import HermiteInterpolant
        >>> model = HermiteInterpolant.from_function(
        ...     np.sin, np.cos, np.linspace(0.0, np.pi / 2, 5)
        ... )
        >>> bool(np.isclose(model(0.3), np.sin(0.3), atol=1e-9))
        True
        """
        x_arr = np.asarray(x, dtype=float)
        return cls(x_arr, function(x_arr), derivative(x_arr))

    @property
    def degree(self) -> int:
        """Upper bound on the polynomial degree, ``2N - 1``."""
        return self.coefficients.size - 1

    def __call__(self, x_new: ArrayLike) -> NDArray[np.floating]:
        """Evaluates the interpolant at the given x values.

        Args:
            x_new: Points where the polynomial should be evaluated.

        Returns:
            Interpolated values with the same shape as ``x_new``.
        """
        return np.asarray(
            newton_polynomial(self.coefficients, self.nodes, x_new), dtype=float
        )

    def derivative(self, x_new: ArrayLike) -> NDArray[np.floating]:
        """Evaluates the first derivative of the interpolant.

        Args:
            x_new: Points where the derivative should be evaluated.

        Returns:
            Derivative values with the same shape as ``x_new``.
        """
        return np.asarray(
            newton_polynomial_derivative(self.coefficients, self.nodes, x_new),
            dtype=float,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(n_samples={self.x.size}, degree={self.degree})"


def hermite_from_table(table: ArrayLike2D) -> HermiteInterpolant:
    """Creates a HermiteInterpolant from a simple 2D ``(x, y, dy)`` table.

    Supported layouts:
        * ``(N, 3)``: column 0 = x, column 1 = y, column 2 = dy.
        * ``(3, N)``: row 0 = x, row 1 = y, row 2 = dy.

    Args:
        table: 2D array containing x, y and dy.

    Returns:
        A :class:`HermiteInterpolant` constructed from the parsed table.
    """
    x, y, dy = parse_xydy_table(table)
    return HermiteInterpolant(x, y, dy)


def parse_xydy_table(
    table: ArrayLike2D,
) -> tuple[NDArray[np.floating], NDArray[np.floating], NDArray[np.floating]]:
    """Parses a 2D table into ``(x, y, dy)`` arrays.

    Supported layouts:

    * ``(N, 3)``:
        Column 0 = x, column 1 = y, column 2 = dy.
    * ``(3, N)``:
        Row 0 = x, row 1 = y, row 2 = dy.

    A ``(3, 3)`` table is read column-wise, like any ``(N, 3)`` table.

    Args:
        table: 2D array, e.g. data loaded from a text file with three columns.

    Returns:
        A tuple ``(x, y, dy)`` of 1D NumPy arrays.

    Raises:
        InvalidInputError: If the input does not match any of the supported layouts.
    """
    arr = np.asarray(table, dtype=float)
    if arr.ndim != 2:
        raise InvalidInputError("table must be a 2D array.")

    match arr.shape:
        case (n, 3) if n >= 1:
            x, y, dy = arr[:, 0], arr[:, 1], arr[:, 2]
        case (3, n) if n >= 1:
            x, y, dy = arr[0, :], arr[1, :], arr[2, :]
        case _:
            raise InvalidInputError(
                f"Unexpected table shape {arr.shape}; expected (N, 3) or (3, N)."
            )

    return x, y, dy
