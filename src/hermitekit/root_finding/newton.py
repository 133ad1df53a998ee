"""Provides Newton's method for roots of scalar equations.

The derivative of the function must be supplied; it is not estimated.
The full history of iterates is returned so that convergence can be
inspected by the caller.

Example:
>>> import numpy as np
>>> from hermitekit.root_finding.newton import newtons_method
>>> iterates = newtons_method(np.sin, np.cos, x0=3.0)
>>> bool(np.isclose(iterates[-1], np.pi, atol=1e-6))
True
"""

from __future__ import annotations

from collections.abc import Callable

import numpy as np
from numpy.typing import NDArray

from hermitekit.logger import hermitekit_logger

__all__ = ["newtons_method"]


def newtons_method(
    function: Callable[[float], float],
    derivative: Callable[[float], float],
    x0: float = 0.0,
    max_iterations: int = 100,
    tolerance: float = 1e-6,
) -> NDArray[np.float64]:
    """Finds a root of ``function`` with Newton's method.

    Starting from ``x0`` the iteration ``x_{k+1} = x_k - f(x_k) / f'(x_k)``
    is applied at most ``max_iterations`` times. It stops at the first
    iterate whose function value satisfies ``|f(x_k)| < tolerance``.

    Args:
        function: Scalar function whose root is sought.
        derivative: Derivative of ``function``.
        x0: Initial guess. Default is 0.0.
        max_iterations: Maximum number of Newton steps. Default is 100.
        tolerance: Convergence threshold on ``|f|``. Default is 1e-6.

    Returns:
        The iterates ``[x0, x1, ..., xk]``, ending with the first iterate that
        met the tolerance. If the tolerance was never met, all
        ``max_iterations + 1`` iterates are returned.

    Raises:
        ValueError: If ``max_iterations`` is smaller than 1 or ``tolerance``
            is not positive.
        ZeroDivisionError: If the derivative vanishes at an iterate.
    """
    if max_iterations < 1:
        raise ValueError(f"max_iterations must be at least 1, got {max_iterations}.")
    if tolerance <= 0:
        raise ValueError(f"tolerance must be positive, got {tolerance}.")

    iterates = np.empty(max_iterations + 1, dtype=np.float64)
    iterates[0] = x0
    fx = float(function(x0))
    if abs(fx) < tolerance:
        return iterates[:1].copy()

    for k in range(max_iterations):
        slope = float(derivative(iterates[k]))
        if slope == 0.0:
            raise ZeroDivisionError(
                f"derivative vanished at iterate {k} (x = {iterates[k]!r})."
            )
        iterates[k + 1] = iterates[k] - fx / slope
        fx = float(function(iterates[k + 1]))
        if abs(fx) < tolerance:
            hermitekit_logger.debug("Newton's method converged after %d steps.", k + 1)
            return iterates[:k + 2].copy()

    hermitekit_logger.warning(
        "Newton's method did not reach tolerance %g in %d iterations; "
        "last |f| = %g.",
        tolerance,
        max_iterations,
        abs(fx),
    )
    return iterates
