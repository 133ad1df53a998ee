"""Hermite interpolation: coefficient construction and evaluation."""

from hermitekit.interpolation.divided_differences import (
    divided_difference_table,
    doubled_nodes,
    hermite_coefficients,
)
from hermitekit.interpolation.evaluate import (
    interpolate,
    newton_polynomial,
    newton_polynomial_derivative,
)
from hermitekit.interpolation.hermite_model import (
    HermiteInterpolant,
    hermite_from_table,
    parse_xydy_table,
)

__all__ = [
    "HermiteInterpolant",
    "divided_difference_table",
    "doubled_nodes",
    "hermite_coefficients",
    "hermite_from_table",
    "interpolate",
    "newton_polynomial",
    "newton_polynomial_derivative",
    "parse_xydy_table",
]
