"""Provides all hermitekit methods."""

from importlib.metadata import PackageNotFoundError, version

from hermitekit.exceptions import InvalidInputError
from hermitekit.interpolation.divided_differences import hermite_coefficients
from hermitekit.interpolation.evaluate import interpolate
from hermitekit.interpolation.hermite_model import (
    HermiteInterpolant,
    hermite_from_table,
)
from hermitekit.root_finding.newton import newtons_method

try:
    __version__ = version("hermitekit")
except PackageNotFoundError:
    pass

__all__ = [
    "HermiteInterpolant",
    "InvalidInputError",
    "hermite_coefficients",
    "hermite_from_table",
    "interpolate",
    "newtons_method",
]
