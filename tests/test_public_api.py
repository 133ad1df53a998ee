"""Unit tests for public API."""

from __future__ import annotations

import hermitekit
from hermitekit import (
    HermiteInterpolant,
    InvalidInputError,
    hermite_coefficients,
    interpolate,
    newtons_method,
)


def test_entry_points_importable_from_top_level():
    """Test that the public entry points can be imported from top level."""
    assert HermiteInterpolant is not None
    assert hermite_coefficients is not None
    assert interpolate is not None
    assert newtons_method is not None


def test_public_all_contains_entry_points():
    """Test that __all__ contains the expected public names."""
    expected = {
        "HermiteInterpolant",
        "InvalidInputError",
        "hermite_coefficients",
        "hermite_from_table",
        "interpolate",
        "newtons_method",
    }
    assert expected.issubset(set(hermitekit.__all__))


def test_invalid_input_error_is_value_error():
    """Test that the package error integrates with ValueError handling."""
    assert issubclass(InvalidInputError, ValueError)
