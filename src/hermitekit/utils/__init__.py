"""Utility functions for HermiteKit package."""

from .validate import (
    validate_hermite_samples,
    validate_query_points,
)

__all__ = [
    "validate_hermite_samples",
    "validate_query_points",
]
