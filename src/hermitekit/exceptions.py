"""Exceptions raised by HermiteKit."""


class InvalidInputError(ValueError):
    """Raised when interpolation samples are inconsistent or incomplete.

    Covers mismatched ``x``/``y``/``dy`` lengths, missing derivative data,
    inputs that are not one-dimensional or are empty, and tables whose
    layout cannot be parsed. It is always raised before any divided
    difference is computed.
    """

    pass
