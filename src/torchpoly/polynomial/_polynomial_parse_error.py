from ._polynomial_error import PolynomialError


class PolynomialParseError(PolynomialError, ValueError):
    """Raised when text cannot be read as polynomial terms."""

    pass
