from ._polynomial_error import PolynomialError


class InvalidOperandError(PolynomialError):
    """Arithmetic with an empty polynomial.

    Raised when an empty (degree -1) polynomial is used as an operand of
    addition, subtraction, or polynomial multiplication.
    """

    pass
