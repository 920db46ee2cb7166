from ._polynomial_error import PolynomialError


class IndexOutOfRangeError(PolynomialError, IndexError):
    """Coefficient write outside [0, degree].

    Coefficient buffers never grow. Writing to an exponent that the
    polynomial does not store is rejected instead of extending it.
    """

    pass
