from ._polynomial import Polynomial
from ._polynomial_degree import polynomial_degree


def polynomial_equal(p: Polynomial, q: Polynomial) -> bool:
    """Check structural polynomial equality.

    Parameters
    ----------
    p, q : Polynomial
        Polynomials to compare.

    Returns
    -------
    bool
        True if both store the same degree and every coefficient compares
        equal. Two empty polynomials are equal.

    Notes
    -----
    Degrees are compared as stored: 0x^2 + x + 2 is not equal to x + 2.
    Compare ``polynomial_trim`` results for equality of value.
    """
    if polynomial_degree(p) != polynomial_degree(q):
        return False

    return bool((p.coeffs == q.coeffs).all())
