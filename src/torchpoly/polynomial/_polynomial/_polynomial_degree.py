from ._polynomial import Polynomial


def polynomial_degree(p: Polynomial) -> int:
    """Return degree of polynomial.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.

    Returns
    -------
    int
        Number of stored coefficients minus 1, -1 for the empty
        polynomial.

    Notes
    -----
    This is the stored degree, not the mathematical one: a zero leading
    coefficient still counts. Use polynomial_trim first if you need the
    actual degree.
    """
    return p.coeffs.shape[-1] - 1
