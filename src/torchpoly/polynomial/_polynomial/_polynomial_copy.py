from ._polynomial import Polynomial


def polynomial_copy(p: Polynomial) -> Polynomial:
    """Return an independent copy of a polynomial.

    Parameters
    ----------
    p : Polynomial
        Polynomial to copy.

    Returns
    -------
    Polynomial
        Polynomial with the same degree and a cloned coefficient buffer.
        Writes to either polynomial are not visible in the other.
    """
    return Polynomial(coeffs=p.coeffs.clone())


def polynomial_move(p: Polynomial) -> Polynomial:
    """Transfer the coefficient buffer of ``p`` to a new polynomial.

    Parameters
    ----------
    p : Polynomial
        Source polynomial. Left empty (degree -1) with the same dtype and
        device.

    Returns
    -------
    Polynomial
        Polynomial owning the buffer previously held by ``p``.

    Examples
    --------
    >>> p = polynomial([1, 2])
    >>> q = polynomial_move(p)
    >>> polynomial_degree(p), polynomial_degree(q)
    (-1, 1)
    """
    coeffs = p.coeffs

    p.coeffs = coeffs.new_zeros(0)

    return Polynomial(coeffs=coeffs)
