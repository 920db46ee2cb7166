import torch

from torchpoly.polynomial._polynomial_error import PolynomialError

from ._polynomial import Polynomial


def polynomial_derivative(p: Polynomial, order: int = 1) -> Polynomial:
    """Compute derivative of polynomial.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.
    order : int
        Derivative order (default 1). Zero returns a copy.

    Returns
    -------
    Polynomial
        Derivative d^n p / dx^n. Constant and empty polynomials return the
        empty polynomial (degree -1).

    Raises
    ------
    PolynomialError
        If order is negative.

    Examples
    --------
    >>> p = polynomial([3, 0, -4])  # 3x^2 - 4
    >>> polynomial_derivative(p).coeffs  # 6x
    tensor([0, 6])
    """
    if order < 0:
        raise PolynomialError(
            f"Derivative order must be non-negative, got {order}"
        )

    coeffs = p.coeffs.clone()

    for _ in range(order):
        n = coeffs.shape[-1]
        if n <= 1:
            return Polynomial(coeffs=coeffs.new_zeros(0))

        # new_coeffs[i - 1] = i * old_coeffs[i]
        indices = torch.arange(1, n, device=coeffs.device)
        coeffs = (coeffs[1:] * indices).to(coeffs.dtype)

    return Polynomial(coeffs=coeffs)
