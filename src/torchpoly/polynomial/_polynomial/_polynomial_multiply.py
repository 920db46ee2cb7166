import torch

from ._check_operands import _check_operands
from ._polynomial import Polynomial


def polynomial_multiply(p: Polynomial, q: Polynomial) -> Polynomial:
    """Multiply two polynomials.

    Computes convolution of coefficients. Result degree is deg(p) + deg(q).

    Parameters
    ----------
    p, q : Polynomial
        Polynomials to multiply.

    Returns
    -------
    Polynomial
        Product p * q.

    Raises
    ------
    InvalidOperandError
        If either polynomial is empty.

    Examples
    --------
    >>> p = polynomial([3, 0, -4])  # 3x^2 - 4
    >>> q = polynomial([1, 2])  # x + 2
    >>> polynomial_multiply(p, q).coeffs  # 3x^3 + 6x^2 - 4x - 8
    tensor([-8, -4,  6,  3])
    """
    _check_operands("multiply", p, q)

    p_coeffs = p.coeffs
    q_coeffs = q.coeffs

    n_p = p_coeffs.shape[-1]
    n_q = q_coeffs.shape[-1]

    # Promote to common dtype
    common_dtype = torch.promote_types(p_coeffs.dtype, q_coeffs.dtype)
    p_coeffs = p_coeffs.to(common_dtype)
    q_coeffs = q_coeffs.to(common_dtype)

    # products[i, j] = p[i] * q[j] contributes to x^(i + j)
    products = p_coeffs[:, None] * q_coeffs[None, :]
    exponents = (
        torch.arange(n_p, device=p_coeffs.device)[:, None]
        + torch.arange(n_q, device=p_coeffs.device)[None, :]
    )

    result = torch.zeros(
        n_p + n_q - 1, dtype=common_dtype, device=p_coeffs.device
    )
    result.index_add_(0, exponents.reshape(-1), products.reshape(-1))

    return Polynomial(coeffs=result)
