import torch
import torch.nn.functional

from ._check_operands import _check_operands
from ._polynomial import Polynomial


def polynomial_subtract(p: Polynomial, q: Polynomial) -> Polynomial:
    """Subtract two polynomials.

    Computes element-wise difference of coefficients with zero-padding for
    polynomials of different degrees.

    Parameters
    ----------
    p, q : Polynomial
        Polynomials to subtract.

    Returns
    -------
    Polynomial
        Difference p - q of degree max(deg p, deg q).

    Raises
    ------
    InvalidOperandError
        If either polynomial is empty.
    """
    _check_operands("subtract", p, q)

    p_coeffs = p.coeffs
    q_coeffs = q.coeffs

    n_p = p_coeffs.shape[-1]
    n_q = q_coeffs.shape[-1]
    n_out = max(n_p, n_q)

    # Promote to common dtype
    common_dtype = torch.promote_types(p_coeffs.dtype, q_coeffs.dtype)
    p_coeffs = p_coeffs.to(common_dtype)
    q_coeffs = q_coeffs.to(common_dtype)

    p_padded = torch.nn.functional.pad(p_coeffs, [0, n_out - n_p])
    q_padded = torch.nn.functional.pad(q_coeffs, [0, n_out - n_q])

    return Polynomial(coeffs=p_padded - q_padded)
