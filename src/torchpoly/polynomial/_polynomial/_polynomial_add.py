import torch
import torch.nn.functional

from ._check_operands import _check_operands
from ._polynomial import Polynomial


def polynomial_add(p: Polynomial, q: Polynomial) -> Polynomial:
    """Add two polynomials.

    Computes element-wise sum of coefficients with zero-padding for
    polynomials of different degrees.

    Parameters
    ----------
    p, q : Polynomial
        Polynomials to add.

    Returns
    -------
    Polynomial
        Sum p + q of degree max(deg p, deg q).

    Raises
    ------
    InvalidOperandError
        If either polynomial is empty.
    """
    _check_operands("add", p, q)

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

    return Polynomial(coeffs=p_padded + q_padded)
