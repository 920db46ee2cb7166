import warnings

import torch

from ._polynomial import Polynomial


def polynomial_integral(p: Polynomial) -> Polynomial:
    """Compute antiderivative (indefinite integral) with zero constant.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.

    Returns
    -------
    Polynomial
        Antiderivative, degree increased by 1. The constant term is zero.
        The empty polynomial integrates to the constant 0.

    Warns
    -----
    RuntimeWarning
        If the coefficients are integers and a division discards a
        non-zero remainder. Integer coefficients are divided with
        truncation toward zero.

    Examples
    --------
    >>> p = polynomial([2.0, 1.0])  # 2x + 1
    >>> polynomial_integral(p).coeffs  # x^2 + x
    tensor([0., 1., 1.])
    """
    coeffs = p.coeffs
    n = coeffs.shape[-1]

    # new_coeffs[i + 1] = old_coeffs[i] / (i + 1)
    indices = torch.arange(1, n + 1, device=coeffs.device)

    if coeffs.dtype.is_floating_point:
        integrated = coeffs / indices
    else:
        if n > 0 and torch.fmod(coeffs, indices).ne(0).any():
            warnings.warn(
                f"Integrating {coeffs.dtype} coefficients truncates "
                f"non-integral results toward zero. Use a floating point "
                f"dtype for exact antiderivatives.",
                RuntimeWarning,
                stacklevel=2,
            )
        integrated = torch.div(coeffs, indices, rounding_mode="trunc").to(
            coeffs.dtype
        )

    new_coeffs = torch.cat([coeffs.new_zeros(1), integrated], dim=-1)
    return Polynomial(coeffs=new_coeffs)
