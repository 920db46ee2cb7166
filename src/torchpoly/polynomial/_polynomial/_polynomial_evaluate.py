from numbers import Number
from typing import Union

import torch
from torch import Tensor

from ._polynomial import Polynomial


def polynomial_evaluate(p: Polynomial, x: Union[Tensor, Number]) -> Tensor:
    """Evaluate polynomial at points term by term.

    Each term coeffs[i] * x^i is computed independently with ``torch.pow``
    and the terms are summed from i = 0 upward. This matches exact
    integer arithmetic for integer dtypes.

    Parameters
    ----------
    p : Polynomial
        Polynomial with coefficients shape (N,).
    x : Tensor or number
        Evaluation points of any shape.

    Returns
    -------
    Tensor
        Values p(x), same shape as ``x``, dtype promoted from the
        coefficients and ``x``. Zero for the empty polynomial.

    Examples
    --------
    >>> p = polynomial([3, 0, -4])  # 3x^2 - 4
    >>> polynomial_evaluate(p, 2)
    tensor(8)
    """
    coeffs = p.coeffs

    if not isinstance(x, Tensor):
        x = torch.as_tensor(x, device=coeffs.device)

    common_dtype = torch.promote_types(coeffs.dtype, x.dtype)
    coeffs = coeffs.to(common_dtype)
    x = x.to(common_dtype)

    result = torch.zeros_like(x)
    for i in range(coeffs.shape[-1]):
        result = result + coeffs[i] * torch.pow(x, i)

    return result
