from numbers import Number
from typing import Union

import torch
from torch import Tensor

from torchpoly.polynomial._polynomial_error import PolynomialError

from ._polynomial import Polynomial, _check_dtype


def polynomial_scale(p: Polynomial, c: Union[Tensor, Number]) -> Polynomial:
    """Multiply polynomial by a scalar.

    Parameters
    ----------
    p : Polynomial
        Polynomial to scale. May be empty.
    c : Tensor or number
        Scalar factor, a Python number or a 0-d tensor.

    Returns
    -------
    Polynomial
        Scaled polynomial c * p with the same degree. The dtype follows
        ``torch.result_type`` of the coefficients and ``c``.

    Raises
    ------
    PolynomialError
        If ``c`` is not a number or 0-d tensor, or if the result would
        have a boolean or complex dtype.
    """
    coeffs = p.coeffs

    if not isinstance(c, (Tensor, Number)):
        raise PolynomialError(
            f"Scale factor must be a number or tensor, got {type(c).__name__}"
        )

    if isinstance(c, Tensor) and c.dim() != 0:
        raise PolynomialError(
            f"Scale factor must be a scalar, got shape {tuple(c.shape)}"
        )

    common_dtype = torch.result_type(coeffs, c)
    _check_dtype(common_dtype)

    return Polynomial(coeffs=coeffs.to(common_dtype) * c)
