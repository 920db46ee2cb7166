from numbers import Number
from typing import Union

import torch
from torch import Tensor

from torchpoly.polynomial._index_out_of_range_error import (
    IndexOutOfRangeError,
)

from ._polynomial import Polynomial
from ._polynomial_degree import polynomial_degree


def polynomial_coefficient(p: Polynomial, exp: int) -> Tensor:
    """Return the coefficient of x^exp.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.
    exp : int
        Exponent. Any integer is accepted.

    Returns
    -------
    Tensor
        0-d tensor with the polynomial's dtype. Zero when ``exp`` is
        negative or above the degree.
    """
    if 0 <= exp <= polynomial_degree(p):
        return p.coeffs[exp].clone()

    return torch.zeros((), dtype=p.coeffs.dtype, device=p.coeffs.device)


def polynomial_set_coefficient(
    p: Polynomial,
    exp: int,
    value: Union[Tensor, Number],
) -> None:
    """Overwrite the coefficient of x^exp in place.

    Parameters
    ----------
    p : Polynomial
        Polynomial to modify.
    exp : int
        Exponent in [0, degree].
    value : Tensor or number
        New coefficient, converted to the polynomial's dtype.

    Raises
    ------
    IndexOutOfRangeError
        If ``exp`` is outside [0, degree]. The buffer is never grown.
    """
    degree = polynomial_degree(p)

    if not 0 <= exp <= degree:
        raise IndexOutOfRangeError(
            f"Exponent {exp} outside stored range [0, {degree}]"
        )

    p.coeffs[exp] = value
