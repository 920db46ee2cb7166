from numbers import Number
from typing import Optional, Sequence, Union

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from torchpoly.polynomial._polynomial_error import PolynomialError

_UNSUPPORTED_DTYPES = (
    torch.bool,
    torch.complex32,
    torch.complex64,
    torch.complex128,
)


@tensorclass
class Polynomial:
    """Dense polynomial in power basis with ascending coefficients.

    Represents p(x) = coeffs[0] + coeffs[1]*x + coeffs[2]*x^2 + ...

    Attributes
    ----------
    coeffs : Tensor
        Coefficients in ascending order, shape (N,) where N = degree + 1.
        coeffs[i] is the coefficient of x^i. An empty polynomial has
        shape (0,) and degree -1.

    Notes
    -----
    Construct instances with :func:`polynomial`, which takes coefficients
    highest degree first, or :func:`polynomial_empty`. Calling the class
    directly stores ``coeffs`` as given, in ascending order.

    Examples
    --------
    3x^2 - 4:
        polynomial([3, 0, -4])
        Polynomial(coeffs=torch.tensor([-4, 0, 3]))

    Operator overloading:
        p + q    # polynomial_add(p, q)
        p - q    # polynomial_subtract(p, q)
        p * q    # polynomial_multiply(p, q)
        p * c    # polynomial_scale(p, c)
        p(x)     # polynomial_evaluate(p, x)
    """

    coeffs: Tensor

    def __add__(self, other: "Polynomial") -> "Polynomial":
        from ._polynomial_add import polynomial_add

        return polynomial_add(self, other)

    def __sub__(self, other: "Polynomial") -> "Polynomial":
        from ._polynomial_subtract import polynomial_subtract

        return polynomial_subtract(self, other)

    def __mul__(
        self, other: Union["Polynomial", Tensor, Number]
    ) -> "Polynomial":
        from ._polynomial_multiply import polynomial_multiply
        from ._polynomial_scale import polynomial_scale

        if isinstance(other, Polynomial):
            return polynomial_multiply(self, other)
        return polynomial_scale(self, other)

    def __rmul__(self, other: Union[Tensor, Number]) -> "Polynomial":
        from ._polynomial_scale import polynomial_scale

        return polynomial_scale(self, other)

    def __call__(self, x: Union[Tensor, Number]) -> Tensor:
        from ._polynomial_evaluate import polynomial_evaluate

        return polynomial_evaluate(self, x)


def _check_dtype(dtype: torch.dtype) -> None:
    if dtype in _UNSUPPORTED_DTYPES:
        raise PolynomialError(
            f"Polynomial coefficients must be integer or floating point, "
            f"got {dtype}"
        )


def polynomial(
    coeffs: Union[Tensor, Sequence[Number]],
    dtype: Optional[torch.dtype] = None,
    device: Optional[Union[torch.device, str]] = None,
) -> Polynomial:
    """Create polynomial from coefficients listed highest degree first.

    Parameters
    ----------
    coeffs : Tensor or sequence of numbers
        Coefficients from the leading term down to the constant term,
        one-dimensional, length N. The first value becomes the
        coefficient of x^(N-1), the last the constant term.
    dtype : torch.dtype, optional
        Coefficient dtype. Inferred from ``coeffs`` when omitted.
    device : torch.device or str, optional
        Device of the coefficient buffer.

    Returns
    -------
    Polynomial
        Polynomial of degree N - 1 owning a fresh coefficient buffer.

    Raises
    ------
    PolynomialError
        If coeffs is empty, not one-dimensional, or of a boolean or
        complex dtype.

    Examples
    --------
    >>> p = polynomial([3, 0, -4])  # 3x^2 - 4
    >>> p.coeffs
    tensor([-4,  0,  3])
    """
    coeffs = torch.as_tensor(coeffs, dtype=dtype, device=device)

    if coeffs.dim() != 1:
        raise PolynomialError(
            f"Polynomial coefficients must be one-dimensional, "
            f"got shape {tuple(coeffs.shape)}"
        )

    if coeffs.numel() == 0:
        raise PolynomialError("Polynomial must have at least one coefficient")

    _check_dtype(coeffs.dtype)

    # flip copies, so the new polynomial never aliases the caller's tensor
    return Polynomial(coeffs=torch.flip(coeffs, dims=[0]))


def polynomial_empty(
    dtype: Optional[torch.dtype] = None,
    device: Optional[Union[torch.device, str]] = None,
) -> Polynomial:
    """Create the empty polynomial (no coefficients, degree -1).

    Parameters
    ----------
    dtype : torch.dtype, optional
        Coefficient dtype, defaults to ``torch.get_default_dtype()``.
    device : torch.device or str, optional
        Device of the coefficient buffer.

    Returns
    -------
    Polynomial
        Empty polynomial.
    """
    if dtype is None:
        dtype = torch.get_default_dtype()

    _check_dtype(dtype)

    return Polynomial(coeffs=torch.zeros(0, dtype=dtype, device=device))
