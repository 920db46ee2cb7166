import re

import torch

from torchpoly.polynomial._parse_exponent_out_of_range_error import (
    ParseExponentOutOfRangeError,
)
from torchpoly.polynomial._polynomial_parse_error import PolynomialParseError

from ._polynomial import Polynomial
from ._polynomial_coefficient import polynomial_set_coefficient
from ._polynomial_degree import polynomial_degree

_TERM = re.compile(
    r"\s*(?P<coefficient>[+-]?\s*(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
    r"(?:\s*(?P<variable>[A-Za-z_]\w*)\s*\^\s*(?P<exponent>\d+))?"
)


def _parse_coefficient(text: str, dtype: torch.dtype, line: str):
    text = "".join(text.split())
    is_floating_point = dtype.is_floating_point

    try:
        value = float(text) if is_floating_point else int(text)
    except ValueError:
        raise PolynomialParseError(
            f"Coefficient {text!r} in {line!r} is not a valid "
            f"{'floating point' if is_floating_point else 'integer'} value"
        ) from None

    if is_floating_point:
        fits = abs(value) <= torch.finfo(dtype).max
    else:
        info = torch.iinfo(dtype)
        fits = info.min <= value <= info.max

    if not fits:
        raise PolynomialParseError(
            f"Coefficient {text!r} in {line!r} does not fit {dtype}"
        )

    return value


def _parse_exponent(text: str, degree: int, line: str) -> int:
    digits = text.lstrip("0") or "0"

    # compare lengths first, int() rejects very long digit strings
    if len(digits) > len(str(max(degree, 0))) or int(digits) > degree:
        shown = digits if len(digits) <= 20 else digits[:20] + "..."
        raise ParseExponentOutOfRangeError(
            f"Exponent {shown} in {line!r} exceeds degree {degree}"
        )

    return int(digits)


def polynomial_parse(
    line: str,
    p: Polynomial,
    variable: str = "x",
) -> Polynomial:
    """Read coefficients from text into an existing polynomial.

    The line is a sequence of terms separated by whitespace. A term is a
    number, optionally followed by ``<variable> ^ <exponent>``. Terms with
    an exponent overwrite that coefficient; a bare number overwrites the
    constant term. Later terms win. A sign may be separated from its
    number by whitespace, so ``"3x^2 - 4"`` reads as 3 at x^2 and -4.

    Parameters
    ----------
    line : str
        Text to read.
    p : Polynomial
        Polynomial updated in place. Its degree never changes.
    variable : str
        Symbol of the indeterminate.

    Returns
    -------
    Polynomial
        ``p``, for chaining.

    Raises
    ------
    PolynomialParseError
        If the text is not a sequence of terms, names another variable,
        holds a non-integral number for an integer polynomial, or holds a
        value outside the range of the coefficient dtype.
    ParseExponentOutOfRangeError
        If a term's exponent is above the degree of ``p``.

    Notes
    -----
    The whole line is checked before anything is written, so ``p`` is
    unchanged when an error is raised. ``polynomial_to_string`` output
    does not always parse back: unit coefficients are printed without a
    number.

    Examples
    --------
    >>> p = polynomial([0, 0, 0])
    >>> polynomial_parse("5 x ^ 2 -1", p).coeffs
    tensor([-1,  0,  5])
    """
    degree = polynomial_degree(p)
    dtype = p.coeffs.dtype

    terms = []
    position = 0
    while line[position:].strip():
        match = _TERM.match(line, position)
        if match is None:
            raise PolynomialParseError(
                f"Unexpected input at column {position} in {line!r}"
            )

        if match.group("variable") is None:
            exponent = _parse_exponent("0", degree, line)
        elif match.group("variable") != variable:
            raise PolynomialParseError(
                f"Expected variable {variable!r}, "
                f"got {match.group('variable')!r} in {line!r}"
            )
        else:
            exponent = _parse_exponent(
                match.group("exponent"), degree, line
            )

        coefficient = _parse_coefficient(
            match.group("coefficient"), dtype, line
        )
        terms.append((exponent, coefficient))

        position = match.end()

    for exponent, coefficient in terms:
        polynomial_set_coefficient(p, exponent, coefficient)

    return p
