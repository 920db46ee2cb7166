"""Exception hierarchy for polynomial operations."""

from ._index_out_of_range_error import IndexOutOfRangeError
from ._invalid_operand_error import InvalidOperandError
from ._parse_exponent_out_of_range_error import ParseExponentOutOfRangeError
from ._polynomial_error import PolynomialError
from ._polynomial_parse_error import PolynomialParseError

__all__ = [
    "IndexOutOfRangeError",
    "InvalidOperandError",
    "ParseExponentOutOfRangeError",
    "PolynomialError",
    "PolynomialParseError",
]
