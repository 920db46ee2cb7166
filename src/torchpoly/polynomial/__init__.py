from ._exceptions import (
    IndexOutOfRangeError,
    InvalidOperandError,
    ParseExponentOutOfRangeError,
    PolynomialError,
    PolynomialParseError,
)
from ._polynomial import (
    Polynomial,
    polynomial,
    polynomial_add,
    polynomial_coefficient,
    polynomial_copy,
    polynomial_degree,
    polynomial_derivative,
    polynomial_empty,
    polynomial_equal,
    polynomial_evaluate,
    polynomial_integral,
    polynomial_move,
    polynomial_multiply,
    polynomial_parse,
    polynomial_scale,
    polynomial_set_coefficient,
    polynomial_subtract,
    polynomial_to_string,
    polynomial_trim,
)

__all__ = [
    "IndexOutOfRangeError",
    "InvalidOperandError",
    "ParseExponentOutOfRangeError",
    "Polynomial",
    "PolynomialError",
    "PolynomialParseError",
    "polynomial",
    "polynomial_add",
    "polynomial_coefficient",
    "polynomial_copy",
    "polynomial_degree",
    "polynomial_derivative",
    "polynomial_empty",
    "polynomial_equal",
    "polynomial_evaluate",
    "polynomial_integral",
    "polynomial_move",
    "polynomial_multiply",
    "polynomial_parse",
    "polynomial_scale",
    "polynomial_set_coefficient",
    "polynomial_subtract",
    "polynomial_to_string",
    "polynomial_trim",
]
