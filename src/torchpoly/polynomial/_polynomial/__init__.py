from ._polynomial import Polynomial, polynomial, polynomial_empty
from ._polynomial_add import polynomial_add
from ._polynomial_coefficient import (
    polynomial_coefficient,
    polynomial_set_coefficient,
)
from ._polynomial_copy import polynomial_copy, polynomial_move
from ._polynomial_degree import polynomial_degree
from ._polynomial_derivative import polynomial_derivative
from ._polynomial_equal import polynomial_equal
from ._polynomial_evaluate import polynomial_evaluate
from ._polynomial_integral import polynomial_integral
from ._polynomial_multiply import polynomial_multiply
from ._polynomial_parse import polynomial_parse
from ._polynomial_scale import polynomial_scale
from ._polynomial_subtract import polynomial_subtract
from ._polynomial_to_string import polynomial_to_string
from ._polynomial_trim import polynomial_trim

__all__ = [
    "Polynomial",
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
