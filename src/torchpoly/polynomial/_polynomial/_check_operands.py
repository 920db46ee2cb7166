from torchpoly.polynomial._invalid_operand_error import InvalidOperandError

from ._polynomial import Polynomial


def _check_operands(operation: str, *polynomials: Polynomial) -> None:
    for p in polynomials:
        if p.coeffs.shape[-1] == 0:
            raise InvalidOperandError(
                f"Cannot {operation} an empty polynomial"
            )
