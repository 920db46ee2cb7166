from ._polynomial import Polynomial


def _format_number(value, is_floating_point: bool) -> str:
    if is_floating_point:
        return format(value, "g")

    return str(value)


def polynomial_to_string(p: Polynomial, variable: str = "x") -> str:
    """Render polynomial as algebraic text, highest degree first.

    Every stored coefficient is rendered, zeros included. A unit
    coefficient is omitted in front of the variable. Negative terms are
    written as ``" - "`` followed by the magnitude, also when the leading
    term is negative.

    Parameters
    ----------
    p : Polynomial
        Polynomial to render.
    variable : str
        Symbol of the indeterminate.

    Returns
    -------
    str
        Text such as ``"3x^2 + 0x - 4"``. Empty for the empty polynomial.

    Examples
    --------
    >>> polynomial_to_string(polynomial([1, -1, 2]))
    'x^2 - x + 2'
    >>> polynomial_to_string(polynomial([-0.5, 3.0]), variable="t")
    ' - 0.5t + 3'
    """
    coeffs = p.coeffs.tolist()
    is_floating_point = p.coeffs.dtype.is_floating_point

    parts = []
    first = True
    for i in range(len(coeffs) - 1, -1, -1):
        coeff = coeffs[i]

        if not first and coeff >= 0:
            parts.append(" + ")
        if coeff < 0:
            parts.append(" - ")

        magnitude = abs(coeff)
        if magnitude != 1 or i == 0:
            parts.append(_format_number(magnitude, is_floating_point))

        if i != 0:
            parts.append(variable)
        if i > 1:
            parts.append(f"^{i}")

        first = False

    return "".join(parts)
