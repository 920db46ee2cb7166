import torch

from ._polynomial import Polynomial


def polynomial_trim(p: Polynomial) -> Polynomial:
    """Remove zero leading coefficients.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.

    Returns
    -------
    Polynomial
        Copy of ``p`` without zero coefficients above the highest non-zero
        one, keeping at least one coefficient. The zero polynomial trims
        to the constant 0 and the empty polynomial stays empty.
    """
    coeffs = p.coeffs
    n = coeffs.shape[-1]

    if n <= 1:
        return Polynomial(coeffs=coeffs.clone())

    mask = coeffs != 0
    if not mask.any():
        return Polynomial(coeffs=coeffs.new_zeros(1))

    # Find last True position
    indices = torch.arange(n, device=coeffs.device)
    last_nonzero = indices[mask].max().item()

    return Polynomial(coeffs=coeffs[: last_nonzero + 1].clone())
