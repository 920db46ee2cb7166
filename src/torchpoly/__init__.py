"""torchpoly: dense polynomials with PyTorch coefficient buffers."""

from . import polynomial

__all__ = [
    "polynomial",
]

__version__ = "0.1.0"
