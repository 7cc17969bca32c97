"""Linear algebra collaborators of the polynomial estimator."""

from torchpolynomial.linear_algebra import decomposition

__all__ = [
    "decomposition",
]
