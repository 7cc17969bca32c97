"""Discrete Fourier transform used for fast polynomial powers."""

from torchpolynomial.transform._discrete_fourier_transform import (
    DiscreteFourierTransform,
    next_power_of_two,
)

__all__ = [
    "DiscreteFourierTransform",
    "next_power_of_two",
]
