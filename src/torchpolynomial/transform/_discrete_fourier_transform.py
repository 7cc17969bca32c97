"""Discrete Fourier transform over a complex128 working buffer."""

from typing import Any, Sequence, Union

import torch
from torch import Tensor

from torchpolynomial._exceptions import ArgumentError


def next_power_of_two(n: int) -> int:
    """Return the smallest power of 2 >= n."""
    if n <= 0:
        return 1
    return 1 << (n - 1).bit_length()


class DiscreteFourierTransform:
    r"""Fixed-size discrete Fourier transform.

    .. math::
        X[k] = \sum_{n=0}^{N-1} x[n] \cdot e^{-2\pi i k n / N}

    The inverse divides by :math:`N` so that ``inverse(transform(x)) == x``.

    Parameters
    ----------
    size : int
        Transform length. Must be a positive power of two.

    Raises
    ------
    ArgumentError
        If ``size`` is not a positive power of two.

    Examples
    --------
    >>> dft = DiscreteFourierTransform(4)
    >>> dft.transform([1.0, 1.0])
    tensor([2.+0.j, 1.-1.j, 0.+0.j, 1.+1.j], dtype=torch.complex128)
    """

    def __init__(self, size: int):
        if size < 1 or size & (size - 1):
            raise ArgumentError(
                f"Transform size must be a positive power of two, got {size}"
            )
        self.size = size

    def _buffer(self, input: Union[Sequence[Any], Tensor]) -> Tensor:
        if isinstance(input, Tensor):
            values = input.detach().reshape(-1).to(torch.complex128)
        else:
            values = torch.tensor(
                [complex(v) for v in input], dtype=torch.complex128
            )

        n = values.shape[0]
        if n > self.size:
            raise ArgumentError(
                f"Input of length {n} exceeds transform size {self.size}"
            )

        return torch.cat([values, values.new_zeros(self.size - n)])

    def transform(self, input: Union[Sequence[Any], Tensor]) -> Tensor:
        """Forward transform of ``input`` zero-padded to ``size``."""
        return torch.fft.fft(self._buffer(input))

    def inverse(self, input: Union[Sequence[Any], Tensor]) -> Tensor:
        """Inverse transform of ``input`` zero-padded to ``size``."""
        return torch.fft.ifft(self._buffer(input))
