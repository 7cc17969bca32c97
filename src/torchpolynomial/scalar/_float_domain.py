from typing import Any, Sequence, Union

import torch
from torch import Tensor

from torchpolynomial.array import DenseArray, TensorArray
from torchpolynomial.linear_algebra.decomposition import (
    QRDecomposition,
    TensorQRDecomposition,
)
from torchpolynomial.scalar._coefficient_domain import CoefficientDomain


class FloatDomain(CoefficientDomain):
    """Native machine floats stored in a tensor of ``dtype``.

    Parameters
    ----------
    dtype : torch.dtype
        ``torch.float64`` or ``torch.float32``.
    """

    def __init__(self, dtype: torch.dtype = torch.float64):
        if not dtype.is_floating_point:
            raise TypeError(f"FloatDomain requires a floating dtype, got {dtype}")
        self.dtype = dtype
        self.name = str(dtype).replace("torch.", "")

    def zero(self) -> float:
        return 0.0

    def one(self) -> float:
        return 1.0

    def cast(self, value: Any) -> float:
        value = self._unwrap(value)
        if self.dtype == torch.float64:
            return float(value)
        # Round through the storage dtype
        return torch.tensor(float(value), dtype=self.dtype).item()

    def from_complex(self, value: complex) -> float:
        return self.cast(value.real)

    def array(self, data: Union[int, Sequence[Any], Tensor]) -> DenseArray:
        return TensorArray(data, dtype=self.dtype)

    def decomposition(self) -> QRDecomposition:
        return TensorQRDecomposition(self.dtype)


FLOAT64 = FloatDomain(torch.float64)
FLOAT32 = FloatDomain(torch.float32)
