from typing import Any

import torch

from torchpolynomial.linear_algebra.decomposition import (
    QRDecomposition,
    TensorQRDecomposition,
)
from torchpolynomial.scalar._coefficient_domain import CoefficientDomain


class ComplexDomain(CoefficientDomain):
    """Python ``complex`` coefficients (double precision parts).

    Arithmetic goes through the generic scalar path; least squares uses a
    ``complex128`` tensor QR.
    """

    name = "complex128"

    def zero(self) -> complex:
        return 0j

    def one(self) -> complex:
        return 1 + 0j

    def cast(self, value: Any) -> complex:
        return complex(self._unwrap(value))

    def from_complex(self, value: complex) -> complex:
        return complex(value)

    def decomposition(self) -> QRDecomposition:
        return TensorQRDecomposition(torch.complex128)


COMPLEX128 = ComplexDomain()
