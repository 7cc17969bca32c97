"""QR decompositions used for least-squares polynomial fitting.

Classes
-------
QRDecomposition
    Interface: ``decompose(matrix)`` then ``get_solution(rhs)``.

TensorQRDecomposition
    Reduced QR via :func:`torch.linalg.qr` for float32, float64 and
    complex128 systems.

QuadrupleQRDecomposition
    Householder least squares in an extended-precision mpmath context.

RationalQRDecomposition
    Exact square-root-free Gram-Schmidt over :class:`fractions.Fraction`.
"""

from torchpolynomial.linear_algebra.decomposition._qr_decomposition import (
    QRDecomposition,
)
from torchpolynomial.linear_algebra.decomposition._quadruple_qr_decomposition import (
    QuadrupleQRDecomposition,
)
from torchpolynomial.linear_algebra.decomposition._rational_qr_decomposition import (
    RationalQRDecomposition,
)
from torchpolynomial.linear_algebra.decomposition._tensor_qr_decomposition import (
    TensorQRDecomposition,
)

__all__ = [
    "QRDecomposition",
    "QuadrupleQRDecomposition",
    "RationalQRDecomposition",
    "TensorQRDecomposition",
]
