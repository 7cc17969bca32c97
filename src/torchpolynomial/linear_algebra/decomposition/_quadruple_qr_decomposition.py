from typing import Any, List, Sequence

import mpmath

from torchpolynomial._exceptions import NumericError
from torchpolynomial.linear_algebra.decomposition._qr_decomposition import (
    QRDecomposition,
)


class QuadrupleQRDecomposition(QRDecomposition):
    """Householder least squares in an mpmath context.

    Parameters
    ----------
    context : mpmath.MPContext
        Context whose working precision (e.g. 113 bits for quadruple
        precision) governs the solve. Solutions are ``context.mpf``.

    Notes
    -----
    mpmath factors the augmented system on every solve, so the matrix is
    only converted here. A numerically singular matrix surfaces as
    :class:`NumericError` from ``get_solution``.
    """

    def __init__(self, context: mpmath.MPContext):
        super().__init__()
        self.context = context
        self._a = None

    def _decompose(self, matrix: Sequence[Sequence[Any]]) -> bool:
        convert = self.context.convert
        self._a = self.context.matrix(
            [[convert(value) for value in row] for row in matrix]
        )
        return self.rows >= self.columns

    def _solve(self, rhs: Sequence[Any]) -> List[Any]:
        b = self.context.matrix([self.context.convert(value) for value in rhs])
        try:
            x, _residual = self.context.qr_solve(self._a.copy(), b)
        except (ValueError, ZeroDivisionError) as error:
            raise NumericError(str(error)) from error
        return [x[j] for j in range(self.columns)]
