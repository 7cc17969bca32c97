from fractions import Fraction
from typing import Any, List, Sequence

from torchpolynomial.linear_algebra.decomposition._qr_decomposition import (
    QRDecomposition,
)


def _dot(u: List[Fraction], v: List[Fraction]) -> Fraction:
    return sum((a * b for a, b in zip(u, v)), Fraction(0))


class RationalQRDecomposition(QRDecomposition):
    r"""Exact QR over :class:`fractions.Fraction`.

    Uses square-root-free Gram-Schmidt: :math:`A = Q R` where the columns
    of :math:`Q` are orthogonal but not normalised and :math:`R` is unit
    upper triangular. With :math:`D = Q^T Q` diagonal, the least-squares
    solution solves :math:`R x = D^{-1} Q^T b` exactly.
    """

    def __init__(self):
        super().__init__()
        self._q: List[List[Fraction]] = []
        self._d: List[Fraction] = []
        self._r: List[List[Fraction]] = []

    def _decompose(self, matrix: Sequence[Sequence[Any]]) -> bool:
        a = [[Fraction(value) for value in row] for row in matrix]
        columns = [[row[j] for row in a] for j in range(self.columns)]

        self._q = []
        self._d = []
        self._r = [[Fraction(0)] * self.columns for _ in range(self.columns)]

        full_rank = True
        for j, v in enumerate(columns):
            self._r[j][j] = Fraction(1)
            for i, q in enumerate(self._q):
                if self._d[i] == 0:
                    continue
                coefficient = _dot(q, v) / self._d[i]
                self._r[i][j] = coefficient
                v = [vk - coefficient * qk for vk, qk in zip(v, q)]

            norm = _dot(v, v)
            if norm == 0:
                full_rank = False

            self._q.append(v)
            self._d.append(norm)

        return full_rank

    def _solve(self, rhs: Sequence[Any]) -> List[Any]:
        b = [Fraction(value) for value in rhs]
        c = [_dot(q, b) / d for q, d in zip(self._q, self._d)]

        x = [Fraction(0)] * self.columns
        for j in reversed(range(self.columns)):
            x[j] = c[j] - sum(
                (self._r[j][k] * x[k] for k in range(j + 1, self.columns)),
                Fraction(0),
            )
        return x
