from typing import Any, List, Sequence

import torch
from torch import Tensor

from torchpolynomial.linear_algebra.decomposition._qr_decomposition import (
    QRDecomposition,
)


class TensorQRDecomposition(QRDecomposition):
    """Reduced QR from :func:`torch.linalg.qr`.

    The solution solves :math:`R x = Q^H b` with
    :func:`torch.linalg.solve_triangular`. Rank is judged from the diagonal
    of :math:`R` relative to its largest entry.

    Parameters
    ----------
    dtype : torch.dtype
        Working dtype: ``float32``, ``float64`` or ``complex128``.
    """

    def __init__(self, dtype: torch.dtype = torch.float64):
        super().__init__()
        self.dtype = dtype
        self._q = None
        self._r = None

    def _decompose(self, matrix: Sequence[Sequence[Any]]) -> bool:
        if isinstance(matrix, Tensor):
            a = matrix.to(self.dtype)
        else:
            a = torch.tensor(
                [list(row) for row in matrix], dtype=self.dtype
            ).reshape(self.rows, self.columns)

        self._q, self._r = torch.linalg.qr(a, mode="reduced")

        if self.rows < self.columns:
            return False

        diagonal = torch.diagonal(self._r).abs()
        if diagonal.numel() == 0:
            return True

        tolerance = (
            diagonal.max()
            * max(self.rows, self.columns)
            * torch.finfo(self._r.real.dtype).eps
        )
        return bool((diagonal > tolerance).all())

    def _solve(self, rhs: Sequence[Any]) -> List[Any]:
        if isinstance(rhs, Tensor):
            b = rhs.reshape(-1, 1).to(self.dtype)
        else:
            b = torch.tensor(list(rhs), dtype=self.dtype).reshape(-1, 1)

        x = torch.linalg.solve_triangular(
            self._r, self._q.mH @ b, upper=True
        )
        return x.reshape(-1).tolist()
