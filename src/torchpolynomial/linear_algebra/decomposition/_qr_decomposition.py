"""Least-squares solver interface."""

from abc import ABC, abstractmethod
from typing import Any, List, Sequence

from torch import Tensor

from torchpolynomial._exceptions import ArgumentError, DegreeError, NumericError
from torchpolynomial._polynomial_error import PolynomialError


class QRDecomposition(ABC):
    """QR decomposition of a design matrix, solving ``min ||A x - b||``.

    ``decompose`` takes a row-major matrix (a 2-D tensor or a sequence of
    rows); ``get_solution`` takes the right-hand side as a flat sequence
    and returns the solution as a list of ``columns`` values.

    Under-determined systems (fewer rows than columns) are rejected with
    :class:`DegreeError` rather than solved in the minimum-norm sense.
    """

    def __init__(self):
        self.rows = 0
        self.columns = 0
        self._computed = False
        self._full_rank = False

    def decompose(self, matrix: Sequence[Sequence[Any]]) -> bool:
        """Factor ``matrix``. Returns whether it has full column rank."""
        if isinstance(matrix, Tensor):
            self.rows, self.columns = matrix.shape
        else:
            self.rows = len(matrix)
            self.columns = len(matrix[0]) if self.rows > 0 else 0
        self._full_rank = self._decompose(matrix)
        self._computed = True
        return self._full_rank

    def is_computed(self) -> bool:
        return self._computed

    def is_full_rank(self) -> bool:
        return self._full_rank

    def get_solution(self, rhs: Sequence[Any]) -> List[Any]:
        if not self._computed:
            raise PolynomialError("decompose must be called before get_solution")

        if self.rows < self.columns:
            raise DegreeError(
                f"Under-determined system: {self.rows} samples for "
                f"{self.columns} coefficients"
            )

        if len(rhs) != self.rows:
            raise ArgumentError(
                f"Right-hand side has {len(rhs)} rows, expected {self.rows}"
            )

        if not self._full_rank:
            raise NumericError("Design matrix does not have full column rank")

        return self._solve(rhs)

    @abstractmethod
    def _decompose(self, matrix: Sequence[Sequence[Any]]) -> bool: ...

    @abstractmethod
    def _solve(self, rhs: Sequence[Any]) -> List[Any]: ...
