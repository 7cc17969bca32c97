"""Numeric domain trait for polynomial coefficients."""

from abc import ABC, abstractmethod
from typing import Any, Sequence, Union

from torch import Tensor

from torchpolynomial._exceptions import NumericError
from torchpolynomial.array import DenseArray, ObjectArray
from torchpolynomial.context import DEFAULT_ACCURACY, NumberContext
from torchpolynomial.linear_algebra.decomposition import QRDecomposition


class CoefficientDomain(ABC):
    """Arithmetic, constants and collaborators of one coefficient type.

    A domain supplies ``zero``/``one``, the four field operations plus
    negation, a real magnitude (``norm``) used by ``degree``, the casts in
    and out of the complex working buffer of the discrete Fourier
    transform, the coefficient store and the least-squares solver.

    Subclasses only need to override what their value type does not
    already provide through the Python number protocol.
    """

    name: str = "domain"
    exact: bool = False

    @property
    def default_accuracy(self) -> NumberContext:
        """Accuracy used by ``degree`` when none is given."""
        if self.exact:
            return NumberContext.exact()
        return DEFAULT_ACCURACY

    @property
    def exceeds_double(self) -> bool:
        """Whether values carry more than a complex128 buffer can hold."""
        return self.exact

    @abstractmethod
    def zero(self) -> Any: ...

    @abstractmethod
    def one(self) -> Any: ...

    @abstractmethod
    def cast(self, value: Any) -> Any:
        """Convert a Python number, tensor element or foreign value."""

    def add(self, a: Any, b: Any) -> Any:
        return a + b

    def subtract(self, a: Any, b: Any) -> Any:
        return a - b

    def multiply(self, a: Any, b: Any) -> Any:
        return a * b

    def divide(self, a: Any, b: Any) -> Any:
        try:
            return a / b
        except ZeroDivisionError as error:
            raise NumericError(f"Division by zero in {self.name}") from error

    def negate(self, a: Any) -> Any:
        return -a

    def norm(self, a: Any) -> Any:
        return abs(a)

    def to_complex(self, value: Any) -> complex:
        return complex(value)

    @abstractmethod
    def from_complex(self, value: complex) -> Any:
        """Cast a value out of the transform's complex working buffer."""

    def array(self, data: Union[int, Sequence[Any], Tensor]) -> DenseArray:
        """Coefficient store of ``data`` zeros or of the cast ``data``."""
        if isinstance(data, int):
            return ObjectArray(data, zero=self.zero())
        if isinstance(data, Tensor):
            data = data.reshape(-1).tolist()
        return ObjectArray([self.cast(value) for value in data], zero=self.zero())

    @abstractmethod
    def decomposition(self) -> QRDecomposition:
        """A fresh least-squares solver for this domain."""

    def _unwrap(self, value: Any) -> Any:
        if isinstance(value, Tensor):
            return value.item()
        return value

    def _key(self) -> tuple:
        return (type(self), self.name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CoefficientDomain):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"
