from typing import Any, Sequence, Union

import numpy

from torchpolynomial.array._dense_array import DenseArray


class ObjectArray(DenseArray):
    """Dense array of arbitrary Python numbers backed by a numpy object array.

    Used for coefficient domains that have no native tensor dtype:
    ``Fraction``, ``Decimal``, mpmath ``mpf`` and ``complex``.

    Parameters
    ----------
    data : int or Sequence
        Either the number of elements or the initial values. Values are
        stored as given; callers cast them into their domain first.
    zero : Any
        The domain's additive identity, used for new and reset elements.
    """

    def __init__(self, data: Union[int, Sequence[Any]], zero: Any = 0):
        self._zero = zero
        if isinstance(data, int):
            self._values = numpy.empty(data, dtype=object)
            self._values.fill(zero)
        else:
            self._values = numpy.empty(len(data), dtype=object)
            for index, value in enumerate(data):
                self._values[index] = value

    def size(self) -> int:
        return self._values.shape[0]

    def get(self, index: int) -> Any:
        return self._values[self._check_index(index)]

    def set(self, index: int, value: Any) -> None:
        self._values[self._check_index(index)] = value

    def reset(self) -> None:
        self._values.fill(self._zero)

    def copy(self) -> "ObjectArray":
        return ObjectArray(list(self._values), zero=self._zero)

    def __repr__(self) -> str:
        return f"ObjectArray({list(self._values)!r})"
