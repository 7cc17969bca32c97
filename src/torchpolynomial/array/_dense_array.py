"""Fixed-size coefficient storage."""

from abc import ABC, abstractmethod
from typing import Any, Iterator, List, Sequence

from torchpolynomial._exceptions import ArgumentError


class DenseArray(ABC):
    """Indexable, fixed-size numeric container over one coefficient domain."""

    @abstractmethod
    def size(self) -> int: ...

    @abstractmethod
    def get(self, index: int) -> Any: ...

    @abstractmethod
    def set(self, index: int, value: Any) -> None: ...

    @abstractmethod
    def reset(self) -> None:
        """Set every element to zero."""

    @abstractmethod
    def copy(self) -> "DenseArray": ...

    def add(self, index: int, value: Any) -> None:
        """Accumulate ``value`` into the element at ``index``."""
        self.set(index, self.get(index) + value)

    def fill_matching(self, values: Sequence[Any]) -> None:
        """Copy the first ``min(size, len(values))`` elements of ``values``."""
        for index in range(min(self.size(), len(values))):
            self.set(index, values[index])

    def to_list(self) -> List[Any]:
        return [self.get(index) for index in range(self.size())]

    def _check_index(self, index: int) -> int:
        size = self.size()
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise ArgumentError(
                f"Index {index} out of range for {size} coefficients"
            )
        return index

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[Any]:
        for index in range(self.size()):
            yield self.get(index)

    def __getitem__(self, index: int) -> Any:
        return self.get(index)

    def __setitem__(self, index: int, value: Any) -> None:
        self.set(index, value)
