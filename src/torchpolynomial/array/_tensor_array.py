from typing import Any, Sequence, Union

import torch
from torch import Tensor

from torchpolynomial.array._dense_array import DenseArray


class TensorArray(DenseArray):
    """Dense array backed by a 1-D tensor.

    Parameters
    ----------
    data : int, Sequence or Tensor
        Either the number of (zero) elements or the initial values.
    dtype : torch.dtype
        Element type, e.g. ``torch.float64``.

    Examples
    --------
    >>> a = TensorArray(3, dtype=torch.float64)
    >>> a.add(1, 2.0)
    >>> a.tensor
    tensor([0., 2., 0.], dtype=torch.float64)
    """

    def __init__(
        self,
        data: Union[int, Sequence[Any], Tensor],
        dtype: torch.dtype = torch.float64,
    ):
        if isinstance(data, int):
            self.tensor = torch.zeros(data, dtype=dtype)
        elif isinstance(data, Tensor):
            # Own a copy so that callers cannot alias the coefficients
            self.tensor = data.detach().reshape(-1).to(dtype).clone()
        else:
            self.tensor = torch.tensor(
                [complex(v) if dtype.is_complex else float(v) for v in data],
                dtype=dtype,
            )

    @property
    def dtype(self) -> torch.dtype:
        return self.tensor.dtype

    def size(self) -> int:
        return self.tensor.shape[0]

    def get(self, index: int) -> Any:
        return self.tensor[self._check_index(index)].item()

    def set(self, index: int, value: Any) -> None:
        self.tensor[self._check_index(index)] = value

    def add(self, index: int, value: Any) -> None:
        self.tensor[self._check_index(index)] += value

    def reset(self) -> None:
        self.tensor.zero_()

    def fill_matching(self, values: Union[Sequence[Any], Tensor]) -> None:
        if isinstance(values, TensorArray):
            values = values.tensor
        if isinstance(values, Tensor):
            n = min(self.size(), values.shape[-1])
            self.tensor[:n] = values.reshape(-1)[:n].to(self.dtype)
        else:
            super().fill_matching(values)

    def copy(self) -> "TensorArray":
        return TensorArray(self.tensor, dtype=self.dtype)

    def __repr__(self) -> str:
        return f"TensorArray({self.tensor.tolist()}, dtype={self.dtype})"
