from typing import Any, List, Sequence, Union

import torch
from torch import Tensor

from torchpolynomial.scalar import FLOAT64, CoefficientDomain, FloatDomain


def polynomial_vandermonde(
    x: Union[Sequence[Any], Tensor],
    size: int,
    domain: CoefficientDomain = FLOAT64,
) -> Union[Tensor, List[List[Any]]]:
    """Construct the design matrix for polynomial fitting.

    Column ``j`` holds ``x[i] ** j``, built incrementally: each row starts
    at the domain's one and is multiplied by ``x[i]`` once per column,
    never exponentiated.

    Parameters
    ----------
    x : Sequence or Tensor
        Sample points, shape (n_points,).
    size : int
        Number of coefficients to fit (``degree + 1``).
    domain : CoefficientDomain
        Domain of the entries. Machine float domains get a tensor; every
        other domain gets a list of rows of domain values.

    Returns
    -------
    Tensor or list of lists
        Design matrix, shape (n_points, size).

    Examples
    --------
    >>> polynomial_vandermonde(torch.tensor([1.0, 2.0, 3.0]), 3)
    tensor([[1., 1., 1.],
            [1., 2., 4.],
            [1., 3., 9.]], dtype=torch.float64)
    """
    if isinstance(domain, FloatDomain):
        samples = torch.as_tensor(x, dtype=domain.dtype).reshape(-1)
        column = torch.ones_like(samples)
        columns = []
        for _ in range(size):
            columns.append(column)
            column = column * samples
        if not columns:
            return samples.new_zeros(samples.shape[0], 0)
        return torch.stack(columns, dim=-1)

    rows = []
    for sample in x:
        sample = domain.cast(sample)
        entry = domain.one()
        row = []
        for _ in range(size):
            row.append(entry)
            entry = domain.multiply(entry, sample)
        rows.append(row)
    return rows
