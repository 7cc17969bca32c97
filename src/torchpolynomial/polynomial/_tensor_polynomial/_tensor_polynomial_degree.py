from typing import Optional

import torch

from torchpolynomial.context import NumberContext


def tensor_polynomial_degree(p, accuracy: Optional[NumberContext] = None) -> int:
    """Return degree of a tensor polynomial.

    Same semantics as :func:`polynomial_degree`: the largest power whose
    coefficient magnitude exceeds the accuracy's ``zero_error``, or 0.
    """
    if accuracy is None:
        accuracy = p.domain.default_accuracy

    magnitudes = p._coefficients.tensor.abs()
    # NaN magnitudes count as nonzero, as in polynomial_degree
    nonzero = torch.nonzero(~(magnitudes <= accuracy.zero_error))

    if nonzero.numel() == 0:
        return 0

    return int(nonzero[-1, 0].item())
