from typing import Any

import torch
from torch import Tensor


def tensor_polynomial_evaluate(p, x: Any) -> Any:
    """Evaluate a tensor polynomial using Horner's method.

    Parameters
    ----------
    p : TensorPolynomial
        Polynomial to evaluate.
    x : Tensor or number
        Evaluation points. A tensor of any shape is evaluated element-wise
        in the common dtype of ``x`` and the coefficients; a Python number
        gives a Python number.

    Returns
    -------
    Tensor or number
        p(x), same shape as ``x``.

    Examples
    --------
    >>> p = float64_polynomial([1.0, 2.0, 3.0])  # 1 + 2x + 3x^2
    >>> tensor_polynomial_evaluate(p, torch.tensor([0.0, 1.0, 2.0]))
    tensor([ 1.,  6., 17.], dtype=torch.float64)
    """
    coeffs = p._coefficients.tensor
    degree = p.degree()

    scalar = not isinstance(x, Tensor)
    if scalar:
        x = torch.tensor(p.domain.cast(x), dtype=coeffs.dtype)

    # Promote to common dtype (float32 coefficients at float64 points)
    common_dtype = torch.promote_types(coeffs.dtype, x.dtype)
    coeffs = coeffs.to(common_dtype)
    x = x.to(common_dtype)

    result = torch.full_like(x, coeffs[degree].item())
    for power in range(degree - 1, -1, -1):
        result = coeffs[power] + x * result

    if scalar:
        return result.item()
    return result
