from typing import Any, Sequence, Union

from torch import Tensor

from torchpolynomial._polynomial_error import PolynomialError
from torchpolynomial.scalar import FLOAT32

from ._tensor_polynomial import TensorPolynomial


class Float32Polynomial(TensorPolynomial):
    """Polynomial with ``torch.float32`` coefficients.

    Examples
    --------
    >>> p = Float32Polynomial([3.0, 2.0, 1.0])  # 3 + 2x + x^2
    >>> p(2.0)
    11.0
    """

    domain = FLOAT32


def float32_polynomial(coeffs: Union[Sequence[Any], Tensor]) -> Float32Polynomial:
    """Create a float32 polynomial from coefficients.

    Parameters
    ----------
    coeffs : Sequence or Tensor
        Coefficients in ascending order of degree.
        coeffs[i] is the coefficient of x^i.

    Returns
    -------
    Float32Polynomial
        Polynomial instance.

    Raises
    ------
    PolynomialError
        If coeffs is empty.

    Examples
    --------
    >>> p = float32_polynomial([1.0, 2.0, 3.0])  # 1 + 2x + 3x^2
    >>> p.coeffs
    tensor([1., 2., 3.])
    """
    if isinstance(coeffs, Tensor):
        coeffs = coeffs.reshape(-1)
        if coeffs.shape[0] == 0:
            raise PolynomialError("Polynomial must have at least one coefficient")
    elif len(coeffs) == 0:
        raise PolynomialError("Polynomial must have at least one coefficient")

    return Float32Polynomial(coeffs)
