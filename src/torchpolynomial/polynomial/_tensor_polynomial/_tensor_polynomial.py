from typing import Any, Optional

from torch import Tensor

from torchpolynomial.context import NumberContext

from .._polynomial import Polynomial


class TensorPolynomial(Polynomial):
    """Polynomial over native machine floats, stored in a 1-D tensor.

    Replaces the element-by-element domain arithmetic of the generic core
    with vectorised torch kernels for degree, evaluation, addition,
    negation, multiplication (``conv1d``), calculus and FFT powers.
    Evaluation accepts a tensor of points.

    Attributes
    ----------
    coeffs : Tensor
        Copy of the coefficients in ascending order, shape (N,).
    """

    @property
    def coeffs(self) -> Tensor:
        return self._coefficients.tensor.clone()

    @property
    def dtype(self):
        return self._coefficients.tensor.dtype

    def _derivative_term(self, power: int) -> float:
        return (power + 1) * self.get(power + 1)

    def _primitive_term(self, power: int) -> float:
        return self.get(power - 1) / power

    def degree(self, accuracy: Optional[NumberContext] = None) -> int:
        from ._tensor_polynomial_degree import tensor_polynomial_degree

        return tensor_polynomial_degree(self, accuracy)

    def evaluate(self, x: Any) -> Any:
        from ._tensor_polynomial_evaluate import tensor_polynomial_evaluate

        return tensor_polynomial_evaluate(self, x)

    def add(self, other: Polynomial) -> Polynomial:
        from ._tensor_polynomial_add import tensor_polynomial_add

        return tensor_polynomial_add(self, other)

    def multiply(self, other: Polynomial) -> Polynomial:
        from ._tensor_polynomial_multiply import tensor_polynomial_multiply

        return tensor_polynomial_multiply(self, other)

    def negate(self) -> Polynomial:
        from ._tensor_polynomial_negate import tensor_polynomial_negate

        return tensor_polynomial_negate(self)

    def _power_fft(self, n: int) -> Polynomial:
        from ._tensor_polynomial_pow_fft import tensor_polynomial_pow_fft

        return tensor_polynomial_pow_fft(self, n)

    def _build_derivative(self) -> Polynomial:
        from ._tensor_polynomial_derivative import tensor_polynomial_derivative

        return tensor_polynomial_derivative(self)

    def _build_primitive(self) -> Polynomial:
        from ._tensor_polynomial_antiderivative import (
            tensor_polynomial_antiderivative,
        )

        return tensor_polynomial_antiderivative(self)
