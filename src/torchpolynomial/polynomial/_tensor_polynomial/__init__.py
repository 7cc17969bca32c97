from ._float32_polynomial import Float32Polynomial, float32_polynomial
from ._float64_polynomial import Float64Polynomial, float64_polynomial
from ._tensor_polynomial import TensorPolynomial
from ._tensor_polynomial_add import tensor_polynomial_add
from ._tensor_polynomial_antiderivative import tensor_polynomial_antiderivative
from ._tensor_polynomial_degree import tensor_polynomial_degree
from ._tensor_polynomial_derivative import tensor_polynomial_derivative
from ._tensor_polynomial_evaluate import tensor_polynomial_evaluate
from ._tensor_polynomial_multiply import tensor_polynomial_multiply
from ._tensor_polynomial_negate import tensor_polynomial_negate
from ._tensor_polynomial_pow_fft import tensor_polynomial_pow_fft

__all__ = [
    "Float32Polynomial",
    "Float64Polynomial",
    "TensorPolynomial",
    "float32_polynomial",
    "float64_polynomial",
    "tensor_polynomial_add",
    "tensor_polynomial_antiderivative",
    "tensor_polynomial_degree",
    "tensor_polynomial_derivative",
    "tensor_polynomial_evaluate",
    "tensor_polynomial_multiply",
    "tensor_polynomial_negate",
    "tensor_polynomial_pow_fft",
]
