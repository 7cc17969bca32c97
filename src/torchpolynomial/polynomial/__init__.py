from torchpolynomial._exceptions import ArgumentError, DegreeError, NumericError
from torchpolynomial._polynomial_error import PolynomialError
from torchpolynomial._precision_warning import PrecisionWarning

from ._polynomial import (
    FFT_POWER_THRESHOLD,
    Polynomial,
    check_same_domain,
    polynomial_add,
    polynomial_antiderivative,
    polynomial_degree,
    polynomial_derivative,
    polynomial_evaluate,
    polynomial_fit,
    polynomial_integral,
    polynomial_multiply,
    polynomial_negate,
    polynomial_pow,
    polynomial_pow_fft,
    polynomial_subtract,
    polynomial_vandermonde,
)
from ._scalar_polynomial import (
    ComplexPolynomial,
    DecimalPolynomial,
    QuadruplePolynomial,
    RationalPolynomial,
    ScalarPolynomial,
    complex_polynomial,
    decimal_polynomial,
    quadruple_polynomial,
    rational_polynomial,
)
from ._tensor_polynomial import (
    Float32Polynomial,
    Float64Polynomial,
    TensorPolynomial,
    float32_polynomial,
    float64_polynomial,
)

__all__ = [
    "ArgumentError",
    "ComplexPolynomial",
    "DecimalPolynomial",
    "DegreeError",
    "FFT_POWER_THRESHOLD",
    "Float32Polynomial",
    "Float64Polynomial",
    "NumericError",
    "Polynomial",
    "PolynomialError",
    "PrecisionWarning",
    "QuadruplePolynomial",
    "RationalPolynomial",
    "ScalarPolynomial",
    "TensorPolynomial",
    "check_same_domain",
    "complex_polynomial",
    "decimal_polynomial",
    "float32_polynomial",
    "float64_polynomial",
    "polynomial_add",
    "polynomial_antiderivative",
    "polynomial_degree",
    "polynomial_derivative",
    "polynomial_evaluate",
    "polynomial_fit",
    "polynomial_integral",
    "polynomial_multiply",
    "polynomial_negate",
    "polynomial_pow",
    "polynomial_pow_fft",
    "polynomial_subtract",
    "polynomial_vandermonde",
    "quadruple_polynomial",
    "rational_polynomial",
]
