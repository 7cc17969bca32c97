from ._polynomial import Polynomial, check_same_domain
from ._polynomial_add import polynomial_add
from ._polynomial_antiderivative import polynomial_antiderivative
from ._polynomial_degree import polynomial_degree
from ._polynomial_derivative import polynomial_derivative
from ._polynomial_evaluate import polynomial_evaluate
from ._polynomial_fit import polynomial_fit
from ._polynomial_integral import polynomial_integral
from ._polynomial_multiply import polynomial_multiply
from ._polynomial_negate import polynomial_negate
from ._polynomial_pow import FFT_POWER_THRESHOLD, polynomial_pow
from ._polynomial_pow_fft import polynomial_pow_fft
from ._polynomial_subtract import polynomial_subtract
from ._polynomial_vandermonde import polynomial_vandermonde

__all__ = [
    "FFT_POWER_THRESHOLD",
    "Polynomial",
    "check_same_domain",
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
]
