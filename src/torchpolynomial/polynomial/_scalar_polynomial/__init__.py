from ._complex_polynomial import ComplexPolynomial, complex_polynomial
from ._decimal_polynomial import DecimalPolynomial, decimal_polynomial
from ._quadruple_polynomial import QuadruplePolynomial, quadruple_polynomial
from ._rational_polynomial import RationalPolynomial, rational_polynomial
from ._scalar_polynomial import ScalarPolynomial

__all__ = [
    "ComplexPolynomial",
    "DecimalPolynomial",
    "QuadruplePolynomial",
    "RationalPolynomial",
    "ScalarPolynomial",
    "complex_polynomial",
    "decimal_polynomial",
    "quadruple_polynomial",
    "rational_polynomial",
]
