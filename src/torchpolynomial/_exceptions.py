"""Exception hierarchy for polynomial operations."""

from torchpolynomial._polynomial_error import PolynomialError


class ArgumentError(PolynomialError, ValueError):
    """Malformed input.

    Raised for negative exponents, bulk coefficient updates larger than the
    destination, indices outside the coefficient range, arithmetic between
    polynomials over different coefficient domains and transform sizes that
    are not powers of two.
    """

    pass


class NumericError(PolynomialError, ArithmeticError):
    """Arithmetic failure inside a coefficient domain.

    Raised when an exact domain cannot represent a result, e.g. a
    non-terminating decimal quotient, a rational division by zero or a
    rank-deficient exact least-squares system.
    """

    pass


class DegreeError(PolynomialError):
    """Raised when degree is invalid for operation.

    Fitting a polynomial with more coefficients than usable samples is
    under-determined and raises this error.
    """

    pass
