from typing import Any

from ._polynomial import Polynomial


def polynomial_integral(p: Polynomial, lower: Any, upper: Any) -> Any:
    """Compute definite integral.

    Evaluates the cached primitive at both bounds and subtracts.

    Parameters
    ----------
    p : Polynomial
        Polynomial to integrate.
    lower, upper : Any
        Integration bounds, cast into the polynomial's domain.

    Returns
    -------
    Any
        Definite integral of p from ``lower`` to ``upper``.

    Examples
    --------
    >>> p = rational_polynomial([1, 0, 1])  # 1 + x^2
    >>> polynomial_integral(p, 0, 1)
    Fraction(4, 3)
    """
    primitive = p.integrate_indefinite()

    return p.domain.subtract(primitive.evaluate(upper), primitive.evaluate(lower))
