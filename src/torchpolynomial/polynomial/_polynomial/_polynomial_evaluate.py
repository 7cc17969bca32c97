from typing import Any

from ._polynomial import Polynomial


def polynomial_evaluate(p: Polynomial, x: Any) -> Any:
    """Evaluate polynomial at a point using Horner's method.

    Parameters
    ----------
    p : Polynomial
        Polynomial to evaluate.
    x : Any
        Evaluation point, cast into the polynomial's domain.

    Returns
    -------
    Any
        p(x) in the polynomial's domain.

    Examples
    --------
    >>> p = rational_polynomial([3, 2, 1])  # 3 + 2x + x^2
    >>> polynomial_evaluate(p, 2)
    Fraction(11, 1)
    """
    domain = p.domain
    x = domain.cast(x)

    power = p.degree()
    result = p.get(power)
    while power > 0:
        power -= 1
        result = domain.add(p.get(power), domain.multiply(x, result))
    return result
