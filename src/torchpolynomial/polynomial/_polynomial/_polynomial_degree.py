from typing import Optional

from torchpolynomial.context import NumberContext

from ._polynomial import Polynomial


def polynomial_degree(
    p: Polynomial,
    accuracy: Optional[NumberContext] = None,
) -> int:
    """Return the degree of a polynomial.

    Scans from the top coefficient down while the coefficient's magnitude
    is zero under ``accuracy``.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.
    accuracy : NumberContext, optional
        Tolerance deciding when a coefficient is zero. Defaults to the
        domain's ``default_accuracy``.

    Returns
    -------
    int
        Largest power with a non-zero coefficient, or 0 when every
        coefficient is zero.

    Examples
    --------
    >>> polynomial_degree(float64_polynomial([1.0, 2.0, 0.0, 0.0]))
    1
    """
    if accuracy is None:
        accuracy = p.domain.default_accuracy

    domain = p.domain
    power = p.size() - 1
    while power > 0 and accuracy.is_zero(domain.norm(p.get(power))):
        power -= 1
    return power
