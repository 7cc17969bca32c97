from typing import Any, Sequence

from torchpolynomial._exceptions import DegreeError

from ._polynomial import Polynomial
from ._polynomial_vandermonde import polynomial_vandermonde


def polynomial_fit(
    p: Polynomial,
    x: Sequence[Any],
    y: Sequence[Any],
) -> Polynomial:
    """Fit the coefficients of ``p`` to data using least squares.

    Finds the coefficients minimising sum_i (p(x[i]) - y[i])^2 and writes
    them into ``p``. The number of coefficients fitted is ``p.size()``.

    Parameters
    ----------
    p : Polynomial
        Polynomial whose coefficients are overwritten.
    x : Sequence or Tensor
        Sample x-coordinates.
    y : Sequence or Tensor
        Sample y-values. Only the first ``min(len(x), len(y))`` samples of
        either sequence are used.

    Returns
    -------
    Polynomial
        ``p`` itself, after the update.

    Raises
    ------
    DegreeError
        If fewer samples than coefficients are available (under-determined
        system).
    NumericError
        If the design matrix is rank deficient in an exact domain.

    Examples
    --------
    >>> p = float64_polynomial([0.0, 0.0])
    >>> polynomial_fit(p, [0.0, 1.0, 2.0, 3.0], [1.0, 3.0, 5.0, 7.0])
    Float64Polynomial([1.0, 2.0])
    """
    domain = p.domain
    n = min(len(x), len(y))

    if n < p.size():
        raise DegreeError(
            f"Cannot fit {p.size()} coefficients to {n} samples"
        )

    design = polynomial_vandermonde(x[:n], p.size(), domain)
    rhs = [domain.cast(value) for value in y[:n]]

    solver = domain.decomposition()
    solver.decompose(design)
    p.set_coefficients(solver.get_solution(rhs))

    return p
