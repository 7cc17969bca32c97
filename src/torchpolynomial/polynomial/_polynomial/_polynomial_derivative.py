from ._polynomial import Polynomial


def polynomial_derivative(p: Polynomial) -> Polynomial:
    """Compute derivative of polynomial.

    Term ``i`` of the derivative is ``(i + 1) * c[i + 1]``, computed by the
    polynomial's ``_derivative_term`` hook in domain arithmetic.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.

    Returns
    -------
    Polynomial
        Derivative dp/dx, of size ``max(1, size - 1)``. Constant polynomial
        returns [0].
    """
    result = p._new(max(1, p.size() - 1))
    store = result._coefficients

    for power in range(p.size() - 1):
        store.set(power, p._derivative_term(power))

    return result
