from ._polynomial import Polynomial


def polynomial_negate(p: Polynomial) -> Polynomial:
    """Negate polynomial.

    Parameters
    ----------
    p : Polynomial
        Polynomial to negate.

    Returns
    -------
    Polynomial
        Negated polynomial -p, of size ``1 + deg p``.
    """
    domain = p.domain
    result = p._new(1 + p.degree())
    store = result._coefficients

    for power in range(store.size()):
        store.set(power, domain.negate(p.get(power)))

    return result
