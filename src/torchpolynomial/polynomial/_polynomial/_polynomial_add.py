from ._polynomial import Polynomial, check_same_domain


def polynomial_add(p: Polynomial, q: Polynomial) -> Polynomial:
    """Add two polynomials.

    Accumulates both operands into a fresh zero polynomial of size
    ``1 + max(deg p, deg q)``; neither operand is modified.

    Parameters
    ----------
    p, q : Polynomial
        Polynomials to add, over the same domain.

    Returns
    -------
    Polynomial
        Sum p + q.
    """
    check_same_domain(p, q)

    domain = p.domain
    result = p._new(1 + max(p.degree(), q.degree()))
    store = result._coefficients

    for operand in (p, q):
        for power in range(min(operand.size(), store.size())):
            store.set(power, domain.add(store.get(power), operand.get(power)))

    return result
