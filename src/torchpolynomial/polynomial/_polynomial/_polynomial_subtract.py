from ._polynomial import Polynomial, check_same_domain


def polynomial_subtract(p: Polynomial, q: Polynomial) -> Polynomial:
    """Subtract two polynomials.

    Parameters
    ----------
    p, q : Polynomial
        Polynomials over the same domain.

    Returns
    -------
    Polynomial
        Difference p - q, of size ``1 + max(deg p, deg q)``.
    """
    check_same_domain(p, q)

    return p.add(q.negate())
