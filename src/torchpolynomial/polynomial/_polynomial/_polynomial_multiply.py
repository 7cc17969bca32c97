from ._polynomial import Polynomial, check_same_domain


def polynomial_multiply(p: Polynomial, q: Polynomial) -> Polynomial:
    """Multiply two polynomials.

    Computes the full discrete convolution of the coefficients in
    O(deg p * deg q) domain multiplications. Result degree is
    deg(p) + deg(q).

    Parameters
    ----------
    p, q : Polynomial
        Polynomials to multiply, over the same domain.

    Returns
    -------
    Polynomial
        Product p * q.

    Examples
    --------
    >>> p = rational_polynomial([1, 2])  # 1 + 2x
    >>> q = rational_polynomial([3, 4])  # 3 + 4x
    >>> polynomial_multiply(p, q).coefficients()  # 3 + 10x + 8x^2
    [Fraction(3, 1), Fraction(10, 1), Fraction(8, 1)]
    """
    check_same_domain(p, q)

    domain = p.domain
    p_degree = p.degree()
    q_degree = q.degree()

    result = p._new(1 + p_degree + q_degree)
    store = result._coefficients

    for left in range(p_degree + 1):
        p_coefficient = p.get(left)
        for right in range(q_degree + 1):
            product = domain.multiply(p_coefficient, q.get(right))
            store.set(left + right, domain.add(store.get(left + right), product))

    return result
