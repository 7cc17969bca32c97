def tensor_polynomial_negate(p):
    """Negate a tensor polynomial, keeping ``1 + deg p`` coefficients."""
    return p._new(-p._coefficients.tensor[: 1 + p.degree()])
