import torch

from .._polynomial import check_same_domain


def tensor_polynomial_add(p, q):
    """Add two tensor polynomials.

    Parameters
    ----------
    p, q : TensorPolynomial
        Polynomials to add, same class and dtype.

    Returns
    -------
    TensorPolynomial
        Sum p + q, of size ``1 + max(deg p, deg q)``.
    """
    check_same_domain(p, q)

    size = 1 + max(p.degree(), q.degree())
    result = torch.zeros(size, dtype=p.dtype)

    for operand in (p, q):
        values = operand._coefficients.tensor[:size]
        result[: values.shape[0]] += values

    return p._new(result)
