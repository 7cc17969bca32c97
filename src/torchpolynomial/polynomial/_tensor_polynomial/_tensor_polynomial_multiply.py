import torch

from .._polynomial import check_same_domain


def tensor_polynomial_multiply(p, q):
    """Multiply two tensor polynomials.

    The full convolution of the coefficients is a ``conv1d``
    cross-correlation with the flipped kernel, padded by ``deg q`` on both
    sides.

    Parameters
    ----------
    p, q : TensorPolynomial
        Polynomials to multiply, same class and dtype.

    Returns
    -------
    TensorPolynomial
        Product p * q, of size ``1 + deg p + deg q``.

    Examples
    --------
    >>> p = float64_polynomial([1.0, 2.0])  # 1 + 2x
    >>> q = float64_polynomial([3.0, 4.0])  # 3 + 4x
    >>> tensor_polynomial_multiply(p, q).coeffs  # 3 + 10x + 8x^2
    tensor([ 3., 10.,  8.], dtype=torch.float64)
    """
    check_same_domain(p, q)

    p_degree = p.degree()
    q_degree = q.degree()

    signal = p._coefficients.tensor[: p_degree + 1].reshape(1, 1, -1)
    kernel = q._coefficients.tensor[: q_degree + 1].flip(0).reshape(1, 1, -1)

    result = torch.nn.functional.conv1d(signal, kernel, padding=q_degree)

    return p._new(result.reshape(-1))
