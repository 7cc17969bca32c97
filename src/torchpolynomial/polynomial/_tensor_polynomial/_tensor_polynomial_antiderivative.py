import torch


def tensor_polynomial_antiderivative(p):
    """Compute antiderivative of a tensor polynomial with zero constant.

    Integral of (a_0 + a_1*x + ... + a_n*x^n)
    = a_0*x + a_1*x^2/2 + a_2*x^3/3 + ... + a_n*x^(n+1)/(n+1)

    Returns
    -------
    TensorPolynomial
        Primitive, of size ``size + 1``.
    """
    coeffs = p._coefficients.tensor
    n = coeffs.shape[0]

    indices = torch.arange(1, n + 1, dtype=coeffs.dtype)
    return p._new(torch.cat([coeffs.new_zeros(1), coeffs / indices]))
