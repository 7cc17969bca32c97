import torch


def tensor_polynomial_derivative(p):
    """Compute derivative of a tensor polynomial.

    d/dx (a_0 + a_1*x + a_2*x^2 + ... + a_n*x^n)
    = a_1 + 2*a_2*x + 3*a_3*x^2 + ... + n*a_n*x^(n-1)

    Returns
    -------
    TensorPolynomial
        Derivative, of size ``max(1, size - 1)``. Constant polynomial
        returns [0.0].
    """
    coeffs = p._coefficients.tensor
    n = coeffs.shape[0]

    if n <= 1:
        return p._new(1)

    indices = torch.arange(1, n, dtype=coeffs.dtype)
    return p._new(coeffs[1:] * indices)
