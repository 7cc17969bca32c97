import operator

import torch

from torchpolynomial._exceptions import ArgumentError
from torchpolynomial.transform import next_power_of_two

from .._polynomial._polynomial_pow_fft import _pointwise_power


def tensor_polynomial_pow_fft(p, n: int):
    """Raise a tensor polynomial to a power via real FFTs.

    Same algorithm as :func:`polynomial_pow_fft`, vectorised: the real
    coefficients go through ``rfft``/``irfft`` in float64, so float32
    polynomials do not lose precision inside the transform.

    Parameters
    ----------
    p : TensorPolynomial
        Base polynomial.
    n : int
        Non-negative integer exponent.

    Returns
    -------
    TensorPolynomial
        p raised to power n, of size ``1 + n * deg p``.

    Raises
    ------
    ArgumentError
        If n is negative.
    """
    n = operator.index(n)

    if n < 0:
        raise ArgumentError(f"Exponent must be non-negative, got {n}")

    degree = p.degree()
    new_size = 1 + n * degree
    n_fft = next_power_of_two(max(new_size, degree + 1))

    coeffs = p._coefficients.tensor[: degree + 1].to(torch.float64)

    spectrum = torch.fft.rfft(coeffs, n=n_fft)
    result = torch.fft.irfft(_pointwise_power(spectrum, n), n=n_fft)

    return p._new(result[:new_size].to(p.dtype))
