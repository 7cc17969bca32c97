"""FFT-based polynomial powers.

Repeated self-convolution of the coefficient sequence is pointwise
exponentiation of its discrete Fourier transform, so p^n costs one forward
transform, one inverse transform and O(N log n) pointwise products instead
of n - 1 polynomial multiplications.
"""

import operator
import warnings

import torch
from torch import Tensor

from torchpolynomial._exceptions import ArgumentError
from torchpolynomial._precision_warning import PrecisionWarning
from torchpolynomial.transform import DiscreteFourierTransform, next_power_of_two

from ._polynomial import Polynomial


def _pointwise_power(spectrum: Tensor, n: int) -> Tensor:
    # Binary exponentiation keeps the round-off to O(log n) products
    result = torch.ones_like(spectrum)
    base = spectrum
    while n > 0:
        if n & 1:
            result = result * base
        base = base * base
        n >>= 1
    return result


def polynomial_pow_fft(p: Polynomial, n: int) -> Polynomial:
    """Raise polynomial to a non-negative integer power via the FFT.

    Parameters
    ----------
    p : Polynomial
        Base polynomial.
    n : int
        Non-negative integer exponent.

    Returns
    -------
    Polynomial
        p raised to power n, of size ``1 + n * deg p``.

    Raises
    ------
    ArgumentError
        If n is negative.

    Warns
    -----
    PrecisionWarning
        If ``p`` is over a domain more precise than double, such as an
        exact or quadruple domain. The coefficients pass through a
        complex128 buffer and are cast back with the domain's
        ``from_complex``, trading exactness for speed.

    Notes
    -----
    The algorithm works by:

    1. Zero-padding the coefficients to N, the smallest power of two
       >= ``1 + n * deg p``
    2. Computing the forward transform
    3. Raising every transformed value to the n-th power
    4. Computing the inverse transform and keeping the first
       ``1 + n * deg p`` values

    Since N is at least the length of the linear convolution, the circular
    convolution computed in step 3 does not wrap around.
    """
    n = operator.index(n)

    if n < 0:
        raise ArgumentError(f"Exponent must be non-negative, got {n}")

    domain = p.domain
    degree = p.degree()
    new_size = 1 + n * degree

    if domain.exceeds_double:
        warnings.warn(
            f"Raising a {domain.name} polynomial to power {n} through the "
            f"FFT; coefficients are rounded to double precision.",
            PrecisionWarning,
            stacklevel=2,
        )

    transform = DiscreteFourierTransform(
        next_power_of_two(max(new_size, degree + 1))
    )
    spectrum = transform.transform(
        [domain.to_complex(p.get(power)) for power in range(degree + 1)]
    )
    values = transform.inverse(_pointwise_power(spectrum, n))[:new_size]

    return p._new([domain.from_complex(value) for value in values.tolist()])
