"""Benchmark polynomial powers.

Compares repeated multiplication (O(k n^2)) against the FFT path
(O(N log N)) across polynomial degrees and coefficient domains.
"""

import time

import torch

from torchpolynomial.polynomial import (
    float64_polynomial,
    polynomial_multiply,
    polynomial_pow,
    quadruple_polynomial,
    rational_polynomial,
)


def _power_direct(p, n):
    result = p
    for _ in range(n - 1):
        result = polynomial_multiply(result, p)
    return result


def benchmark_power(
    degree: int,
    exponent: int = 8,
    n_iterations: int = 20,
    domain: str = "float64",
    method: str = "fft",
) -> float:
    """Benchmark raising a random polynomial to a power.

    Parameters
    ----------
    degree : int
        Degree of the base polynomial.
    exponent : int
        Power to raise to.
    n_iterations : int
        Number of iterations for timing.
    domain : str
        'float64', 'rational' or 'quadruple'.
    method : str
        'direct' or 'fft' (the FFT path of ``polynomial_pow``).

    Returns
    -------
    float
        Average time per power in milliseconds.
    """
    coeffs = torch.randint(-9, 10, (degree + 1,)).tolist()
    coeffs[-1] = 1

    if domain == "float64":
        p = float64_polynomial([float(c) for c in coeffs])
    elif domain == "rational":
        p = rational_polynomial(coeffs)
    elif domain == "quadruple":
        p = quadruple_polynomial(coeffs)
    else:
        raise ValueError(f"Unknown domain: {domain}")

    if method == "direct":
        power_fn = _power_direct
    elif method == "fft":
        power_fn = polynomial_pow
    else:
        raise ValueError(f"Unknown method: {method}")

    # Warmup
    for _ in range(3):
        _ = power_fn(p, exponent)

    start = time.perf_counter()
    for _ in range(n_iterations):
        _ = power_fn(p, exponent)

    elapsed = time.perf_counter() - start
    return elapsed / n_iterations * 1000  # ms


def main():
    """Run power benchmarks across degrees and domains."""
    import warnings

    from torchpolynomial import PrecisionWarning

    warnings.simplefilter("ignore", PrecisionWarning)

    degrees = [4, 8, 16, 32, 64, 128]

    for domain in ("float64", "rational", "quadruple"):
        print(f"Polynomial Power Benchmark ({domain}, exponent 8)")
        print("=" * 50)
        print(f"{'Degree':>8} {'Direct (ms)':>14} {'FFT (ms)':>14}")
        print("-" * 50)

        for degree in degrees:
            ms_direct = benchmark_power(degree, domain=domain, method="direct")
            ms_fft = benchmark_power(degree, domain=domain, method="fft")
            print(f"{degree:>8} {ms_direct:>14.4f} {ms_fft:>14.4f}")

        print()

    print("Notes:")
    print("- Direct multiplies exponent - 1 times in domain arithmetic")
    print("- FFT transforms once, exponentiates pointwise, inverts once")
    print("- Rational FFT output is rounded back to bounded-denominator fractions")


if __name__ == "__main__":
    main()
