"""Tests for integer powers, direct and FFT-based."""

import warnings
from decimal import Decimal
from fractions import Fraction

import pytest
import torch

from torchpolynomial.polynomial import (
    FFT_POWER_THRESHOLD,
    ArgumentError,
    PrecisionWarning,
    decimal_polynomial,
    float32_polynomial,
    float64_polynomial,
    polynomial_multiply,
    polynomial_pow,
    polynomial_pow_fft,
    quadruple_polynomial,
    rational_polynomial,
)


def _repeated_product(p, n):
    result = p.one()
    for _ in range(n):
        result = polynomial_multiply(result, p)
    return result


@pytest.mark.filterwarnings("ignore::torchpolynomial.PrecisionWarning")
class TestPolynomialPow:
    """Powers agree with repeated multiplication on every domain."""

    def test_threshold(self):
        assert FFT_POWER_THRESHOLD == 5

    @pytest.mark.parametrize("n", [0, 1, 2, 3, 4, 5, 6, 7])
    def test_matches_repeated_product(self, make, as_floats, n):
        p = make([1, -1, 2])
        result = p.power(n)
        expected = _repeated_product(p, n)

        assert result.size() == expected.size()
        assert as_floats(result) == pytest.approx(as_floats(expected), abs=1e-9)

    def test_zero_power_is_one(self, make, as_floats):
        assert as_floats(make([2, 3]).power(0)) == [1.0]

    def test_first_power_is_same_instance(self, make):
        p = make([2, 3])
        assert p.power(1) is p

    def test_operator(self, make, as_floats):
        """(1 + x)^2 = 1 + 2x + x^2."""
        assert as_floats(make([1, 1]) ** 2) == [1.0, 2.0, 1.0]

    def test_cube(self, make, as_floats):
        """(1 + x)^3 = 1 + 3x + 3x^2 + x^3."""
        assert as_floats(polynomial_pow(make([1, 1]), 3)) == [1.0, 3.0, 3.0, 1.0]

    def test_negative_raises(self, make):
        with pytest.raises(ArgumentError):
            make([1, 1]).power(-1)

    def test_non_integer_raises(self, make):
        with pytest.raises(TypeError):
            make([1, 1]).power(2.5)

    def test_fft_size(self, make):
        """FFT result has 1 + n * deg p coefficients."""
        assert make([1, 0, 2, 0]).power(6).size() == 13

    def test_raised_threshold_multiplies(self, as_floats):
        p = rational_polynomial([1, 1])
        with warnings.catch_warnings():
            warnings.simplefilter("error", PrecisionWarning)
            result = polynomial_pow(p, 6, fft_threshold=10)
        assert as_floats(result) == [1.0, 6.0, 15.0, 20.0, 15.0, 6.0, 1.0]

    @pytest.mark.parametrize("n", [0, 1, 2, 5])
    def test_fft_low_powers(self, make, as_floats, n):
        """The FFT path itself is valid for any non-negative exponent."""
        p = make([1, 2, 1])
        expected = _repeated_product(p, n)
        result = polynomial_pow_fft(p, n)
        assert as_floats(result) == pytest.approx(as_floats(expected), abs=1e-9)


class TestPowFFTPrecision:
    """Precision trade of the FFT path."""

    def test_exact_domain_warns(self):
        p = rational_polynomial([1, 1])
        with pytest.warns(PrecisionWarning, match="FFT"):
            p.power(5)

    def test_exact_domain_direct_path_is_silent(self):
        p = rational_polynomial([1, 1])
        with warnings.catch_warnings():
            warnings.simplefilter("error", PrecisionWarning)
            result = p.power(4)
        assert result.coefficients() == [1, 4, 6, 4, 1]

    def test_quadruple_domain_warns(self):
        """113-bit coefficients come back at double precision."""
        p = quadruple_polynomial([Fraction(1, 3), Fraction(1, 7)])
        with pytest.warns(PrecisionWarning, match="double precision"):
            result = p.power(5)
        direct = polynomial_pow(p, 5, fft_threshold=6)
        assert result.size() == direct.size()
        for a, b in zip(result, direct):
            assert abs(a - b) < 1e-12

    def test_decimal_domain_warns(self):
        p = decimal_polynomial(["0.1", "0.3"])
        with pytest.warns(PrecisionWarning, match="FFT"):
            result = p.power(5)
        assert abs(result[0] - Decimal("0.00001")) < Decimal("1e-15")

    def test_decimal_direct_path_stays_exact(self):
        p = decimal_polynomial(["0.1", "0.3"])
        with warnings.catch_warnings():
            warnings.simplefilter("error", PrecisionWarning)
            result = polynomial_pow(p, 5, fft_threshold=6)
        assert result[0] == Decimal("0.00001")

    def test_machine_domain_is_silent(self):
        p = float64_polynomial([1.0, 1.0])
        with warnings.catch_warnings():
            warnings.simplefilter("error", PrecisionWarning)
            p.power(8)

    def test_rational_rounds_back_to_fractions(self):
        """Small binomial coefficients survive the round trip exactly."""
        p = rational_polynomial([Fraction(1, 2), Fraction(1, 2)])
        with pytest.warns(PrecisionWarning):
            result = p.power(5)
        assert result.coefficients() == [
            Fraction(c, 32) for c in [1, 5, 10, 10, 5, 1]
        ]
        assert all(isinstance(c, Fraction) for c in result)

    def test_float32_transform_runs_in_float64(self):
        """Float32 input keeps its dtype but is not limited to float32 round-off."""
        p = float32_polynomial([1.0, 1.0])
        result = p.power(10)
        assert result.dtype == torch.float32
        expected = torch.tensor(
            [1, 10, 45, 120, 210, 252, 210, 120, 45, 10, 1], dtype=torch.float32
        )
        torch.testing.assert_close(result.coeffs, expected)

    def test_high_degree_matches_direct(self):
        torch.manual_seed(0)
        p = float64_polynomial(torch.randn(20, dtype=torch.float64))
        torch.testing.assert_close(
            p.power(6).coeffs,
            _repeated_product(p, 6).coeffs,
            rtol=1e-8,
            atol=1e-8,
        )
