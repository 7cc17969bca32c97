"""Tests for the coefficient domains."""

from decimal import Decimal
from fractions import Fraction

import mpmath
import pytest
import torch

from torchpolynomial import NumericError
from torchpolynomial.array import ObjectArray, TensorArray
from torchpolynomial.context import DEFAULT_ACCURACY, NumberContext
from torchpolynomial.linear_algebra.decomposition import (
    QuadrupleQRDecomposition,
    RationalQRDecomposition,
    TensorQRDecomposition,
)
from torchpolynomial.scalar import (
    COMPLEX128,
    DECIMAL,
    FLOAT32,
    FLOAT64,
    QUADRUPLE,
    RATIONAL,
    DecimalDomain,
    FloatDomain,
    QuadrupleDomain,
    RationalDomain,
)

ALL_DOMAINS = [FLOAT64, FLOAT32, COMPLEX128, DECIMAL, RATIONAL, QUADRUPLE]


class TestCoefficientDomain:
    """Field axioms shared by all domains."""

    @pytest.mark.parametrize("domain", ALL_DOMAINS, ids=lambda d: d.name)
    def test_identities(self, domain):
        a = domain.cast(3)
        assert domain.add(a, domain.zero()) == a
        assert domain.multiply(a, domain.one()) == a
        assert domain.add(a, domain.negate(a)) == domain.zero()

    @pytest.mark.parametrize("domain", ALL_DOMAINS, ids=lambda d: d.name)
    def test_arithmetic(self, domain):
        a, b = domain.cast(6), domain.cast(4)
        assert domain.subtract(a, b) == domain.cast(2)
        assert domain.multiply(a, b) == domain.cast(24)
        assert domain.divide(a, b) == domain.cast(1.5)

    @pytest.mark.parametrize("domain", ALL_DOMAINS, ids=lambda d: d.name)
    def test_norm_is_real_magnitude(self, domain):
        assert float(domain.norm(domain.cast(-2))) == 2.0

    @pytest.mark.parametrize("domain", ALL_DOMAINS, ids=lambda d: d.name)
    def test_complex_round_trip(self, domain):
        value = domain.cast(0.5)
        assert domain.from_complex(domain.to_complex(value)) == value

    @pytest.mark.parametrize("domain", ALL_DOMAINS, ids=lambda d: d.name)
    def test_cast_tensor_element(self, domain):
        assert domain.cast(torch.tensor(2.0)) == domain.cast(2)


class TestFloatDomain:
    def test_store(self):
        assert isinstance(FLOAT64.array(3), TensorArray)
        assert FLOAT32.array([1.0]).dtype == torch.float32

    def test_float32_cast_rounds(self):
        """Values are rounded through the storage dtype."""
        assert FLOAT32.cast(0.1) != 0.1
        assert FLOAT32.cast(0.1) == torch.tensor(0.1, dtype=torch.float32).item()

    def test_rejects_integer_dtype(self):
        with pytest.raises(TypeError):
            FloatDomain(torch.int64)

    def test_decomposition(self):
        solver = FLOAT32.decomposition()
        assert isinstance(solver, TensorQRDecomposition)
        assert solver.dtype == torch.float32

    def test_default_accuracy(self):
        assert FLOAT64.default_accuracy == DEFAULT_ACCURACY


class TestComplexDomain:
    def test_values(self):
        assert COMPLEX128.cast(2) == 2 + 0j
        assert COMPLEX128.norm(3 + 4j) == 5.0
        assert isinstance(COMPLEX128.array(2), ObjectArray)

    def test_decomposition(self):
        assert COMPLEX128.decomposition().dtype == torch.complex128


class TestRationalDomain:
    def test_exact(self):
        assert RATIONAL.exact
        assert RATIONAL.default_accuracy == NumberContext.exact()

    def test_float_cast_is_exact(self):
        assert RATIONAL.cast(0.5) == Fraction(1, 2)
        assert RATIONAL.cast(Decimal("0.1")) == Fraction(1, 10)

    def test_divide_by_zero_raises(self):
        with pytest.raises(NumericError):
            RATIONAL.divide(Fraction(1), Fraction(0))

    def test_from_complex_limits_denominator(self):
        assert RATIONAL.from_complex(complex(1 / 3 + 1e-15, 1e-16)) == Fraction(1, 3)

    def test_decomposition(self):
        assert isinstance(RATIONAL.decomposition(), RationalQRDecomposition)


class TestDecimalDomain:
    def test_rounds_to_context(self):
        third = DECIMAL.divide(Decimal(1), Decimal(3))
        assert third == Decimal("0." + "3" * 34)

    def test_does_not_touch_thread_context(self):
        import decimal

        before = decimal.getcontext().prec
        DecimalDomain(precision=5).divide(Decimal(1), Decimal(7))
        assert decimal.getcontext().prec == before

    def test_exact_non_terminating_raises(self):
        domain = DecimalDomain(exact=True)
        with pytest.raises(NumericError):
            domain.divide(Decimal(1), Decimal(3))

    def test_exact_terminating(self):
        domain = DecimalDomain(exact=True)
        assert domain.divide(Decimal(1), Decimal(8)) == Decimal("0.125")

    def test_divide_by_zero_raises(self):
        with pytest.raises(NumericError):
            DECIMAL.divide(Decimal(1), Decimal(0))

    def test_fraction_cast(self):
        assert DECIMAL.cast(Fraction(1, 4)) == Decimal("0.25")

    def test_string_cast(self):
        assert DECIMAL.cast("0.1") == Decimal("0.1")

    def test_default_accuracy(self):
        assert DECIMAL.default_accuracy == NumberContext.of(34)
        assert DecimalDomain(exact=True).default_accuracy == NumberContext.exact()

    def test_decomposition(self):
        assert isinstance(DECIMAL.decomposition(), RationalQRDecomposition)


class TestQuadrupleDomain:
    def test_precision(self):
        assert QUADRUPLE.precision == 113
        assert QuadrupleDomain(200).precision == 200

    def test_private_context(self):
        """Global mpmath precision is not changed."""
        before = mpmath.mp.prec
        QuadrupleDomain(300)
        assert mpmath.mp.prec == before

    def test_more_digits_than_double(self):
        third = QUADRUPLE.divide(QUADRUPLE.one(), QUADRUPLE.cast(3))
        assert abs(third - QUADRUPLE.cast(Fraction(1, 3))) == 0
        assert abs(third * 3 - 1) < mpmath.mpf(10) ** -32

    def test_rejects_imaginary(self):
        with pytest.raises(TypeError):
            QUADRUPLE.cast(1j)

    def test_decomposition(self):
        assert isinstance(QUADRUPLE.decomposition(), QuadrupleQRDecomposition)


class TestDomainEquality:
    """Domains compare by configuration, not identity."""

    @pytest.mark.parametrize(
        "build",
        [
            lambda: FloatDomain(torch.float32),
            lambda: DecimalDomain(exact=True),
            lambda: DecimalDomain(20),
            lambda: QuadrupleDomain(200),
            lambda: RationalDomain(1000),
        ],
    )
    def test_separately_built_domains_are_equal(self, build):
        assert build() == build()
        assert hash(build()) == hash(build())

    def test_defaults_equal_singletons(self):
        assert FloatDomain() == FLOAT64
        assert DecimalDomain() == DECIMAL
        assert QuadrupleDomain() == QUADRUPLE
        assert RationalDomain() == RATIONAL

    def test_configuration_distinguishes(self):
        assert DecimalDomain(exact=True) != DECIMAL
        assert DecimalDomain(20) != DECIMAL
        assert QuadrupleDomain(200) != QUADRUPLE
        assert RationalDomain(1000) != RATIONAL
        assert FLOAT32 != FLOAT64
        assert COMPLEX128 != FLOAT64


class TestExceedsDouble:
    """Which domains lose precision in a complex128 buffer."""

    def test_machine_domains(self):
        assert not FLOAT64.exceeds_double
        assert not FLOAT32.exceeds_double
        assert not COMPLEX128.exceeds_double

    def test_extended_domains(self):
        assert RATIONAL.exceeds_double
        assert DECIMAL.exceeds_double
        assert DecimalDomain(exact=True).exceeds_double
        assert QUADRUPLE.exceeds_double

    def test_low_precision_settings(self):
        assert not DecimalDomain(10).exceeds_double
        assert not QuadrupleDomain(53).exceeds_double
