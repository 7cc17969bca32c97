"""Test fixtures for polynomial tests."""

from decimal import Decimal
from fractions import Fraction

import pytest

from torchpolynomial.polynomial import (
    complex_polynomial,
    decimal_polynomial,
    float32_polynomial,
    float64_polynomial,
    quadruple_polynomial,
    rational_polynomial,
)


def _float64(coeffs):
    return float64_polynomial([float(c) for c in coeffs])


def _float32(coeffs):
    return float32_polynomial([float(c) for c in coeffs])


def _complex(coeffs):
    return complex_polynomial([complex(c) for c in coeffs])


def _decimal(coeffs):
    return decimal_polynomial([Decimal(c) for c in coeffs])


def _rational(coeffs):
    return rational_polynomial([Fraction(c) for c in coeffs])


def _quadruple(coeffs):
    return quadruple_polynomial(coeffs)


FACTORIES = {
    "float64": _float64,
    "float32": _float32,
    "complex": _complex,
    "decimal": _decimal,
    "rational": _rational,
    "quadruple": _quadruple,
}


@pytest.fixture(params=sorted(FACTORIES))
def make(request):
    """Factory building a polynomial from integer coefficients, per domain."""
    return FACTORIES[request.param]


def _as_floats(values):
    """Convert domain values to Python floats (real part for complex)."""
    return [complex(v).real for v in values]


@pytest.fixture
def as_floats():
    """Converter from domain values to Python floats."""
    return _as_floats
