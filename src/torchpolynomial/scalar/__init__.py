"""Coefficient domains: the numeric types a polynomial can be built over.

Domains
-------
FLOAT64, FLOAT32
    Native machine floats, stored in tensors.
COMPLEX128
    Python complex numbers.
DECIMAL
    Arbitrary-precision decimals (34 significant digits by default; see
    :class:`DecimalDomain` for an exact variant).
RATIONAL
    Exact fractions.
QUADRUPLE
    113-bit binary floats via mpmath.
"""

from torchpolynomial.scalar._coefficient_domain import CoefficientDomain
from torchpolynomial.scalar._complex_domain import COMPLEX128, ComplexDomain
from torchpolynomial.scalar._decimal_domain import (
    DECIMAL,
    DECIMAL_PRECISION,
    DecimalDomain,
)
from torchpolynomial.scalar._float_domain import FLOAT32, FLOAT64, FloatDomain
from torchpolynomial.scalar._quadruple_domain import (
    QUADRUPLE,
    QUADRUPLE_PRECISION,
    QuadrupleDomain,
)
from torchpolynomial.scalar._rational_domain import (
    RATIONAL,
    RATIONAL_DENOMINATOR_LIMIT,
    RationalDomain,
)

__all__ = [
    "COMPLEX128",
    "CoefficientDomain",
    "ComplexDomain",
    "DECIMAL",
    "DECIMAL_PRECISION",
    "DecimalDomain",
    "FLOAT32",
    "FLOAT64",
    "FloatDomain",
    "QUADRUPLE",
    "QUADRUPLE_PRECISION",
    "QuadrupleDomain",
    "RATIONAL",
    "RATIONAL_DENOMINATOR_LIMIT",
    "RationalDomain",
]
