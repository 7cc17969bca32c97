from abc import ABC, abstractmethod
from typing import Any, Iterator, List, Optional, Sequence, Union

from torch import Tensor

from torchpolynomial._exceptions import ArgumentError
from torchpolynomial._polynomial_error import PolynomialError
from torchpolynomial.array import DenseArray
from torchpolynomial.context import NumberContext
from torchpolynomial.scalar import CoefficientDomain


class Polynomial(ABC):
    """Polynomial in power basis with ascending coefficients.

    Represents p(x) = c[0] + c[1]*x + c[2]*x^2 + ... over one coefficient
    domain. Concrete subclasses bind ``domain`` and supply the derivative
    and primitive term hooks.

    A polynomial owns its coefficient store and lazily builds, then caches,
    its derivative and primitive. Every mutation drops both caches. The
    cached polynomials own their own stores.

    Instances are not synchronised: a polynomial belongs to one thread of
    control at a time.

    Parameters
    ----------
    coefficients : int, Sequence, Tensor or Polynomial
        Either the number of coefficients (``degree + 1``, all zero) or the
        coefficient values in ascending order, cast into the domain.
    domain : CoefficientDomain, optional
        Overrides the class's default domain.

    Raises
    ------
    PolynomialError
        If there would be no coefficient at all.

    Operator overloading:
        p + q    # p.add(q)
        p - q    # p.subtract(q)
        p * q    # p.multiply(q)
        -p       # p.negate()
        p ** k   # p.power(k)
        p(x)     # p.evaluate(x)
        p[i]     # p.get(i)
    """

    domain: Optional[CoefficientDomain] = None

    def __init__(
        self,
        coefficients: Union[int, Sequence[Any], Tensor, "Polynomial"],
        domain: Optional[CoefficientDomain] = None,
    ):
        if domain is not None:
            self.domain = domain
        if self.domain is None:
            raise TypeError(f"{type(self).__name__} has no coefficient domain")

        if isinstance(coefficients, Polynomial):
            coefficients = coefficients.coefficients()

        if isinstance(coefficients, int):
            size = coefficients
        elif isinstance(coefficients, Tensor):
            size = coefficients.numel()
        else:
            size = len(coefficients)

        if size < 1:
            raise PolynomialError("Polynomial must have at least one coefficient")

        self._coefficients: DenseArray = self.domain.array(coefficients)
        self._derivative: Optional["Polynomial"] = None
        self._primitive: Optional["Polynomial"] = None

    def _new(self, data: Union[int, Sequence[Any], Tensor]) -> "Polynomial":
        return type(self)(data, domain=self.domain)

    def _invalidate(self) -> None:
        self._derivative = None
        self._primitive = None

    # Coefficient access

    def size(self) -> int:
        """Number of coefficients, ``degree + 1`` before trimming."""
        return self._coefficients.size()

    def get(self, power: int) -> Any:
        return self._coefficients.get(power)

    def set(self, power: int, value: Any) -> None:
        self._coefficients.set(power, self.domain.cast(value))
        self._invalidate()

    def add_to(self, power: int, value: Any) -> None:
        """Accumulate ``value`` into the coefficient of ``x**power``."""
        current = self._coefficients.get(power)
        self._coefficients.set(
            power, self.domain.add(current, self.domain.cast(value))
        )
        self._invalidate()

    def set_coefficients(
        self, values: Union[Sequence[Any], Tensor, "Polynomial"]
    ) -> None:
        """Overwrite the leading coefficients with ``values``.

        Raises
        ------
        ArgumentError
            If ``values`` holds more coefficients than this polynomial.
        """
        if isinstance(values, Polynomial):
            values = values.coefficients()
        elif isinstance(values, Tensor):
            values = values.reshape(-1).tolist()

        if len(values) > self.size():
            raise ArgumentError(
                f"Cannot set {len(values)} coefficients on a polynomial "
                f"of size {self.size()}"
            )

        self._coefficients.fill_matching(
            [self.domain.cast(value) for value in values]
        )
        self._invalidate()

    def coefficients(self) -> List[Any]:
        return self._coefficients.to_list()

    def copy(self) -> "Polynomial":
        return self._new(self.coefficients())

    def one(self) -> "Polynomial":
        """The multiplicative identity p(x) = 1 in this domain."""
        identity = self._new(1)
        identity._coefficients.set(0, self.domain.one())
        return identity

    # Domain hooks

    @abstractmethod
    def _derivative_term(self, power: int) -> Any:
        """Coefficient of ``x**power`` in the derivative."""

    @abstractmethod
    def _primitive_term(self, power: int) -> Any:
        """Coefficient of ``x**power`` in the primitive."""

    # Algebra

    def degree(self, accuracy: Optional[NumberContext] = None) -> int:
        from ._polynomial_degree import polynomial_degree

        return polynomial_degree(self, accuracy)

    def evaluate(self, x: Any) -> Any:
        from ._polynomial_evaluate import polynomial_evaluate

        return polynomial_evaluate(self, x)

    def add(self, other: "Polynomial") -> "Polynomial":
        from ._polynomial_add import polynomial_add

        return polynomial_add(self, other)

    def subtract(self, other: "Polynomial") -> "Polynomial":
        from ._polynomial_subtract import polynomial_subtract

        return polynomial_subtract(self, other)

    def multiply(self, other: "Polynomial") -> "Polynomial":
        from ._polynomial_multiply import polynomial_multiply

        return polynomial_multiply(self, other)

    def negate(self) -> "Polynomial":
        from ._polynomial_negate import polynomial_negate

        return polynomial_negate(self)

    def power(self, n: int) -> "Polynomial":
        """Raise to a non-negative integer power.

        ``power(1)`` returns this very instance; copy it before mutating the
        result if the original must stay untouched.
        """
        from ._polynomial_pow import polynomial_pow

        return polynomial_pow(self, n)

    def _power_fft(self, n: int) -> "Polynomial":
        from ._polynomial_pow_fft import polynomial_pow_fft

        return polynomial_pow_fft(self, n)

    # Calculus

    def _build_derivative(self) -> "Polynomial":
        from ._polynomial_derivative import polynomial_derivative

        return polynomial_derivative(self)

    def _build_primitive(self) -> "Polynomial":
        from ._polynomial_antiderivative import polynomial_antiderivative

        return polynomial_antiderivative(self)

    def differentiate(self) -> "Polynomial":
        """Derivative, of size ``max(1, size - 1)``. Cached until mutation."""
        if self._derivative is None:
            self._derivative = self._build_derivative()
        return self._derivative

    def integrate_indefinite(self) -> "Polynomial":
        """Primitive with zero constant term, of size ``size + 1``. Cached."""
        if self._primitive is None:
            self._primitive = self._build_primitive()
        return self._primitive

    def integrate(self, lower: Any, upper: Any) -> Any:
        from ._polynomial_integral import polynomial_integral

        return polynomial_integral(self, lower, upper)

    def estimate(self, x: Sequence[Any], y: Sequence[Any]) -> "Polynomial":
        """Least-squares fit of the coefficients to ``(x, y)``, in place."""
        from ._polynomial_fit import polynomial_fit

        return polynomial_fit(self, x, y)

    # Python protocol

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[Any]:
        return iter(self.coefficients())

    def __getitem__(self, power: int) -> Any:
        return self.get(power)

    def __setitem__(self, power: int, value: Any) -> None:
        self.set(power, value)

    def __call__(self, x: Any) -> Any:
        return self.evaluate(x)

    def __add__(self, other: "Polynomial") -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "Polynomial") -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: "Polynomial") -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.multiply(other)

    def __neg__(self) -> "Polynomial":
        return self.negate()

    def __pow__(self, n: int) -> "Polynomial":
        return self.power(n)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.domain == other.domain
            and self.coefficients() == other.coefficients()
        )

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.coefficients()!r})"


def check_same_domain(p: Polynomial, q: Polynomial) -> None:
    """Raise ArgumentError unless ``p`` and ``q`` share class and domain."""
    if type(p) is not type(q) or p.domain != q.domain:
        raise ArgumentError(
            f"Cannot combine {type(p).__name__} over {p.domain} with "
            f"{type(q).__name__} over {q.domain}"
        )
