import logging
import math
import numbers

import numpy as np

from . import config
from .errors import InvalidRootError, PoleError
from .scalar import (
    PI, TAU, cos, cosh, divide, exp, is_principal, log, normalize_argument,
    polar_to_rect, power, rect_to_polar, sin, sinh,
)

logger = logging.getLogger(__name__)

# past this |part|, tan/tanh equal their limit forms in float64 (the quotients overflow later)
_SATURATION = 20.0


# ---------- operand coercion ----------
def _is_pair(value) -> bool:
    if isinstance(value, (tuple, list)):
        return len(value) == 2
    return isinstance(value, np.ndarray) and value.ndim == 1 and len(value) == 2


def _coerce(value, cls):
    """
    Return `value` as an instance of `cls`, or None when it is not usable as
    a complex operand.

    A bare real number is a purely real value, a builtin/numpy complex keeps
    its parts, and a 2-item sequence is assigned to `cls`'s own two fields.
    """
    if isinstance(value, cls):
        return value
    if isinstance(value, _ComplexValue):
        return value.to_polar() if cls is PolarComplex else value.to_rectangular()
    if _is_pair(value):
        a, b = value
        if not (isinstance(a, numbers.Real) and isinstance(b, numbers.Real)):
            return None
        return cls(a, b)
    if isinstance(value, numbers.Real):
        z = RectangularComplex(value, 0.0)
    elif isinstance(value, numbers.Complex):
        z = RectangularComplex(value.real, value.imag)
    else:
        return None
    return z if cls is RectangularComplex else z.to_polar()


def _check_root_count(n) -> None:
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise TypeError(f"root count must be an integer, not {type(n).__name__}")
    if n < 1:
        logger.debug("rejected root(%r)", n)
        raise InvalidRootError(f"cannot extract {n} roots, need at least one")


class _ComplexValue:
    """Behaviour shared by both representations; everything here goes through
    the derived rectangular coordinates."""

    __slots__ = ()

    # let numpy scalars on the left defer to our reflected operators
    __array_ufunc__ = None

    @classmethod
    def convert(cls, value):
        """Build an instance from either representation, a number, or a pair."""
        z = _coerce(value, cls)
        if z is None:
            raise TypeError(f"cannot convert {type(value).__name__} to {cls.__name__}")
        return z

    @classmethod
    def _from_rect(cls, real: float, imag: float):
        raise NotImplementedError

    # ---------- additive operators (always rectangular) ----------
    def __add__(self, other):
        other = _coerce(other, RectangularComplex)
        if other is None:
            return NotImplemented
        return self._from_rect(self.real + other.real, self.imag + other.imag)

    def __sub__(self, other):
        other = _coerce(other, RectangularComplex)
        if other is None:
            return NotImplemented
        return self._from_rect(self.real - other.real, self.imag - other.imag)

    # ---------- reflected operators: plain value on the left ----------
    def _reflect(self, other):
        return _coerce(other, type(self))

    def __radd__(self, other):
        other = self._reflect(other)
        return NotImplemented if other is None else other + self

    def __rsub__(self, other):
        other = self._reflect(other)
        return NotImplemented if other is None else other - self

    def __rmul__(self, other):
        other = self._reflect(other)
        return NotImplemented if other is None else other * self

    def __rtruediv__(self, other):
        other = self._reflect(other)
        return NotImplemented if other is None else other / self

    def __pow__(self, exponent):
        if isinstance(exponent, numbers.Integral) and not isinstance(exponent, bool):
            return self.powi(exponent)
        if isinstance(exponent, numbers.Real):
            return self.powf(exponent)
        if _coerce(exponent, RectangularComplex) is None:
            return NotImplemented
        return self.powc(exponent)

    def __rpow__(self, base):
        if isinstance(base, numbers.Real):
            return self.expf(base)
        base = self._reflect(base)
        return NotImplemented if base is None else base.powc(self)

    def __pos__(self):
        return type(self)(*self.as_tuple())

    def __bool__(self):
        return self.real != 0 or self.imag != 0

    def __complex__(self):
        return complex(self.real, self.imag)

    # ---------- comparison ----------
    def _comparable(self, other):
        # pairs mean this type's own fields; anything else is compared as (real, imag)
        return _coerce(other, type(self) if _is_pair(other) else RectangularComplex)

    def __eq__(self, other):
        other = self._comparable(other)
        if other is None:
            return NotImplemented
        return self.real == other.real and self.imag == other.imag

    def __hash__(self):
        return hash(complex(self.real, self.imag))

    def isclose(self, other, rel_tol: float = 0.0, abs_tol: float = None) -> bool:
        """Tolerant equality on the rectangular coordinates."""
        if abs_tol is None:
            abs_tol = config.ROUND_TRIP_TOLERANCE
        value = self._comparable(other)
        if value is None:
            raise TypeError(f"cannot compare {type(self).__name__} with {type(other).__name__}")
        other = value
        return (math.isclose(self.real, other.real, rel_tol=rel_tol, abs_tol=abs_tol)
                and math.isclose(self.imag, other.imag, rel_tol=rel_tol, abs_tol=abs_tol))


class RectangularComplex(_ComplexValue):
    """
    A complex number stored as real + imag·j.

    Constructors
    ------------
    RectangularComplex(a, b)                 -> a + b j
    RectangularComplex(a)                    -> a + 0 j
    RectangularComplex.from_polar(r, theta)  -> r·e^{jθ}
    RectangularComplex.convert(value)        -> from a number, a pair or a PolarComplex

    Binary operators take either representation (or a plain number) on the
    right and always answer with a RectangularComplex.
    """

    __slots__ = ("_real", "_imag")

    # ---------- construction ----------
    def __init__(self, real: float, imag: float = 0.0):
        self._real = float(real)
        self._imag = float(imag)

    @classmethod
    def from_polar(cls, module: float, argument: float) -> "RectangularComplex":
        return cls(*polar_to_rect(module, argument))

    @classmethod
    def _from_rect(cls, real: float, imag: float) -> "RectangularComplex":
        return cls(real, imag)

    # ---------- basic properties ----------
    @property
    def real(self) -> float:
        return self._real

    @property
    def imag(self) -> float:
        return self._imag

    @property
    def module(self) -> float:
        return rect_to_polar(self._real, self._imag)[0]

    @property
    def argument(self) -> float:
        """Principal argument in (-π, π]; 0.0 at the origin."""
        return rect_to_polar(self._real, self._imag)[1]

    def as_tuple(self) -> tuple:
        return self._real, self._imag

    def to_rectangular(self) -> "RectangularComplex":
        return self

    def to_polar(self) -> "PolarComplex":
        return PolarComplex(*rect_to_polar(self._real, self._imag))

    def conjugate(self) -> "RectangularComplex":
        return RectangularComplex(self._real, -self._imag)

    # ---------- multiplicative operators ----------
    def __mul__(self, other):
        other = _coerce(other, RectangularComplex)
        if other is None:
            return NotImplemented
        return RectangularComplex(self._real * other.real - self._imag * other.imag,
                                  self._real * other.imag + self._imag * other.real)

    def __truediv__(self, other):
        other = _coerce(other, RectangularComplex)
        if other is None:
            return NotImplemented
        denom = other.real * other.real + other.imag * other.imag
        return RectangularComplex(
            divide(self._real * other.real + self._imag * other.imag, denom),
            divide(self._imag * other.real - self._real * other.imag, denom),
        )

    def __neg__(self):
        return RectangularComplex(-self._real, -self._imag)

    def __abs__(self):
        return self.module

    # ---------- exponential & logarithm ----------
    def exp(self) -> "RectangularComplex":
        scale = exp(self._real)
        if self._imag == 0:
            # inf·sin(0) would be nan
            return RectangularComplex(scale, 0.0)
        return RectangularComplex(scale * cos(self._imag), scale * sin(self._imag))

    def ln(self) -> "RectangularComplex":
        """Principal natural logarithm: ln|z| + j·arg(z)."""
        module, argument = rect_to_polar(self._real, self._imag)
        return RectangularComplex(log(module), argument)

    def log(self, base) -> "RectangularComplex":
        return self.ln() / RectangularComplex.convert(base).ln()

    # ---------- powers & roots (via the polar closed forms) ----------
    def powi(self, n: int) -> "RectangularComplex":
        return self.to_polar().powi(n).to_rectangular()

    def powf(self, p: float) -> "RectangularComplex":
        return self.to_polar().powf(p).to_rectangular()

    def powc(self, exponent) -> "RectangularComplex":
        return self.to_polar().powc(exponent).to_rectangular()

    def expf(self, base: float) -> "RectangularComplex":
        return self.to_polar().expf(base).to_rectangular()

    def root(self, n: int) -> list:
        return [z.to_rectangular() for z in self.to_polar().root(n)]

    def sqrt(self) -> list:
        return self.root(2)

    # ---------- trigonometric ----------
    def cos(self) -> "RectangularComplex":
        x, y = self._real, self._imag
        return RectangularComplex(cos(x) * cosh(y), -sin(x) * sinh(y))

    def sin(self) -> "RectangularComplex":
        x, y = self._real, self._imag
        return RectangularComplex(sin(x) * cosh(y), cos(x) * sinh(y))

    def tan(self) -> "RectangularComplex":
        x, y = self._real, self._imag
        if abs(y) > _SATURATION:
            return RectangularComplex(4.0 * sin(x) * cos(x) * exp(-2.0 * abs(y)),
                                      math.copysign(1.0, y))
        x2, y2 = 2.0 * x, 2.0 * y
        # cos 2x + cosh 2y == 2·|cos z|²
        denom = cos(x2) + cosh(y2)
        if denom <= config.POLE_TOLERANCE:
            logger.debug("tan pole at %r", self)
            raise PoleError(f"tan is undefined at {self}: cos(z) is zero")
        return RectangularComplex(divide(sin(x2), denom), divide(sinh(y2), denom))

    # ---------- hyperbolic ----------
    def cosh(self) -> "RectangularComplex":
        x, y = self._real, self._imag
        return RectangularComplex(cosh(x) * cos(y), sinh(x) * sin(y))

    def sinh(self) -> "RectangularComplex":
        x, y = self._real, self._imag
        return RectangularComplex(sinh(x) * cos(y), cosh(x) * sin(y))

    def tanh(self) -> "RectangularComplex":
        x, y = self._real, self._imag
        if abs(x) > _SATURATION:
            return RectangularComplex(math.copysign(1.0, x),
                                      4.0 * sin(y) * cos(y) * exp(-2.0 * abs(x)))
        x2, y2 = 2.0 * x, 2.0 * y
        # cosh 2x + cos 2y == 2·|cosh z|²
        denom = cosh(x2) + cos(y2)
        if denom <= config.POLE_TOLERANCE:
            logger.debug("tanh pole at %r", self)
            raise PoleError(f"tanh is undefined at {self}: cosh(z) is zero")
        return RectangularComplex(divide(sinh(x2), denom), divide(sin(y2), denom))

    # readable REPL / print‑outs
    def __str__(self):
        sign = "-" if math.copysign(1.0, self._imag) < 0 else "+"
        return f"{self._real} {sign} {abs(self._imag)}j"

    def __repr__(self):
        return f"RectangularComplex({self._real!r}, {self._imag!r})"


class PolarComplex(_ComplexValue):
    """
    A complex number stored as module·e^{j·argument}, argument in radians.

    The fields are kept exactly as given: a negative module or an argument
    outside (-π, π] is not rewritten. Functions that depend on the principal
    branch (ln, log, powc, expf, root) derive it when needed; call
    `normalized()` to get the canonical fields explicitly.

    Binary operators take either representation (or a plain number) on the
    right and always answer with a PolarComplex.
    """

    __slots__ = ("_module", "_argument")

    # ---------- construction ----------
    def __init__(self, module: float, argument: float = 0.0):
        self._module = float(module)
        self._argument = float(argument)

    @classmethod
    def from_rectangular(cls, real: float, imag: float) -> "PolarComplex":
        return cls(*rect_to_polar(real, imag))

    @classmethod
    def _from_rect(cls, real: float, imag: float) -> "PolarComplex":
        return cls.from_rectangular(real, imag)

    # ---------- basic properties ----------
    @property
    def module(self) -> float:
        return self._module

    @property
    def argument(self) -> float:
        return self._argument

    @property
    def real(self) -> float:
        return polar_to_rect(self._module, self._argument)[0]

    @property
    def imag(self) -> float:
        return polar_to_rect(self._module, self._argument)[1]

    def as_tuple(self) -> tuple:
        return self._module, self._argument

    def to_rectangular(self) -> RectangularComplex:
        return RectangularComplex(*polar_to_rect(self._module, self._argument))

    def to_polar(self) -> "PolarComplex":
        return self

    def normalized(self) -> "PolarComplex":
        """Same point with module >= 0 and argument in (-π, π] (0.0 at the origin)."""
        module, argument = self._module, self._argument
        if module == 0:
            return PolarComplex(0.0, 0.0)
        if module < 0:
            module, argument = -module, argument + PI
        return PolarComplex(module, normalize_argument(argument))

    def _principal(self) -> tuple:
        if is_principal(self._module, self._argument):
            return self._module, self._argument
        return rect_to_polar(self.real, self.imag)

    def conjugate(self) -> "PolarComplex":
        return PolarComplex(self._module, -self._argument)

    # ---------- multiplicative operators (closed form) ----------
    def __mul__(self, other):
        other = _coerce(other, PolarComplex)
        if other is None:
            return NotImplemented
        return PolarComplex(self._module * other.module, self._argument + other.argument)

    def __truediv__(self, other):
        other = _coerce(other, PolarComplex)
        if other is None:
            return NotImplemented
        return PolarComplex(divide(self._module, other.module), self._argument - other.argument)

    def __neg__(self):
        # rotate by π, staying inside (-π, π] for principal arguments
        if self._argument <= 0:
            return PolarComplex(self._module, self._argument + PI)
        return PolarComplex(self._module, self._argument - PI)

    def __abs__(self):
        return abs(self._module)

    # ---------- exponential & logarithm ----------
    def exp(self) -> "PolarComplex":
        return self.to_rectangular().exp().to_polar()

    def ln(self) -> "PolarComplex":
        module, argument = self._principal()
        return RectangularComplex(log(module), argument).to_polar()

    def log(self, base) -> "PolarComplex":
        return self.ln() / PolarComplex.convert(base).ln()

    # ---------- powers & roots ----------
    def powi(self, n: int) -> "PolarComplex":
        if isinstance(n, bool) or not isinstance(n, numbers.Integral):
            raise TypeError(f"powi needs an integer exponent, not {type(n).__name__}")
        return PolarComplex(power(self._module, n), self._argument * n)

    def powf(self, p: float) -> "PolarComplex":
        """self ** p on the principal branch, so equal values give equal powers."""
        module, argument = self._principal()
        return PolarComplex(power(module, p), argument * p)

    def powc(self, exponent) -> "PolarComplex":
        """self ** exponent on the principal branch, exp(exponent · ln(self))."""
        w = RectangularComplex.convert(exponent)
        module, argument = self._principal()
        if module == 0:
            # ln(0) is -inf; the angle is meaningless there
            return PolarComplex(power(0.0, w.real), 0.0)
        new_module = power(module, w.real) * exp(-w.imag * argument)
        new_argument = w.real * argument
        if w.imag != 0:
            new_argument += w.imag * log(module)
        return PolarComplex(new_module, new_argument)

    def expf(self, base: float) -> "PolarComplex":
        """
        base ** self for a real base.

        A base <= 0 has no real logarithm and goes through powc on the
        principal branch, so (-2) ** 2 is 4 and 0 ** 2 is 0.
        """
        if not isinstance(base, numbers.Real):
            raise TypeError(f"expf needs a real base, not {type(base).__name__}")
        if base <= 0:
            return PolarComplex.convert(base).powc(self)
        argument = self.imag * log(base) if self.imag != 0 else 0.0
        return PolarComplex(power(base, self.real), argument)

    def root(self, n: int) -> list:
        """
        All n-th roots, ordered by k = 0 .. n-1.

        Every root has module |z|^(1/n); the k-th has argument (arg(z) + 2πk)/n.
        Raises InvalidRootError for n < 1.
        """
        _check_root_count(n)
        module, argument = self._principal()
        root_module = power(module, 1.0 / n)
        arguments = (argument + TAU * np.arange(n)) / n
        return [PolarComplex(root_module, float(a)) for a in arguments]

    def sqrt(self) -> list:
        return self.root(2)

    # ---------- trigonometric & hyperbolic (through rectangular) ----------
    def cos(self) -> "PolarComplex":
        return self.to_rectangular().cos().to_polar()

    def sin(self) -> "PolarComplex":
        return self.to_rectangular().sin().to_polar()

    def tan(self) -> "PolarComplex":
        return self.to_rectangular().tan().to_polar()

    def cosh(self) -> "PolarComplex":
        return self.to_rectangular().cosh().to_polar()

    def sinh(self) -> "PolarComplex":
        return self.to_rectangular().sinh().to_polar()

    def tanh(self) -> "PolarComplex":
        return self.to_rectangular().tanh().to_polar()

    def __str__(self):
        return f"{self._module} · exp({self._argument}j)"

    def __repr__(self):
        return f"PolarComplex({self._module!r}, {self._argument!r})"


if __name__ == "__main__":
    z1 = RectangularComplex(3, 4)          # 3 + 4j
    z2 = PolarComplex(2, PI / 4)           # 2·e^{jπ/4}
    print(z1.module)                       # 5.0
    print(z1 + z2)                         # rectangular result
    print(z2 * z1)                         # polar result
    print(PolarComplex(1, PI) + 1)         # e^{jπ} + 1 ≈ 0
    for w in RectangularComplex(1).root(3):
        print(w)                           # cube roots of unity
