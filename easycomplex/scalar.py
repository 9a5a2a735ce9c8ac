"""
Float helpers shared by both complex representations.

Everything here works on plain floats. The arithmetic runs through numpy
float64 with floating-point errors silenced, so division by zero, log(0)
and overflow give inf/nan like any IEEE-754 machine would, instead of the
exceptions Python's own float operations raise.
"""
import math

import numpy as np

PI = math.pi
TAU = 2.0 * math.pi


def _ieee(func, *args) -> float:
    with np.errstate(all="ignore"):
        return float(func(*args))


def divide(a: float, b: float) -> float:
    return _ieee(np.divide, a, b)


def power(base: float, exponent: float) -> float:
    return _ieee(np.power, base, exponent)


def log(x: float) -> float:
    return _ieee(np.log, x)


def exp(x: float) -> float:
    return _ieee(np.exp, x)


def cos(x: float) -> float:
    return _ieee(np.cos, x)


def sin(x: float) -> float:
    return _ieee(np.sin, x)


def cosh(x: float) -> float:
    return _ieee(np.cosh, x)


def sinh(x: float) -> float:
    return _ieee(np.sinh, x)


def normalize_argument(theta: float) -> float:
    """Reduce an angle to the principal interval (-π, π]."""
    if -PI < theta <= PI:
        return theta
    theta = _ieee(np.fmod, theta, TAU)
    if theta <= -PI:
        theta += TAU
    elif theta > PI:
        theta -= TAU
    return theta


def is_principal(module: float, argument: float) -> bool:
    """True when (module, argument) is already what rect_to_polar would give."""
    return module > 0 and -PI < argument <= PI


# ---------- representation conversion ----------
def rect_to_polar(real: float, imag: float) -> tuple:
    """
    (real, imag) -> (module, argument).

    The argument comes from atan2, so it keeps the sign of `imag` and lies
    in (-π, π]. The origin has no defined angle; it maps to 0.0.
    """
    module = _ieee(np.hypot, real, imag)
    if real == 0 and imag == 0:
        return module, 0.0
    # +0.0 folds a signed zero so the negative real axis maps to π, not -π
    return module, _ieee(np.arctan2, imag + 0.0, real)


def polar_to_rect(module: float, argument: float) -> tuple:
    """(module, argument) -> (real, imag)."""
    return module * cos(argument), module * sin(argument)
