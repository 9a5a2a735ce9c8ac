"""
easycomplex
-----------
Complex numbers in two interchangeable forms: RectangularComplex (real, imag)
and PolarComplex (module, argument). Either form combines with the other, and
with plain numbers, without casts; results take the type of the left operand.
"""
import logging

from .complex import PolarComplex, RectangularComplex
from .errors import ComplexError, DomainError, InvalidRootError, PoleError
from .scalar import PI, TAU, normalize_argument, polar_to_rect, rect_to_polar

__all__ = [
    "RectangularComplex",
    "PolarComplex",
    "ComplexError",
    "DomainError",
    "InvalidRootError",
    "PoleError",
    "PI",
    "TAU",
    "normalize_argument",
    "polar_to_rect",
    "rect_to_polar",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
