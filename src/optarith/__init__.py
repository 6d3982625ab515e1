"""
optarith: elementwise arithmetic over scalar, vector and matrix operands.

The module-level ``add``, ``sub``, ``mul`` and ``div`` are bound methods of a
shared, stateless :class:`ElementwiseArithmetic` instance.
"""

from .domain._errors import (
    ElementKindMismatchError,
    ShapeCombinationNotSupportedError,
    ShapeMismatchError,
    UnsupportedElementKindError,
)
from .domain._numeric import ElementKind, NumericKind, SupportsArithmetic
from .domain._shape import Shape
from .infrastructure._complex import Complex
from .infrastructure.arithmetic import ElementwiseArithmetic

_ARITHMETIC = ElementwiseArithmetic()

add = _ARITHMETIC.add
sub = _ARITHMETIC.sub
mul = _ARITHMETIC.mul
div = _ARITHMETIC.div

__all__ = [
    "add",
    "sub",
    "mul",
    "div",
    ElementwiseArithmetic.__name__,
    Complex.__name__,
    Shape.__name__,
    NumericKind.__name__,
    ElementKind.__name__,
    SupportsArithmetic.__name__,
    ShapeMismatchError.__name__,
    ShapeCombinationNotSupportedError.__name__,
    UnsupportedElementKindError.__name__,
    ElementKindMismatchError.__name__,
]
