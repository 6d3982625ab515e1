"""
Numeric element kinds and the arithmetic capability bound.

This module names the closed set of element kinds the arithmetic layer is
meant to operate on, and the structural protocol every element must satisfy.

Design intent
-------------
- Kinds are identified by NumPy dtype *names* so the domain layer stays free
  of a NumPy import; the infrastructure layer resolves them to dtypes.
- ``ISIZE``/``USIZE`` are pointer-width integers (``intp``/``uintp``). On
  common platforms they share a dtype with ``I64``/``U64``; resolution from a
  dtype prefers the fixed-width kind.
- Complex elements are not separate kinds: an :class:`ElementKind` is a real
  base kind plus a complex flag.
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple, Protocol, runtime_checkable


@runtime_checkable
class SupportsArithmetic(Protocol):
    """
    Capability bound for arithmetic elements.

    Any value exposing the four binary operators qualifies: Python numbers,
    NumPy scalars and :class:`~optarith.infrastructure._complex.Complex`.
    The elementwise kernels are written once against this bound.
    """

    def __add__(self, other): ...

    def __sub__(self, other): ...

    def __mul__(self, other): ...

    def __truediv__(self, other): ...


class NumericKind(Enum):
    """
    Supported real/integer element kinds, valued by NumPy dtype name.
    """

    I8 = "int8"
    U8 = "uint8"
    I16 = "int16"
    U16 = "uint16"
    I32 = "int32"
    U32 = "uint32"
    I64 = "int64"
    U64 = "uint64"
    ISIZE = "intp"
    USIZE = "uintp"
    F32 = "float32"
    F64 = "float64"

    @property
    def dtype_name(self) -> str:
        return self.value

    @property
    def is_float(self) -> bool:
        return self in (NumericKind.F32, NumericKind.F64)

    @property
    def is_signed(self) -> bool:
        return self.is_float or not self.value.startswith("u")

    def __str__(self) -> str:
        return self.name.lower()


class ElementKind(NamedTuple):
    """
    Resolved kind of a single element.

    Attributes
    ----------
    base : NumericKind
        The real kind (of the components, for complex elements).
    is_complex : bool
        Whether the element is a complex value over ``base``.
    """

    base: NumericKind
    is_complex: bool = False

    def __str__(self) -> str:
        return f"complex<{self.base}>" if self.is_complex else str(self.base)
