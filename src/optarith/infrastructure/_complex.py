"""
Generic complex value over any supported real element kind.

Python's built-in ``complex`` and NumPy's ``complex64``/``complex128`` only
cover floating-point components. :class:`Complex` lifts *any* supported real
kind (including NumPy fixed-width integers) into a complex value whose
arithmetic is expressed purely through the component type's own operators.

Notes
-----
- Division uses the textbook quotient::

      (a + bi) / (c + di) = ((ac + bd) / (c^2 + d^2), (bc - ad) / (c^2 + d^2))

  with ``/`` being the component kind's division: integer components are
  divided with truncation toward zero and keep their kind. A zero divisor
  raises (or warns) exactly as the component type does.
- ``__array_ufunc__ = None`` makes NumPy scalars and arrays defer to the
  reflected operators of this class instead of coercing it into an object
  array.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Any, Optional

import numpy as np

from ._integer_division import divide


def _is_real(value: Any) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (numbers.Real, np.integer, np.floating))


@dataclass(frozen=True, eq=False)
class Complex:
    """
    Immutable complex value with components of an arbitrary real kind.

    Parameters
    ----------
    re : Any
        Real component.
    im : Any
        Imaginary component, normally of the same kind as ``re``.
    """

    re: Any
    im: Any

    __array_ufunc__ = None

    @classmethod
    def from_complex(cls, value: complex) -> "Complex":
        """
        Build a :class:`Complex` from a Python or NumPy complex number.
        """
        return cls(value.real, value.imag)

    @staticmethod
    def _coerce(other: Any) -> Optional["Complex"]:
        """
        Lift a real or complex operand to :class:`Complex`.

        Real operands get an imaginary part of ``type(other)(0)`` so the zero
        has the operand's own kind. Returns None for unsupported operands.
        """
        if isinstance(other, Complex):
            return other
        if isinstance(other, (complex, np.complexfloating)):
            return Complex(other.real, other.imag)
        if _is_real(other):
            return Complex(other, type(other)(0))
        return None

    def __add__(self, other: Any) -> "Complex":
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return Complex(self.re + o.re, self.im + o.im)

    def __radd__(self, other: Any) -> "Complex":
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return Complex(o.re + self.re, o.im + self.im)

    def __sub__(self, other: Any) -> "Complex":
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return Complex(self.re - o.re, self.im - o.im)

    def __rsub__(self, other: Any) -> "Complex":
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return o.__sub__(self)

    def __mul__(self, other: Any) -> "Complex":
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        a, b, c, d = self.re, self.im, o.re, o.im
        return Complex(a * c - b * d, a * d + b * c)

    def __rmul__(self, other: Any) -> "Complex":
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return o.__mul__(self)

    def __truediv__(self, other: Any) -> "Complex":
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        a, b, c, d = self.re, self.im, o.re, o.im
        den = c * c + d * d
        return Complex(divide(a * c + b * d, den), divide(b * c - a * d, den))

    def __rtruediv__(self, other: Any) -> "Complex":
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return o.__truediv__(self)

    def __neg__(self) -> "Complex":
        return Complex(-self.re, -self.im)

    def conjugate(self) -> "Complex":
        """Return the complex conjugate ``re - im*i``."""
        return Complex(self.re, -self.im)

    def __complex__(self) -> complex:
        return complex(self.re, self.im)

    def __abs__(self) -> float:
        return abs(complex(self))

    def __eq__(self, other: Any) -> bool:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return bool(self.re == o.re) and bool(self.im == o.im)

    def __hash__(self) -> int:
        return hash(complex(self))

    def __repr__(self) -> str:
        return f"Complex({self.re!r}, {self.im!r})"
