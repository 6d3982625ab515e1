"""
Kind-preserving element division.

Division yields the same kind as its operands. For floating-point and complex
operands that is the ordinary ``/``. When both operands are integral (Python
``int``, NumPy integer scalars, or arrays with a signed/unsigned integer
dtype) the quotient is truncated toward zero and keeps the integer kind, so
``divide(-7, 2) == -3``.

Zero divisors keep the operand type's own behavior: ``ZeroDivisionError``
for Python ints, a ``RuntimeWarning`` and a zero quotient for NumPy integers.
"""

from typing import Any

import numpy as np

from ..domain.types._numpy import NDArrayLike


def is_integral(value: Any) -> bool:
    """Return whether `value` is an integer scalar or an integer-dtype array."""
    if isinstance(value, (bool, np.bool_)):
        return False
    if isinstance(value, NDArrayLike):
        return np.dtype(value.dtype).kind in "iu"
    return isinstance(value, int)


def truncating_divide(a: Any, b: Any) -> Any:
    """
    Integer quotient rounded toward zero, in the operands' integer kind.

    Floor division is corrected by one wherever the signs differ and the
    division is inexact. Works elementwise for arrays. A NumPy zero divisor
    leaves NumPy's zero quotient in place.
    """
    q = a // b
    inexact = (q * b != a) & (b != 0)
    signs_differ = (a < 0) != (b < 0)
    return q + (inexact & signs_differ)


def divide(a: Any, b: Any) -> Any:
    """
    The element division operator of the arithmetic layer.

    Truncating division for two integral operands, ``a / b`` otherwise.
    """
    if is_integral(a) and is_integral(b):
        return truncating_divide(a, b)
    return a / b
