"""
Elementwise division that keeps the element kind.

Registers the ``ElementwiseArithmetic.div`` control paths. Floating-point and
complex elements use their own ``/``. Integer elements (Python ints, NumPy
integer scalars and integer-dtype arrays) are divided with truncation toward
zero, so ``div([7, -7], 2) == [3, -3]`` and an ``int8`` vector stays ``int8``.
:class:`Complex` applies the same rule to its components.

Zero divisors behave as the element type dictates: ``ZeroDivisionError`` for
Python numbers, ``inf``/``nan`` (floats) or ``0`` (integers) plus a
``RuntimeWarning`` for NumPy.
"""

from .._integer_division import divide
from ._base import ElementwiseArithmetic as EA
from ._elementwise import ElementwiseOperator, register_elementwise_paths

DIVISION = ElementwiseOperator("div", divide)

register_elementwise_paths(EA.div, DIVISION)
