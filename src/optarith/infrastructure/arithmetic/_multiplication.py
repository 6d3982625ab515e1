"""
Elementwise multiplication.

Registers the ``ElementwiseArithmetic.mul`` control paths. Integer overflow
follows the element type (unbounded for Python ints, wrapping with a
``RuntimeWarning`` for NumPy fixed-width scalars).
"""

import operator

from ._base import ElementwiseArithmetic as EA
from ._elementwise import ElementwiseOperator, register_elementwise_paths

MULTIPLICATION = ElementwiseOperator("mul", operator.mul)

register_elementwise_paths(EA.mul, MULTIPLICATION)
