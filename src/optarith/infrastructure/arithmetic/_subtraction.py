"""
Elementwise subtraction.

Registers the ``ElementwiseArithmetic.sub`` control paths. Operand order is
preserved on every path, so ``sub(s, v)[i] == s - v[i]``.
"""

import operator

from ._base import ElementwiseArithmetic as EA
from ._elementwise import ElementwiseOperator, register_elementwise_paths

SUBTRACTION = ElementwiseOperator("sub", operator.sub)

register_elementwise_paths(EA.sub, SUBTRACTION)
