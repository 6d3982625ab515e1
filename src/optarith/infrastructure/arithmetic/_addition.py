"""
Elementwise addition.

Registers the ``ElementwiseArithmetic.add`` control paths.
"""

import operator

from ._base import ElementwiseArithmetic as EA
from ._elementwise import ElementwiseOperator, register_elementwise_paths

ADDITION = ElementwiseOperator("add", operator.add)

register_elementwise_paths(EA.add, ADDITION)
