"""
Arithmetic control-path manager for shape-based dispatch.

This module defines the shared control-path manager used to register and
resolve shape-specific implementations of :class:`ElementwiseArithmetic`
methods.

The manager is created by specializing the generic `create_path_builder`
utility with :func:`shape_pair`. As a result, method dispatch is performed
based on the classified ``(left shape, right shape)`` of each call.

Typical usage
-------------
    @arithmetic_control_path_manager(
        ElementwiseArithmetic,
        ElementwiseArithmetic.div,
        (Shape.VECTOR, Shape.SCALAR),
        unsupported_shape_combination,
    )
    def div_vector_scalar(a, b): ...
"""

from typing import Any, Callable, Hashable

from ...domain._errors import ShapeCombinationNotSupportedError
from ...domain.utils._control_path import create_path_builder
from .._operands import shape_pair

# Control-path manager that dispatches arithmetic methods on operand shapes
arithmetic_control_path_manager = create_path_builder(shape_pair)


def unsupported_shape_combination(
    method: Callable[..., Any], state: Hashable
) -> ShapeCombinationNotSupportedError:
    """
    Trap factory for shape pairs without a registered control path.
    """
    left, right = state
    return ShapeCombinationNotSupportedError(method.__name__, str(left), str(right))
