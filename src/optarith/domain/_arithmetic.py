"""
Elementwise arithmetic interface definitions.

This module defines the domain-level contract offered to solver and
line-search code: four elementwise binary operations over scalar, vector and
matrix operands. Consumers type against :class:`IElementwiseArithmetic` and
stay independent of how dispatch is implemented.
"""

from __future__ import annotations

from typing import Any, Protocol, Sequence, Union, runtime_checkable

from ._numeric import SupportsArithmetic
from .types._numpy import NDArrayLike

Scalar = SupportsArithmetic
Vector = Union[Sequence[Any], NDArrayLike]
Matrix = Union[Sequence[Sequence[Any]], NDArrayLike]
Operand = Union[Scalar, Vector, Matrix]


@runtime_checkable
class IElementwiseArithmetic(Protocol):
    """
    Elementwise arithmetic interface.

    Each method accepts any supported ``(left, right)`` shape pair and returns
    a freshly allocated value of the broader shape. Shape violations raise
    :class:`~optarith.domain._errors.ShapeMismatchError`; undefined shape pairs
    raise :class:`~optarith.domain._errors.ShapeCombinationNotSupportedError`.
    """

    def add(self, a: Operand, b: Operand) -> Operand: ...

    def sub(self, a: Operand, b: Operand) -> Operand: ...

    def mul(self, a: Operand, b: Operand) -> Operand: ...

    def div(self, a: Operand, b: Operand) -> Operand: ...
