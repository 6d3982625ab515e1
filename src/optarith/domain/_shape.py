"""
Operand shape vocabulary.

The arithmetic layer distinguishes operands only by their structural arity.
Shapes are used as dispatch keys: each supported ``(left, right)`` pair has
one registered implementation per operation.
"""

from enum import Enum


class Shape(Enum):
    """
    Structural arity of an arithmetic operand.

    Attributes
    ----------
    SCALAR : Shape
        A single numeric value (0-dimensional).
    VECTOR : Shape
        An ordered sequence of scalars (1-dimensional).
    MATRIX : Shape
        An ordered sequence of equal-length vectors (2-dimensional).
    TENSOR : Shape
        Anything of rank greater than two. No operation is registered for
        it, so it always fails dispatch.
    """

    SCALAR = "scalar"
    VECTOR = "vector"
    MATRIX = "matrix"
    TENSOR = "tensor"

    def __str__(self) -> str:
        return self.value
