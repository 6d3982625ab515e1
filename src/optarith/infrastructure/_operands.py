"""
Operand shape classification.

Operands are classified structurally:

- NumPy arrays and scalars by ``ndim`` (0 -> scalar, 1 -> vector,
  2 -> matrix, more -> tensor).
- ``list``/``tuple`` by their first element: a sequence (or 1-D array) of
  sequences is a matrix, anything else a vector. A first row that is itself
  nested is a tensor.
- Everything else is a scalar.

An empty ``list``/``tuple`` carries no element to reveal its rank. It is a
vector of length zero, except when paired with a matrix, where it reads as a
matrix with zero rows.
"""

from typing import Any, Tuple

from ..domain._shape import Shape
from ..domain.types._numpy import NDArrayLike

_RANK_SHAPES = {0: Shape.SCALAR, 1: Shape.VECTOR, 2: Shape.MATRIX}


def is_array_like(operand: Any) -> bool:
    """Return whether `operand` is a NumPy-like array of rank >= 1."""
    return isinstance(operand, NDArrayLike) and operand.ndim > 0


def _is_sequence(operand: Any) -> bool:
    return isinstance(operand, (list, tuple)) or is_array_like(operand)


def shape_of(operand: Any) -> Shape:
    """
    Classify a single operand.

    Parameters
    ----------
    operand : Any
        A scalar, vector or matrix in any supported representation.

    Returns
    -------
    Shape
        The structural arity of the operand.
    """
    if isinstance(operand, NDArrayLike):
        return _RANK_SHAPES.get(operand.ndim, Shape.TENSOR)
    if not isinstance(operand, (list, tuple)):
        return Shape.SCALAR
    if not operand:
        return Shape.VECTOR
    first = operand[0]
    if not _is_sequence(first):
        return Shape.VECTOR
    if shape_of(first) is Shape.VECTOR:
        return Shape.MATRIX
    return Shape.TENSOR


def _is_empty_sequence(operand: Any) -> bool:
    return isinstance(operand, (list, tuple)) and not operand


def shape_pair(a: Any, b: Any) -> Tuple[Shape, Shape]:
    """
    Classify both operands of a binary operation.

    This is the dispatch state of the arithmetic control paths.

    Returns
    -------
    Tuple[Shape, Shape]
        ``(shape_of(a), shape_of(b))`` after empty-sequence resolution.
    """
    left, right = shape_of(a), shape_of(b)
    if right is Shape.MATRIX and _is_empty_sequence(a):
        left = Shape.MATRIX
    if left is Shape.MATRIX and _is_empty_sequence(b):
        right = Shape.MATRIX
    return left, right


def dims_of(operand: Any) -> Tuple[int, ...]:
    """
    Dimensions of a vector or matrix operand, for error reporting.

    Matrices report ``(rows, cols)`` using the first row's length; a matrix
    with no rows reports ``(0,)``.
    """
    n = len(operand)
    if n and _is_sequence(operand[0]):
        return (n, len(operand[0]))
    return (n,)
