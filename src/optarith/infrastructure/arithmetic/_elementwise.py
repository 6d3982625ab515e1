"""
Generic elementwise kernels and their registration as control paths.

Each kernel is written once, parameterized by an :class:`ElementwiseOperator`,
and relies only on the element type supporting that operator. Operations such
as division and addition instantiate the kernels by registering them for
their method through :func:`register_elementwise_paths`.

Representation rules
--------------------
- ``list``/``tuple`` operands are computed element by element and produce
  ``list`` results.
- If a vector/matrix operand is a NumPy array, the operator is applied to
  whole arrays and the result is a NumPy array. A :class:`Complex` scalar
  paired with an array is applied per element into an ``object`` array.
"""

from functools import partial
from typing import Any, Callable, NamedTuple

import numpy as np

from ...domain._numeric import SupportsArithmetic
from ...domain._shape import Shape
from .._complex import Complex
from .._numeric_kinds import ensure_element_kinds
from .._operands import is_array_like
from ._base import ElementwiseArithmetic
from ._path_builder import arithmetic_control_path_manager, unsupported_shape_combination
from ._shape_checks import check_matrix_pair, check_vector_pair


class ElementwiseOperator(NamedTuple):
    """
    A named binary element operator.

    Attributes
    ----------
    name : str
        Operation name used in error messages (e.g., "div").
    fn : Callable[[Any, Any], Any]
        The element operator (e.g., ``operator.add``).
    """

    name: str
    fn: Callable[[SupportsArithmetic, SupportsArithmetic], Any]


def _object_array(values: list) -> np.ndarray:
    # Complex defers NumPy operators, so its results are collected per element.
    out = np.empty(len(values), dtype=object)
    out[:] = values
    return out


def scalar_scalar(op: ElementwiseOperator, a: Any, b: Any) -> Any:
    ensure_element_kinds(op.name, a, b)
    return op.fn(a, b)


def vector_scalar(op: ElementwiseOperator, v: Any, s: Any) -> Any:
    """``result[i] = v[i] op s``. Empty vectors give empty results."""
    ensure_element_kinds(op.name, v, s)
    if is_array_like(v):
        if isinstance(s, Complex):
            return _object_array([op.fn(x, s) for x in np.asarray(v)])
        return op.fn(np.asarray(v), s)
    return [op.fn(x, s) for x in v]


def scalar_vector(op: ElementwiseOperator, s: Any, v: Any) -> Any:
    """``result[i] = s op v[i]``. Empty vectors give empty results."""
    ensure_element_kinds(op.name, s, v)
    if is_array_like(v):
        if isinstance(s, Complex):
            return _object_array([op.fn(s, x) for x in np.asarray(v)])
        return op.fn(s, np.asarray(v))
    return [op.fn(s, x) for x in v]


def vector_vector(
    op: ElementwiseOperator, a: Any, b: Any, check_kinds: bool = True
) -> Any:
    """
    ``result[i] = a[i] op b[i]`` for equal, non-zero lengths.

    Parameters
    ----------
    check_kinds : bool
        Whether to run strict kind validation. Matrix callers validate the
        whole matrices once and disable it per row.

    Raises
    ------
    ShapeMismatchError
        If either operand is empty or the lengths differ.
    """
    check_vector_pair(op.name, a, b)
    if check_kinds:
        ensure_element_kinds(op.name, a, b)
    if is_array_like(a) or is_array_like(b):
        return op.fn(np.asarray(a), np.asarray(b))
    return [op.fn(x, y) for x, y in zip(a, b)]


def matrix_matrix(op: ElementwiseOperator, a: Any, b: Any) -> Any:
    """
    Row-wise delegation to :func:`vector_vector` after validating every row.

    Raises
    ------
    ShapeMismatchError
        If either matrix has no rows or columns, if the row counts differ,
        or if any row length differs from the first left row.
    """
    check_matrix_pair(op.name, a, b)
    ensure_element_kinds(op.name, a, b)
    rows = [vector_vector(op, ra, rb, check_kinds=False) for ra, rb in zip(a, b)]
    if is_array_like(a) or is_array_like(b):
        return np.stack(rows)
    return rows


_SHAPE_PATHS = (
    (Shape.SCALAR, Shape.SCALAR, scalar_scalar),
    (Shape.VECTOR, Shape.SCALAR, vector_scalar),
    (Shape.SCALAR, Shape.VECTOR, scalar_vector),
    (Shape.VECTOR, Shape.VECTOR, vector_vector),
    (Shape.MATRIX, Shape.MATRIX, matrix_matrix),
)


def register_elementwise_paths(
    method: Callable[..., Any], op: ElementwiseOperator
) -> None:
    """
    Register every supported shape pair of `method` with the kernels above.

    Parameters
    ----------
    method : Callable[..., Any]
        The declared :class:`ElementwiseArithmetic` method (e.g., ``div``).
    op : ElementwiseOperator
        The element operator the kernels are instantiated with.
    """
    for left, right, kernel in _SHAPE_PATHS:
        arithmetic_control_path_manager(
            ElementwiseArithmetic,
            method,
            (left, right),
            unsupported_shape_combination,
        )(partial(kernel, op))
