"""
Eager shape validation for pairwise vector and matrix operations.

Every check here runs before any element is computed, so a failing call is
determined by operand dimensions alone and never leaks a partial result.
"""

from typing import Any

from ...domain._errors import ShapeMismatchError
from .._operands import dims_of, is_array_like


def check_vector_pair(op: str, a: Any, b: Any) -> None:
    """
    Validate two vector operands for elementwise pairing.

    Raises
    ------
    ShapeMismatchError
        If either operand is empty, or if the lengths differ.
    """
    n1, n2 = len(a), len(b)
    if n1 == 0 or n2 == 0:
        raise ShapeMismatchError(op, (n1,), (n2,), "vector operands must be non-empty")
    if n1 != n2:
        raise ShapeMismatchError(op, (n1,), (n2,), "vector lengths differ")


def _row_length(op: str, a: Any, b: Any, side: str, r: int, row: Any) -> int:
    if not isinstance(row, (list, tuple)) and not is_array_like(row):
        raise ShapeMismatchError(
            op, dims_of(a), dims_of(b), f"{side} row {r} is not a vector"
        )
    return len(row)


def check_matrix_pair(op: str, a: Any, b: Any) -> None:
    """
    Validate two matrix operands for row-wise elementwise pairing.

    Requirements
    ------------
    - both operands have at least one row
    - equal row counts
    - the first left row has at least one column
    - every row of both operands has the first left row's length

    Raises
    ------
    ShapeMismatchError
        On the first violated requirement.
    """
    sr, orr = len(a), len(b)
    if sr == 0 or orr == 0:
        raise ShapeMismatchError(
            op, dims_of(a), dims_of(b), "matrix operands must have at least one row"
        )
    if sr != orr:
        raise ShapeMismatchError(op, dims_of(a), dims_of(b), "row counts differ")

    sc = _row_length(op, a, b, "left", 0, a[0])
    if sc == 0:
        raise ShapeMismatchError(
            op, dims_of(a), dims_of(b), "matrix operands must have at least one column"
        )
    for r in range(sr):
        for side, row in (("left", a[r]), ("right", b[r])):
            n = _row_length(op, a, b, side, r, row)
            if n != sc:
                raise ShapeMismatchError(
                    op,
                    dims_of(a),
                    dims_of(b),
                    f"{side} row {r} has length {n}, expected {sc}",
                )
