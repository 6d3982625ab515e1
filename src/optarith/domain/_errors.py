"""
Shape- and kind-related exceptions for optarith.

This module defines the errors raised by the elementwise arithmetic layer
when a call is malformed. They are deliberately distinct from numeric-domain
errors (e.g., ``ZeroDivisionError``), which belong to the element type's own
operator and are never raised, intercepted or rewritten here.

Categories
----------
- :class:`ShapeMismatchError` (``ValueError``): operand dimensions disagree,
  or an operand is empty where pairing requires elements.
- :class:`ShapeCombinationNotSupportedError` (``TypeError``): the pair of
  operand shapes has no defined operation (e.g., scalar with matrix).
- :class:`UnsupportedElementKindError` / :class:`ElementKindMismatchError`
  (``TypeError``): raised only when strict kind validation is enabled.
"""

from typing import Any, Iterable, Tuple


class ShapeMismatchError(ValueError):
    """
    Raised when the shapes of two operands are incompatible for an
    elementwise operation.

    The error is raised before any element is computed, so a failing call
    never yields a partial result.

    Attributes
    ----------
    op : str
        The name of the operation that was attempted (e.g., "div", "add").
    left_shape : Tuple[int, ...]
        Dimensions of the left operand (``(n,)`` for vectors,
        ``(rows, cols)`` for matrices, using the first row's length).
    right_shape : Tuple[int, ...]
        Dimensions of the right operand.
    reason : str
        Human-readable description of the violated requirement.
    """

    def __init__(
        self,
        op: str,
        left_shape: Tuple[int, ...],
        right_shape: Tuple[int, ...],
        reason: str,
    ) -> None:
        """
        Initialize the ShapeMismatchError.

        Parameters
        ----------
        op : str
            The operation name.
        left_shape : Tuple[int, ...]
            Dimensions of the left operand.
        right_shape : Tuple[int, ...]
            Dimensions of the right operand.
        reason : str
            Which shape requirement failed.
        """
        super().__init__(
            f"Shape mismatch in {op}: {left_shape} vs {right_shape} ({reason})."
        )
        self.op = op
        self.left_shape = left_shape
        self.right_shape = right_shape
        self.reason = reason


class ShapeCombinationNotSupportedError(TypeError):
    """
    Raised when an operation is requested for a pair of operand shapes that
    the layer does not define.

    Defined pairs are scalar/scalar, vector/scalar, scalar/vector,
    vector/vector and matrix/matrix. Anything else, including operands of
    rank greater than two, ends up here.
    """

    def __init__(self, op: str, left: str, right: str) -> None:
        """
        Initialize the ShapeCombinationNotSupportedError.

        Parameters
        ----------
        op : str
            The operation name.
        left : str
            Shape name of the left operand (e.g., "scalar").
        right : str
            Shape name of the right operand (e.g., "matrix").
        """
        super().__init__(f"{op} is not defined for {left} and {right} operands.")
        self.op = op
        self.left = left
        self.right = right


class UnsupportedElementKindError(TypeError):
    """
    Raised in strict mode when an element (or array dtype) does not resolve
    to one of the supported numeric kinds.
    """

    def __init__(self, op: str, value: Any) -> None:
        super().__init__(
            f"{op}: unsupported element kind {type(value).__name__} ({value!r})."
        )
        self.op = op
        self.value = value


class ElementKindMismatchError(TypeError):
    """
    Raised in strict mode when the elements of an operation do not share a
    single numeric kind.
    """

    def __init__(self, op: str, kinds: Iterable[Any]) -> None:
        names = sorted(str(k) for k in kinds)
        super().__init__(f"{op}: operands mix element kinds {', '.join(names)}.")
        self.op = op
        self.kinds = tuple(names)
