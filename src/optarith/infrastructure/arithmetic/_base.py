"""
Arithmetic entry class defining the elementwise operations.

This module declares :class:`ElementwiseArithmetic`, which specifies the
public API and mathematical semantics of the four elementwise operations.

The class itself does not implement any kernel. Concrete implementations are
registered per ``(left shape, right shape)`` pair via the arithmetic
control-path manager, which replaces each declared method with a dispatcher.
"""

from typing import Any


class ElementwiseArithmetic:
    """
    Elementwise arithmetic over scalar, vector and matrix operands.

    Supported shape pairs for every operation:

    - scalar . scalar -> scalar (the element operator itself)
    - vector . scalar -> vector
    - scalar . vector -> vector
    - vector . vector -> vector (equal, non-zero lengths)
    - matrix . matrix -> matrix (equal, non-zero row counts; every row of
      both operands as long as the first left row)

    Notes
    -----
    - Methods defined here serve as interface declarations and documentation
      of the mathematical contracts; the bodies are replaced at import time.
    - Shape checks are eager: every dimension is validated before any element
      is computed.
    - Numeric-domain failures (division by zero, overflow) are the element
      type's own behavior and propagate unchanged.
    """

    __slots__ = ()

    def add(self, a: Any, b: Any) -> Any:
        """
        Elementwise addition, ``result[i] = a[i] + b[i]``.

        Raises
        ------
        ShapeMismatchError
            If vector/matrix dimensions disagree or an operand is empty.
        ShapeCombinationNotSupportedError
            If the shape pair is not supported.
        """
        ...

    def sub(self, a: Any, b: Any) -> Any:
        """
        Elementwise subtraction, ``result[i] = a[i] - b[i]``.

        Scalars on either side are paired with every element, so
        ``sub(s, v)[i] == s - v[i]``.
        """
        ...

    def mul(self, a: Any, b: Any) -> Any:
        """
        Elementwise multiplication, ``result[i] = a[i] * b[i]``.
        """
        ...

    def div(self, a: Any, b: Any) -> Any:
        """
        Elementwise division, ``result[i] = a[i] / b[i]``.

        The quotient keeps the element kind: integer elements are divided
        with truncation toward zero (``-7 / 2 -> -3``).

        Parameters
        ----------
        a : Any
            Left operand (scalar, vector or matrix).
        b : Any
            Right operand (scalar, vector or matrix).

        Returns
        -------
        Any
            A fresh value of the broader operand shape. ``list``/``tuple``
            inputs give lists; if a vector/matrix operand is a NumPy array,
            the result is a NumPy array.

        Raises
        ------
        ShapeMismatchError
            If vector lengths differ, if either vector is empty, or if matrix
            row counts or any row length disagree.
        ShapeCombinationNotSupportedError
            For scalar/matrix, matrix/scalar, vector/matrix, matrix/vector or
            rank > 2 operands.
        """
        ...
