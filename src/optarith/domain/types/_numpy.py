"""
Domain-level structural typing for NumPy-like arrays.

This module defines :class:`NDArrayLike`, a backend-agnostic Protocol
representing objects that behave like NumPy ``ndarray`` instances, without
introducing a dependency on NumPy in the domain layer.

Only the attributes the arithmetic layer inspects are modeled: rank and
dimensions for shape classification, ``dtype`` for kind resolution, and
``__array__`` for conversion. NumPy scalars satisfy the protocol as well
(with ``ndim == 0``), which is how they are recognised as scalars.
"""

from __future__ import annotations
from typing import Protocol, Tuple, Any, runtime_checkable


@runtime_checkable
class NDArrayLike(Protocol):
    """
    A structural typing interface for objects that behave like NumPy ndarrays.

    Notes
    -----
    - This is a *Protocol*, not a concrete base class.
    - Typical implementers are ``numpy.ndarray`` and ``numpy.generic``.
    """

    @property
    def shape(self) -> Tuple[int, ...]:
        """
        Shape of the array as a tuple of dimension sizes.
        """
        ...

    @property
    def ndim(self) -> int:
        """
        Number of dimensions of the array.
        """
        ...

    @property
    def dtype(self) -> Any:
        """
        Backend-defined dtype object (e.g., ``numpy.dtype``).
        """
        ...

    def tolist(self) -> Any:
        """
        Convert the array to a (possibly nested) Python list or scalar.
        """
        ...

    def __array__(self, dtype: Any = ...) -> Any:
        """
        Return a backend-native array representation.
        """
        ...
