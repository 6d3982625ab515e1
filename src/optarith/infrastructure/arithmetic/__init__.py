"""
Elementwise arithmetic operations and their shape-specific implementations.

This package aggregates the arithmetic entry class and its concrete
control-path implementations, including:

- division           (``div``)
- addition           (``add``)
- subtraction        (``sub``)
- multiplication     (``mul``)

Each operation is implemented using the control-path dispatch mechanism,
allowing shape-specific kernels (scalar/vector/matrix pairs) to be selected
at runtime while exposing a single, stable public API.

Design notes
------------
- Concrete implementation modules are imported for their *side effects*:
  registering control paths with the arithmetic control-path manager.
- These implementation modules are not part of the public API and should not
  be imported directly by users.

Public API
----------
- ``ElementwiseArithmetic``
"""

from ._division import *
from ._addition import *
from ._subtraction import *
from ._multiplication import *
from ._base import ElementwiseArithmetic

__all__ = [
    ElementwiseArithmetic.__name__,
]
