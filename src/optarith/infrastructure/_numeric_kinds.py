"""
Resolution of runtime values to supported numeric element kinds.

This module maps Python numbers, NumPy scalars, NumPy dtypes and
:class:`~optarith.infrastructure._complex.Complex` values onto the
domain-level :class:`~optarith.domain._numeric.ElementKind`, and implements
the strict kind validation applied before arithmetic when
``OPTARITH_STRICT_KINDS`` is enabled.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Set, Tuple

import numpy as np

from ..domain._errors import ElementKindMismatchError, UnsupportedElementKindError
from ..domain._numeric import ElementKind, NumericKind
from ..domain.types._numpy import NDArrayLike
from ._complex import Complex
from ._config import strict_kinds_enabled


def _build_dtype_table() -> Dict[Tuple[str, int], NumericKind]:
    # Fixed-width kinds are declared before ISIZE/USIZE, so they win when a
    # pointer-width dtype coincides with a fixed-width one.
    table: Dict[Tuple[str, int], NumericKind] = {}
    for kind in NumericKind:
        dt = np.dtype(kind.dtype_name)
        table.setdefault((dt.kind, dt.itemsize), kind)
    return table


_DTYPE_KINDS = _build_dtype_table()

# complex itemsize -> component kind
_COMPLEX_COMPONENT_KINDS = {8: NumericKind.F32, 16: NumericKind.F64}


def dtype_kind(dtype: Any) -> Optional[ElementKind]:
    """
    Resolve a NumPy dtype (or anything ``numpy.dtype`` accepts) to a kind.

    Complex dtypes resolve to the complex kind over the float of half their
    item size (``complex64`` -> ``complex<f32>``).

    Returns
    -------
    Optional[ElementKind]
        The resolved kind, or None for unsupported dtypes (bool, float16,
        object, ...).
    """
    try:
        dt = np.dtype(dtype)
    except TypeError:
        return None
    if dt.kind == "c":
        base = _COMPLEX_COMPONENT_KINDS.get(dt.itemsize)
        return ElementKind(base, True) if base is not None else None
    if dt.kind not in "iuf":
        return None
    base = _DTYPE_KINDS.get((dt.kind, dt.itemsize))
    return ElementKind(base) if base is not None else None


def kind_of(value: Any) -> Optional[ElementKind]:
    """
    Resolve the element kind of a single scalar value.

    Python ``int`` resolves to ``i64``, ``float`` to ``f64`` and ``complex``
    to ``complex<f64>``. ``bool`` is not numeric for this layer. A
    :class:`Complex` resolves to the complex kind over its components when
    both components share one real kind.

    Returns
    -------
    Optional[ElementKind]
        The resolved kind, or None if the value is not a supported element.
    """
    if isinstance(value, (bool, np.bool_)):
        return None
    if isinstance(value, Complex):
        re, im = kind_of(value.re), kind_of(value.im)
        if re is None or re != im or re.is_complex:
            return None
        return ElementKind(re.base, True)
    if isinstance(value, NDArrayLike):
        return dtype_kind(value.dtype) if value.ndim == 0 else None
    if isinstance(value, int):
        return ElementKind(NumericKind.I64)
    if isinstance(value, float):
        return ElementKind(NumericKind.F64)
    if isinstance(value, complex):
        return ElementKind(NumericKind.F64, True)
    return None


def operand_kinds(op: str, operand: Any) -> Set[ElementKind]:
    """
    Collect the element kinds present in an operand.

    Arrays (and NumPy scalars) are resolved once from their dtype; sequences
    are walked down to their scalars or array rows.

    Raises
    ------
    UnsupportedElementKindError
        If any element (or array dtype) is not a supported kind.
    """
    if isinstance(operand, NDArrayLike):
        kind = dtype_kind(operand.dtype)
        if kind is None:
            raise UnsupportedElementKindError(op, operand.dtype)
        return {kind}
    if isinstance(operand, (list, tuple)):
        kinds: Set[ElementKind] = set()
        for item in operand:
            kinds |= operand_kinds(op, item)
        return kinds
    kind = kind_of(operand)
    if kind is None:
        raise UnsupportedElementKindError(op, operand)
    return {kind}


def ensure_element_kinds(op: str, *operands: Any) -> None:
    """
    Validate the element kinds of an operation's operands in strict mode.

    A no-op unless ``OPTARITH_STRICT_KINDS`` is enabled. In strict mode every
    element must resolve to a supported kind and all elements of all operands
    must share one kind.

    Raises
    ------
    UnsupportedElementKindError
        If an element kind is unsupported.
    ElementKindMismatchError
        If the operands mix element kinds.
    """
    if not strict_kinds_enabled():
        return
    kinds: Set[ElementKind] = set()
    for operand in operands:
        kinds |= operand_kinds(op, operand)
    if len(kinds) > 1:
        raise ElementKindMismatchError(op, kinds)
