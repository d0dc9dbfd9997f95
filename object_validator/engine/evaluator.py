"""
Descriptor evaluation — decides whether one descriptor holds for an object.

A descriptor lists candidate paths; it holds when at least one candidate
resolves to a present value that is not among its invalid values.
"""
import logging
from typing import Any, Optional, Sequence

import numpy as np

from object_validator.engine.path_resolver import resolve
from object_validator.models.descriptor import PropertyDescriptor

logger = logging.getLogger(__name__)

_BOOL_TYPES = (bool, np.bool_)


# ======================================================================
# Value matching
# ======================================================================

def is_nan(value: Any) -> bool:
    """True for float / numpy floating NaN, False for everything else."""
    if isinstance(value, (float, np.floating)):
        return bool(np.isnan(value))
    return False


def same_value(a: Any, b: Any) -> bool:
    """
    Exact equality used for invalid-value membership.

    NaN matches NaN. Booleans never match numbers (``False`` is not ``0``).
    Comparisons that raise or cannot be reduced to a single bool are treated
    as a mismatch.
    """
    a_nan, b_nan = is_nan(a), is_nan(b)
    if a_nan or b_nan:
        return a_nan and b_nan

    if isinstance(a, _BOOL_TYPES) != isinstance(b, _BOOL_TYPES):
        return False

    try:
        return bool(a == b)
    except (TypeError, ValueError):
        return False


def is_invalid_value(value: Any, invalid_values: Optional[Sequence[Any]]) -> bool:
    if not invalid_values:
        return False
    return any(same_value(value, candidate) for candidate in invalid_values)


# ======================================================================
# Evaluation
# ======================================================================

def is_path_valid(obj: Any, path: str, invalid_values: Optional[Sequence[Any]] = None) -> bool:
    """True if *path* resolves on *obj* to a value outside *invalid_values*."""
    value, found = resolve(obj, path)
    if not found:
        return False
    if is_invalid_value(value, invalid_values):
        logger.debug("Path '%s' holds a disallowed value: %r", path, value)
        return False
    return True


def evaluate(obj: Any, descriptor: PropertyDescriptor) -> bool:
    """
    True if any candidate path of *descriptor* is valid on *obj*.

    Candidates are checked in order and checking stops at the first valid one.
    """
    return any(
        is_path_valid(obj, path, descriptor.invalid_values)
        for path in descriptor.required
    )
