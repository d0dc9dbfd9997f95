"""
Path resolution — walks a dot-delimited path through a nested object.

Each segment is a key lookup on mappings and an attribute lookup on anything
else. There is no index or bracket syntax: ``"items.0"`` looks up a key or
attribute literally named ``"0"``.
"""
import logging
from collections.abc import Mapping
from typing import Any, List, Tuple

from object_validator.config.constants import PATH_SEPARATOR

logger = logging.getLogger(__name__)


def split_path(path: str) -> List[str]:
    """Split *path* into its ordered segment names."""
    return path.split(PATH_SEPARATOR)


def _lookup(value: Any, segment: str) -> Any:
    try:
        if isinstance(value, Mapping):
            return value.get(segment)
        return getattr(value, segment, None)
    except Exception as exc:  # noqa: BLE001
        # Properties / __getattr__ / custom mappings may raise anything.
        logger.debug("Lookup of '%s' on %s raised %r; treated as missing", segment, type(value).__name__, exc)
        return None


def resolve(obj: Any, path: str) -> Tuple[Any, bool]:
    """
    Resolve *path* against *obj*.

    Absent and ``None`` values are both "missing": the walk stops at the first
    one and reports not-found instead of raising. A lookup that raises is
    also "missing".

    Returns:
        A ``(value, found)`` tuple. *value* is ``None`` when not found.
    """
    current = obj
    if current is None:
        return None, False

    for segment in split_path(path):
        current = _lookup(current, segment)
        if current is None:
            return None, False

    return current, True
