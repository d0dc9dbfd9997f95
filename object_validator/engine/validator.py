"""
Validator — checks an object against an ordered list of property descriptors.

Flow:
    1. Normalize descriptors into frozen PropertyDescriptor copies
    2. Evaluate each descriptor in order
    3. Collect an error payload for every failing descriptor
       (stop after the first one in lazy mode)

Invalidity is returned as data in a ValidationResult; only malformed
descriptors raise (DescriptorError).
"""
import logging
from typing import Any, Iterable, List, Optional, Sequence

from object_validator.config import settings
from object_validator.config.constants import DEFAULT_MESSAGE_PREFIX, MESSAGE_KEY
from object_validator.engine.evaluator import evaluate
from object_validator.engine.metrics import (
    record_descriptor_failure,
    record_validation,
    timed_validation,
)
from object_validator.models.descriptor import PropertyDescriptor, to_descriptors
from object_validator.models.validation import ValidationResult

logger = logging.getLogger(__name__)


# ======================================================================
# Error payloads
# ======================================================================

def join_paths(paths: Sequence[str]) -> str:
    """
    Join candidate paths for the default message.

    ``a`` / ``a or b`` / ``a, b, or c``
    """
    if len(paths) == 1:
        return paths[0]
    if len(paths) == 2:
        return f"{paths[0]} or {paths[1]}"
    return f"{', '.join(paths[:-1])}, or {paths[-1]}"


def default_error(paths: Sequence[str]) -> dict:
    return {MESSAGE_KEY: DEFAULT_MESSAGE_PREFIX + join_paths(paths)}


def error_payload(descriptor: PropertyDescriptor) -> Any:
    """The descriptor's own error verbatim, or a generated message."""
    if descriptor.has_custom_error:
        return descriptor.error
    return default_error(descriptor.required)


def _preview(payload: Any) -> str:
    return repr(payload)[: settings.LOG_PAYLOAD_CHARS]


# ======================================================================
# Validator
# ======================================================================

class Validator:
    """
    A reusable rule set.

    Descriptors are normalized once at construction; the instance holds no
    per-call state and can be applied to any number of objects.
    """

    def __init__(self, descriptors: Iterable[Any], lazy: bool = False) -> None:
        self.descriptors: List[PropertyDescriptor] = to_descriptors(descriptors)
        self.lazy = lazy

    def validate(self, obj: Any, lazy: Optional[bool] = None) -> ValidationResult:
        """
        Validate *obj* against every descriptor, in order.

        Args:
            obj: Object to validate; any shape is accepted.
            lazy: Stop at the first failing descriptor. Defaults to the
                instance setting.

        Returns:
            ValidationResult with ``valid`` and the ordered error payloads.
        """
        if lazy is None:
            lazy = self.lazy

        result = ValidationResult()

        with timed_validation():
            for idx, descriptor in enumerate(self.descriptors):
                if evaluate(obj, descriptor):
                    logger.debug("Descriptor #%d %s passed", idx, list(descriptor.required))
                    continue

                payload = error_payload(descriptor)
                result.add_error(payload)
                record_descriptor_failure(descriptor.has_custom_error)
                logger.debug(
                    "Descriptor #%d %s failed: %s",
                    idx, list(descriptor.required), _preview(payload),
                )

                if lazy:
                    break

        record_validation(result.valid)
        if not result.valid:
            logger.info(
                "Validation failed: %d of %d descriptor(s) reported%s",
                len(result.errors),
                len(self.descriptors),
                " (lazy)" if lazy else "",
            )
        return result

    def __len__(self) -> int:
        return len(self.descriptors)

    def __repr__(self) -> str:
        return f"Validator({len(self.descriptors)} descriptors, lazy={self.lazy})"


def validate(obj: Any, descriptors: Iterable[Any], lazy: bool = False) -> ValidationResult:
    """
    Validate *obj* against *descriptors*.

    Each descriptor is a mapping (or PropertyDescriptor) with:
        required: a path string ('a', 'a.b', ...) or a list of paths; any one
            valid path satisfies the descriptor.
        invalidValues: optional values that still count as invalid.
        error: optional payload reported verbatim instead of the default
            ``{"message": "Object must contain a valid value for ..."}``.

    Raises:
        DescriptorError: if a descriptor is malformed.
    """
    return Validator(descriptors).validate(obj, lazy=lazy)
