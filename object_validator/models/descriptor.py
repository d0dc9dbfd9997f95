"""
Typed Pydantic model for property requirement descriptors.

A descriptor names one or more dot-delimited paths that must resolve to a
present value on the validated object. Descriptors arrive either as plain
mappings (``{"required": "a.b", "invalidValues": [""]}``) or as
PropertyDescriptor instances; both are normalized into frozen models so the
caller's input is never modified.
"""
from __future__ import annotations

import numbers
from collections.abc import Iterable, Mapping
from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


class DescriptorError(ValueError):
    """Raised when a descriptor (or a descriptor set) is malformed."""

    def __init__(self, message: str, index: Optional[int] = None) -> None:
        self.index = index
        prefix = f"Descriptor #{index}: " if index is not None else ""
        super().__init__(f"{prefix}{message}")


class PropertyDescriptor(BaseModel):
    """A single requirement: any one of ``required`` must hold a valid value."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    required: Tuple[str, ...] = Field(
        ...,
        description="Candidate paths, checked in order. A single path string is accepted.",
    )
    invalid_values: Optional[Tuple[Any, ...]] = Field(
        None,
        alias="invalidValues",
        description="Present values that still make a candidate invalid.",
    )
    error: Any = Field(None, description="Opaque payload reported verbatim on failure.")

    @field_validator("required", mode="before")
    @classmethod
    def wrap_single_path(cls, v: Any) -> Any:
        if isinstance(v, str):
            return (v,)
        return v

    @field_validator("required")
    @classmethod
    def validate_paths(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        if not v:
            raise ValueError("required must name at least one path")
        if any(not path for path in v):
            raise ValueError("required paths must be non-empty strings")
        return v

    @field_validator("invalid_values", mode="before")
    @classmethod
    def collect_invalid_values(cls, v: Any) -> Any:
        if v is None:
            return v
        if isinstance(v, (str, bytes, Mapping)) or not isinstance(v, Iterable):
            raise ValueError("invalidValues must be a list, tuple or set of values")
        return tuple(v)

    @property
    def has_custom_error(self) -> bool:
        """
        True when ``error`` should replace the generated message.

        ``None``, ``False``, ``""``, numeric zero and NaN count as no error;
        any other payload, ``{}`` and ``[]`` included, is used verbatim.
        """
        err = self.error
        if err is None or isinstance(err, str):
            return bool(err)
        if isinstance(err, numbers.Number):
            # NaN != NaN
            return bool(err) and err == err
        return True


def to_descriptor(raw: Any, index: Optional[int] = None) -> PropertyDescriptor:
    """
    Normalize *raw* into a PropertyDescriptor.

    Raises:
        DescriptorError: if *raw* is neither a mapping nor a descriptor, or
            fails model validation.
    """
    if isinstance(raw, PropertyDescriptor):
        return raw
    if not isinstance(raw, Mapping):
        raise DescriptorError(
            f"expected a mapping or PropertyDescriptor, got {type(raw).__name__}",
            index,
        )
    try:
        return PropertyDescriptor.model_validate(dict(raw))
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'descriptor'}: {err['msg']}"
            for err in e.errors()
        )
        raise DescriptorError(details, index) from e


def to_descriptors(raw_descriptors: Iterable[Any]) -> List[PropertyDescriptor]:
    """Normalize an ordered collection of raw descriptors."""
    if isinstance(raw_descriptors, (str, bytes, Mapping)) or not isinstance(raw_descriptors, Iterable):
        raise DescriptorError(
            f"descriptors must be a list of descriptors, got {type(raw_descriptors).__name__}"
        )
    return [to_descriptor(raw, idx) for idx, raw in enumerate(raw_descriptors)]
