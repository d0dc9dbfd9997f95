"""
Descriptor loading — builds descriptor lists from JSON documents.

Stages:
    1. JSON parse (``NaN`` literals are accepted)
    2. Schema conformance (DESCRIPTOR_SET_SCHEMA)
    3. Model normalization (PropertyDescriptor)
"""
import json
import logging
from pathlib import Path
from typing import Any, List, Union

from jsonschema import ValidationError, validate

from object_validator.config.schemas import DESCRIPTOR_SET_SCHEMA
from object_validator.models.descriptor import DescriptorError, PropertyDescriptor, to_descriptors

logger = logging.getLogger(__name__)


def _decode(source: Union[str, Path, List[Any]]) -> Any:
    if isinstance(source, Path):
        logger.debug("Loading descriptors from %s", source)
        source = source.read_text(encoding="utf-8")

    if isinstance(source, str):
        try:
            return json.loads(source)
        except json.JSONDecodeError as e:
            raise DescriptorError(f"Invalid JSON: {e}") from e

    return source


def load_descriptors(source: Union[str, Path, List[Any]]) -> List[PropertyDescriptor]:
    """
    Load an ordered descriptor list.

    Args:
        source: JSON text, a path to a JSON file, or an already-decoded list
            of descriptor mappings.

    Returns:
        List of PropertyDescriptor, in document order.

    Raises:
        DescriptorError: on undecodable JSON or a schema violation.
    """
    data = _decode(source)
    if isinstance(data, tuple):
        data = list(data)

    try:
        validate(instance=data, schema=DESCRIPTOR_SET_SCHEMA)
    except ValidationError as e:
        location = "/".join(str(p) for p in e.absolute_path) or "<root>"
        raise DescriptorError(f"Schema violation at {location}: {e.message}") from e

    descriptors = to_descriptors(data)
    if not descriptors:
        logger.warning("Descriptor set is empty; every object will validate")
    return descriptors
