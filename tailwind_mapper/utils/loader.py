"""Property mapping file loader for Tailwind Mapper."""

import logging
import os
from typing import Any, Dict

import aiofiles
import orjson

from .error import ConfigurationError

logger = logging.getLogger(__name__)

ENTRY_KEYS = {'values', 'abbreviation', 'category'}


def validate_property_mapping(data: Any) -> Dict[str, Dict[str, Any]]:
    """Validate the shape of a property mapping document.

    Expected shape::

        {"margin": {"abbreviation": "m", "category": "spacing",
                    "values": {"1.75rem": "m-7"}}}

    Args:
        data: Decoded JSON document

    Returns:
        The mapping, unchanged

    Raises:
        ConfigurationError: If the document does not have the expected shape
    """
    if not isinstance(data, dict):
        raise ConfigurationError("Property mapping must be a JSON object")

    for property_name, entry in data.items():
        if not isinstance(entry, dict):
            raise ConfigurationError(f"Mapping for {property_name!r} must be an object")
        unknown = set(entry) - ENTRY_KEYS
        if unknown:
            raise ConfigurationError(
                f"Unknown keys for {property_name!r}: {', '.join(sorted(unknown))}"
            )
        for key in ('abbreviation', 'category'):
            if key in entry and not isinstance(entry[key], str):
                raise ConfigurationError(f"{key!r} for {property_name!r} must be a string")
        values = entry.get('values', {})
        if not isinstance(values, dict) or not all(
            isinstance(value, str) and isinstance(class_name, str)
            for value, class_name in values.items()
        ):
            raise ConfigurationError(
                f"'values' for {property_name!r} must map CSS values to class names"
            )
    return data


async def load_property_mapping(path: str) -> Dict[str, Dict[str, Any]]:
    """Read and validate a property mapping file.

    Args:
        path: Path to a JSON file

    Returns:
        Mapping suitable for ``PropertyTable.extend``

    Raises:
        ConfigurationError: If the file is missing, unreadable or malformed
    """
    if not os.path.isfile(path):
        raise ConfigurationError(f"Property mapping file not found: {path}")

    try:
        async with aiofiles.open(path, 'rb') as f:
            content = await f.read()
    except OSError as e:
        raise ConfigurationError(f"Failed to read property mapping {path}: {e}")

    try:
        data = orjson.loads(content)
    except orjson.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in property mapping {path}: {e}")

    mapping = validate_property_mapping(data)
    logger.info(f"Loaded {len(mapping)} property mappings from {path}")
    return mapping

# Exported functions
__all__ = ['validate_property_mapping', 'load_property_mapping']
