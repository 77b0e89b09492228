"""
Converter registry.

Structural converters register themselves under
(source family, target family, resource type). Loaders and the HTTP layer
look converters up here instead of importing version-pair modules directly.
"""

import logging
from collections.abc import Callable
from typing import Any

from src.exceptions import UnsupportedConversionError
from src.fhir.base import FhirResource
from src.fhir.versions import VersionFamily

logger = logging.getLogger(__name__)

Converter = Callable[[Any], FhirResource | None]

CONVERTERS: dict[tuple[VersionFamily, VersionFamily, str], Converter] = {}


def register(source: VersionFamily, target: VersionFamily, resource_type: str):
    """Decorator registering a resource converter for a version pair."""

    def decorator(func: Converter) -> Converter:
        CONVERTERS[(source, target, resource_type)] = func
        return func

    return decorator


def get_converter(
    source: VersionFamily, target: VersionFamily, resource_type: str
) -> Converter:
    """
    Look up the converter for a resource type between two families.

    Raises:
        UnsupportedConversionError: If no converter is registered
    """
    converter = CONVERTERS.get((source, target, resource_type))
    if converter is None:
        raise UnsupportedConversionError(
            f"No converter for {resource_type} from {source.value} to {target.value}"
        )
    return converter


def convert_resource(
    resource: FhirResource, source: VersionFamily, target: VersionFamily
) -> FhirResource | None:
    """
    Convert a resource between version families.

    A same-family conversion returns a deep copy, so the caller never shares
    a tree with its input.

    Args:
        resource: Parsed source-version resource
        source: Family the resource belongs to
        target: Family to convert into

    Returns:
        The converted resource, or None when the source is empty

    Raises:
        UnsupportedConversionError: If no converter is registered
    """
    if source == target:
        return resource.model_copy(deep=True)

    converter = get_converter(source, target, resource.resource_type)
    logger.debug(
        "Converting %s/%s from %s to %s",
        resource.resource_type,
        resource.id,
        source.value,
        target.value,
    )
    return converter(resource)
