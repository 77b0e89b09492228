"""
FHIR cross-version transformation.

Converters for each version pair live in their own subpackage and register
themselves with the registry on import.
"""

from src.transform.registry import convert_resource, get_converter
from src.transform import v14_30  # noqa: F401

__all__ = ["convert_resource", "get_converter"]
