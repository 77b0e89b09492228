"""
Conversion service.

Thin facade over the parser, converter registry and loaders used by the HTTP
layer. Works on FHIR JSON dicts in and out.
"""

import decimal
import logging
from dataclasses import dataclass, field
from typing import Any

from src.fhir.parsing import parse_resource
from src.fhir.versions import NATIVE_FAMILY, VersionFamily, classify_version
from src.loaders import (
    LoaderConfig,
    MemoryPackage,
    PackageKnowledgeProvider,
    SkippedResource,
    loader_factory,
)
from src.settings import Settings, settings
from src.transform import convert_resource

logger = logging.getLogger(__name__)


def _wire_json(value: Any) -> Any:
    """Copy of resource JSON with decimals turned back into JSON numbers."""
    if isinstance(value, dict):
        return {key: _wire_json(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_wire_json(item) for item in value]
    if isinstance(value, decimal.Decimal):
        return int(value) if value.as_tuple().exponent >= 0 else float(value)
    return value


@dataclass
class LoadResult:
    """Outcome of loading a set of resources into the native version."""

    family: VersionFamily
    resources: list[dict[str, Any]]
    paths: list[str | None]
    web_roots: list[str]
    skipped: list[SkippedResource] = field(default_factory=list)


class ConversionService:
    """Converts single resources and loads resource sets."""

    def __init__(self, app_settings: Settings | None = None):
        self.settings = app_settings or settings

    def supported_versions(self) -> list[str]:
        return [family.value for family in VersionFamily]

    def native_version(self) -> str:
        return NATIVE_FAMILY.value

    def convert(
        self,
        resource: dict[str, Any],
        source_version: str,
        target_version: str,
    ) -> tuple[dict[str, Any] | None, VersionFamily, VersionFamily]:
        """
        Convert one resource between FHIR versions.

        Args:
            resource: Resource JSON authored in source_version
            source_version: Declared source FHIR version ("1.4.0", "STU3", ...)
            target_version: Requested target FHIR version

        Returns:
            Tuple of (converted resource JSON or None, source family, target family)

        Raises:
            UnsupportedVersionError: If either version is not supported
            UnsupportedConversionError: If there is no model or converter
            LoaderError: If the resource does not fit the source model
        """
        source = classify_version(source_version)
        target = classify_version(target_version)

        parsed = parse_resource(resource, source)
        converted = convert_resource(parsed, source, target)
        logger.info(
            "Converted %s from %s to %s", parsed.resource_type, source.value, target.value
        )
        if converted is None:
            return None, source, target
        return _wire_json(converted.to_json()), source, target

    def load(
        self,
        fhir_version: str,
        resources: list[dict[str, Any]],
        types: list[str] | None = None,
        patch_urls: bool | None = None,
        kill_primitives: bool | None = None,
        web_root: str | None = None,
    ) -> LoadResult:
        """
        Load resources of a declared FHIR version into native models.

        Unset switches fall back to the configured defaults.

        Raises:
            UnsupportedVersionError: If the FHIR version is not supported
            LoaderError: If a resource does not fit its model
        """
        defaults = LoaderConfig.from_settings(self.settings)
        config = LoaderConfig(
            patch_urls=defaults.patch_urls if patch_urls is None else patch_urls,
            kill_primitives=(
                defaults.kill_primitives if kill_primitives is None else kill_primitives
            ),
        )
        package = MemoryPackage(
            fhir_version=fhir_version, resources=resources, web_root=web_root
        )
        loader = loader_factory(
            package,
            types or self.settings.default_types,
            PackageKnowledgeProvider(),
            config,
        )
        loaded = loader.load_package(package)
        return LoadResult(
            family=loader.family,
            resources=[_wire_json(resource.to_json()) for resource in loaded],
            paths=[resource.get_user_data("path") for resource in loaded],
            web_roots=[resource.get_user_data("webroot", "") for resource in loaded],
            skipped=list(loader.skipped),
        )
