"""
Resource loaders and the version dispatcher.

A loader reads resources authored in one FHIR version family and turns them
into native (STU3) models: parse with the family's models, convert, then
post-process (drop primitive types, patch URLs, record publication paths).
loader_factory picks the loader for a package from its declared FHIR version.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from src.exceptions import UnsupportedConversionError
from src.fhir import stu3
from src.fhir.base import FhirResource
from src.fhir.parsing import parse_resource
from src.fhir.versions import NATIVE_FAMILY, VersionFamily, classify_version
from src.loaders.knowledge import KnowledgeProvider, NullKnowledgeProvider
from src.loaders.package import PackageDescriptor
from src.settings import Settings
from src.transform import convert_resource
from src.transform.url_patcher import UrlPatcher

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SkippedResource:
    """A resource the loader could not convert, and why."""

    resource_type: str
    id: str | None
    reason: str


@dataclass(frozen=True)
class LoaderConfig:
    """Post-processing switches, fixed for a loader and its sub-loaders."""

    patch_urls: bool = False
    kill_primitives: bool = False

    @classmethod
    def from_settings(cls, settings: Settings) -> "LoaderConfig":
        return cls(
            patch_urls=settings.patch_urls,
            kill_primitives=settings.kill_primitives,
        )


class ResourceLoader:
    """
    Loads resources of one version family into native models.

    Resources of a requested type that have no model or converter for the
    family are recorded in skipped.

    Args:
        family: Version family the loaded resources are authored in
        types: Resource types to load; others are skipped
        knowledge: Provider of publication paths
        config: Post-processing switches
    """

    def __init__(
        self,
        family: VersionFamily,
        types: Iterable[str],
        knowledge: KnowledgeProvider | None = None,
        config: LoaderConfig | None = None,
    ):
        self.family = family
        self.types = frozenset(types)
        self.knowledge = knowledge or NullKnowledgeProvider()
        self.config = config or LoaderConfig()
        self.skipped: list[SkippedResource] = []
        self.patcher = UrlPatcher(self.version_string(), enabled=self.config.patch_urls)

    def version_string(self) -> str:
        """Version namespace segment this loader patches URLs into."""
        return self.family.value

    def get_resource_path(self, resource: FhirResource) -> str | None:
        return self.knowledge.get_resource_path(resource)

    def set_path(self, resource: FhirResource) -> None:
        """Record the publication path and web root on a loaded resource."""
        path = self.knowledge.get_resource_path(resource)
        resource.set_user_data("webroot", self.knowledge.get_web_root() or "")
        if path is not None:
            resource.set_user_data("path", path)

    def get_new_loader(self, package: PackageDescriptor) -> "ResourceLoader":
        """Loader for another package, sharing this loader's types and config."""
        return loader_factory(package, self.types, self.knowledge, self.config)

    def load_package(self, package: PackageDescriptor) -> list[FhirResource]:
        """Load every resource of an accepted type the package contains."""
        loaded: list[FhirResource] = []
        for data in package.list_resources(self.types):
            loaded.extend(self.load_resource(data))
        logger.info(
            "Loaded %d resources (%d skipped) from package %s#%s (FHIR %s)",
            len(loaded),
            len(self.skipped),
            package.name,
            package.version,
            package.fhir_version,
        )
        return loaded

    def load_resource(self, data: dict[str, Any]) -> list[FhirResource]:
        """
        Load one resource document, or every entry of a Bundle.

        Args:
            data: Resource JSON in this loader's version family

        Returns:
            Native resources, in document order

        Raises:
            LoaderError: If a resource does not fit its model
        """
        if data.get("resourceType") == "Bundle":
            loaded: list[FhirResource] = []
            for entry in data.get("entry", []):
                resource = entry.get("resource")
                if resource:
                    loaded.extend(self.load_resource(resource))
            return loaded

        resource = self._load_single(data)
        return [resource] if resource is not None else []

    def _load_single(self, data: dict[str, Any]) -> FhirResource | None:
        resource_type = data.get("resourceType")
        if resource_type not in self.types:
            logger.debug("Skipping %s: type not requested", resource_type)
            return None

        try:
            source = parse_resource(data, self.family)
            resource = convert_resource(source, self.family, NATIVE_FAMILY)
        except UnsupportedConversionError as e:
            logger.warning("Skipping %s/%s: %s", resource_type, data.get("id"), e)
            self.skipped.append(SkippedResource(resource_type, data.get("id"), str(e)))
            return None

        if resource is None:
            return None
        if self.config.kill_primitives and _is_primitive_type(resource):
            logger.debug("Dropping primitive type definition %s", resource.id)
            return None

        self.patcher.patch_resource(resource)
        self.set_path(resource)
        return resource


def _is_primitive_type(resource: FhirResource) -> bool:
    return (
        isinstance(resource, stu3.StructureDefinition)
        and resource.kind is not None
        and resource.kind.value == stu3.StructureDefinitionKind.PRIMITIVE_TYPE
    )


def loader_factory(
    package: PackageDescriptor,
    types: Iterable[str],
    knowledge: KnowledgeProvider | None = None,
    config: LoaderConfig | None = None,
) -> ResourceLoader:
    """
    Build the loader for a package from its declared FHIR version.

    Args:
        package: Package to load
        types: Resource types to load
        knowledge: Provider to specialise for the package
        config: Post-processing switches for the new loader

    Returns:
        A ResourceLoader for the package's version family

    Raises:
        UnsupportedVersionError: If the FHIR version belongs to no supported family
    """
    family = classify_version(package.fhir_version)
    knowledge = knowledge or NullKnowledgeProvider()
    logger.debug(
        "Package %s declares FHIR %s: using %s loader",
        package.name,
        package.fhir_version,
        family.name,
    )
    return ResourceLoader(family, types, knowledge.for_new_package(package), config)
