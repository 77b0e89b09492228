"""
Loader knowledge providers.

A knowledge provider knows where loaded resources are published, so the
loader can record a path and web root on each resource.
"""

from typing import Protocol

from src.fhir.base import FhirResource
from src.loaders.package import PackageDescriptor


class KnowledgeProvider(Protocol):
    def get_resource_path(self, resource: FhirResource) -> str | None: ...

    def get_web_root(self) -> str | None: ...

    def for_new_package(self, package: PackageDescriptor) -> "KnowledgeProvider": ...


class NullKnowledgeProvider:
    """Knows nothing: no paths and no web root."""

    def get_resource_path(self, resource: FhirResource) -> str | None:
        return None

    def get_web_root(self) -> str | None:
        return None

    def for_new_package(self, package: PackageDescriptor) -> "NullKnowledgeProvider":
        return self


class PackageKnowledgeProvider:
    """Resources are published as <Type>-<id>.html under the package web root."""

    def __init__(self, web_root: str | None = None):
        self.web_root = web_root.rstrip("/") if web_root else None

    def get_resource_path(self, resource: FhirResource) -> str | None:
        if not resource.id:
            return None
        page = f"{resource.resource_type}-{resource.id}.html"
        if self.web_root is None:
            return page
        return f"{self.web_root}/{page}"

    def get_web_root(self) -> str | None:
        return self.web_root

    def for_new_package(self, package: PackageDescriptor) -> "PackageKnowledgeProvider":
        return PackageKnowledgeProvider(package.web_root)
