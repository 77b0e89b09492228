"""
Package descriptors.

A package is a set of FHIR resources published together for one declared
FHIR version. Loaders only need the package metadata and a way to enumerate
its resource documents.
"""

import decimal
import json
import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol

from src.exceptions import LoaderError

logger = logging.getLogger(__name__)

MANIFEST_NAME = "package.json"


class PackageDescriptor(Protocol):
    """What a loader needs to know about a package."""

    name: str
    version: str
    fhir_version: str
    path: str | None
    web_root: str | None

    def list_resources(
        self, types: Iterable[str] | None = None
    ) -> Iterator[dict[str, Any]]: ...


def _wanted(resource: dict[str, Any], types: Iterable[str] | None) -> bool:
    # Bundles always pass; the loader filters their entries by type
    resource_type = resource.get("resourceType")
    return types is None or resource_type == "Bundle" or resource_type in set(types)


@dataclass
class MemoryPackage:
    """Package whose resources are already in memory (e.g. from a request)."""

    fhir_version: str
    resources: list[dict[str, Any]] = field(default_factory=list)
    name: str = "memory"
    version: str = "current"
    path: str | None = None
    web_root: str | None = None

    def list_resources(
        self, types: Iterable[str] | None = None
    ) -> Iterator[dict[str, Any]]:
        for resource in self.resources:
            if _wanted(resource, types):
                yield resource


@dataclass
class FolderPackage:
    """
    Package unpacked into a folder.

    The folder (or its package/ subfolder) holds a package.json manifest and
    one JSON document per resource.
    """

    name: str
    version: str
    fhir_version: str
    folder: Path
    path: str | None = None
    web_root: str | None = None

    @classmethod
    def from_path(cls, folder: str | Path) -> "FolderPackage":
        """
        Read a package folder's manifest.

        Args:
            folder: Package root, or the package/ folder inside it

        Returns:
            FolderPackage describing the folder

        Raises:
            LoaderError: If there is no readable manifest or it names no FHIR version
        """
        folder = Path(folder)
        if not (folder / MANIFEST_NAME).exists() and (folder / "package").is_dir():
            folder = folder / "package"

        manifest_path = folder / MANIFEST_NAME
        try:
            manifest = json.loads(manifest_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise LoaderError(f"Cannot read package manifest {manifest_path}") from e

        fhir_versions = manifest.get("fhirVersions") or manifest.get(
            "fhir-version-list"
        )
        if not fhir_versions:
            raise LoaderError(f"Package manifest {manifest_path} declares no FHIR version")

        return cls(
            name=manifest.get("name", folder.name),
            version=manifest.get("version", "current"),
            fhir_version=fhir_versions[0],
            folder=folder,
            path=str(folder),
            web_root=manifest.get("url"),
        )

    def list_resources(
        self, types: Iterable[str] | None = None
    ) -> Iterator[dict[str, Any]]:
        for file_path in sorted(self.folder.glob("*.json")):
            if file_path.name == MANIFEST_NAME or file_path.name.startswith("."):
                continue
            try:
                resource = json.loads(
                    file_path.read_text(encoding="utf-8"), parse_float=decimal.Decimal
                )
            except (OSError, json.JSONDecodeError) as e:
                raise LoaderError(f"Cannot read resource file {file_path}") from e
            if not isinstance(resource, dict) or "resourceType" not in resource:
                logger.debug("Skipping non-resource file %s", file_path.name)
                continue
            if _wanted(resource, types):
                yield resource
