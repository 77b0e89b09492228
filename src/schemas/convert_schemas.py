"""Schemas for conversion and loading endpoints."""

from typing import Any

from pydantic import BaseModel, Field


class ConvertRequest(BaseModel):
    """Request model for converting a single resource."""

    resource: dict[str, Any] = Field(description="FHIR JSON resource")
    source_version: str = Field(
        description="FHIR version the resource is authored in, e.g. 1.4.0 or STU3"
    )
    target_version: str = Field(description="FHIR version to convert into")


class ConvertResponse(BaseModel):
    """Response model for a single resource conversion."""

    resource: dict[str, Any] | None = Field(
        default=None,
        description="Converted resource, or null when the source carried no data",
    )
    source_family: str
    target_family: str


class LoadRequest(BaseModel):
    """Request model for loading resources into the native version."""

    fhir_version: str = Field(description="Declared FHIR version of the resources")
    resources: list[dict[str, Any]] = Field(
        description="Resource documents (Bundles are expanded)"
    )
    types: list[str] | None = Field(
        default=None,
        description="Resource types to load. Defaults to the configured types.",
    )
    patch_urls: bool | None = Field(
        default=None,
        description="Patch core canonical URLs. Defaults to the configured value.",
    )
    kill_primitives: bool | None = Field(
        default=None,
        description="Drop primitive-type StructureDefinitions. Defaults to the configured value.",
    )
    web_root: str | None = Field(
        default=None,
        description="Web root the resources are published under",
    )


class LoadedResource(BaseModel):
    """A loaded resource with its publication metadata."""

    resource: dict[str, Any]
    path: str | None = None
    webroot: str = ""


class SkippedResource(BaseModel):
    """A resource that was not loaded, with the reason."""

    resource_type: str
    id: str | None = None
    reason: str


class LoadResponse(BaseModel):
    """Response model for a load request."""

    fhir_version: str
    family: str
    native_version: str
    resources: list[LoadedResource]
    count: int
    skipped: list[SkippedResource] = Field(
        default_factory=list,
        description="Resources of a requested type with no model or converter for the version",
    )
