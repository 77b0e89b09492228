"""
STU3 conformance resources touched by URL patching.

Only the canonical URL and the places that hold references to other
canonical resources are modelled. Everything else in these resources is kept
as extra payload so it survives loading untouched.
"""

from typing import Literal

from pydantic import ConfigDict, Field

from src.fhir.base import BackboneElement, Element, Enumeration, FhirEnum
from src.fhir.stu3.datatypes import (
    Boolean,
    Code,
    DomainResource,
    Integer,
    PublicationStatus,
    Reference,
    String,
    Uri,
)


class StructureDefinitionKind(FhirEnum):
    PRIMITIVE_TYPE = "primitive-type"
    COMPLEX_TYPE = "complex-type"
    RESOURCE = "resource"
    LOGICAL = "logical"
    NULL = "null"


class BindingStrength(FhirEnum):
    REQUIRED = "required"
    EXTENSIBLE = "extensible"
    PREFERRED = "preferred"
    EXAMPLE = "example"
    NULL = "null"


class OperationParameterUse(FhirEnum):
    IN = "in"
    OUT = "out"
    NULL = "null"


# --- StructureDefinition ------------------------------------------------------


class ElementDefinitionType(Element):
    model_config = ConfigDict(extra="allow")

    code: Uri | None = None
    profile: Uri | None = None
    target_profile: Uri | None = None


class ElementDefinitionBinding(Element):
    model_config = ConfigDict(extra="allow")

    strength: Enumeration[BindingStrength] | None = None
    description: String | None = None
    value_set_uri: Uri | None = None
    value_set_reference: Reference | None = None


class ElementDefinition(Element):
    model_config = ConfigDict(extra="allow")

    path: String | None = None
    slice_name: String | None = None
    type: list[ElementDefinitionType] = Field(default_factory=list)
    binding: ElementDefinitionBinding | None = None


class StructureDefinitionSnapshot(BackboneElement):
    element: list[ElementDefinition] = Field(default_factory=list)


class StructureDefinitionDifferential(BackboneElement):
    element: list[ElementDefinition] = Field(default_factory=list)


class StructureDefinition(DomainResource):
    model_config = ConfigDict(extra="allow")

    resource_type: Literal["StructureDefinition"] = "StructureDefinition"
    url: Uri | None = None
    name: String | None = None
    status: Enumeration[PublicationStatus] | None = None
    kind: Enumeration[StructureDefinitionKind] | None = None
    abstract: Boolean | None = None
    type: Code | None = None
    base_definition: Uri | None = None
    snapshot: StructureDefinitionSnapshot | None = None
    differential: StructureDefinitionDifferential | None = None


# --- OperationDefinition ------------------------------------------------------


class OperationDefinitionParameterBinding(BackboneElement):
    strength: Enumeration[BindingStrength] | None = None
    value_set_uri: Uri | None = None
    value_set_reference: Reference | None = None


class OperationDefinitionParameter(BackboneElement):
    model_config = ConfigDict(extra="allow")

    name: Code | None = None
    use: Enumeration[OperationParameterUse] | None = None
    min: Integer | None = None
    max: String | None = None
    type: Code | None = None
    binding: OperationDefinitionParameterBinding | None = None
    part: list["OperationDefinitionParameter"] = Field(default_factory=list)


class OperationDefinition(DomainResource):
    model_config = ConfigDict(extra="allow")

    resource_type: Literal["OperationDefinition"] = "OperationDefinition"
    url: Uri | None = None
    name: String | None = None
    status: Enumeration[PublicationStatus] | None = None
    kind: Code | None = None
    code: Code | None = None
    parameter: list[OperationDefinitionParameter] = Field(default_factory=list)


# --- CodeSystem ---------------------------------------------------------------


class CodeSystem(DomainResource):
    model_config = ConfigDict(extra="allow")

    resource_type: Literal["CodeSystem"] = "CodeSystem"
    url: Uri | None = None
    name: String | None = None
    status: Enumeration[PublicationStatus] | None = None
    content: Code | None = None
    value_set: Uri | None = None
