"""
DSTU2016May (FHIR 1.4) primitives, datatypes and resource bases.

Only the datatypes the ValueSet resource is built from are modelled.
"""

import decimal

from pydantic import Field

from src.fhir.base import (
    BackboneElement,
    Element,
    Enumeration,
    Extension,
    FhirEnum,
    FhirResource,
    Primitive,
)

# --- Primitives ---------------------------------------------------------------


class String(Primitive[str]):
    pass


class Boolean(Primitive[bool]):
    pass


class Integer(Primitive[int]):
    pass


class Decimal(Primitive[decimal.Decimal]):
    """Kept as decimal.Decimal so significant trailing zeros survive."""


class DateTime(Primitive[str]):
    pass


class Date(Primitive[str]):
    pass


class Instant(Primitive[str]):
    pass


class Code(Primitive[str]):
    pass


class Uri(Primitive[str]):
    pass


class Id(Primitive[str]):
    pass


class Markdown(Primitive[str]):
    pass


# --- Enumerations -------------------------------------------------------------


class NarrativeStatus(FhirEnum):
    GENERATED = "generated"
    EXTENSIONS = "extensions"
    ADDITIONAL = "additional"
    EMPTY = "empty"
    NULL = "null"


class IdentifierUse(FhirEnum):
    USUAL = "usual"
    OFFICIAL = "official"
    TEMP = "temp"
    SECONDARY = "secondary"
    NULL = "null"


class ContactPointSystem(FhirEnum):
    PHONE = "phone"
    FAX = "fax"
    EMAIL = "email"
    PAGER = "pager"
    OTHER = "other"
    NULL = "null"


class ContactPointUse(FhirEnum):
    HOME = "home"
    WORK = "work"
    TEMP = "temp"
    OLD = "old"
    MOBILE = "mobile"
    NULL = "null"


class ConformanceResourceStatus(FhirEnum):
    DRAFT = "draft"
    ACTIVE = "active"
    RETIRED = "retired"
    NULL = "null"


# --- Complex datatypes --------------------------------------------------------


class Coding(Element):
    system: Uri | None = None
    version: String | None = None
    code: Code | None = None
    display: String | None = None
    user_selected: Boolean | None = None


class CodeableConcept(Element):
    coding: list[Coding] = Field(default_factory=list)
    text: String | None = None


class Period(Element):
    start: DateTime | None = None
    end: DateTime | None = None


class Reference(Element):
    reference: String | None = None
    display: String | None = None


class Identifier(Element):
    use: Enumeration[IdentifierUse] | None = None
    type: CodeableConcept | None = None
    system: Uri | None = None
    value: String | None = None
    period: Period | None = None
    assigner: Reference | None = None


class ContactPoint(Element):
    system: Enumeration[ContactPointSystem] | None = None
    value: String | None = None
    use: Enumeration[ContactPointUse] | None = None
    rank: Integer | None = None
    period: Period | None = None


class Meta(Element):
    version_id: Id | None = None
    last_updated: Instant | None = None
    profile: list[Uri] = Field(default_factory=list)
    security: list[Coding] = Field(default_factory=list)
    tag: list[Coding] = Field(default_factory=list)


class Narrative(Element):
    status: Enumeration[NarrativeStatus] | None = None
    div: str | None = None


# --- Resource bases -----------------------------------------------------------


class Resource(FhirResource):
    resource_type: str
    id: str | None = None
    meta: Meta | None = None
    implicit_rules: Uri | None = None
    language: Code | None = None


class DomainResource(Resource):
    text: Narrative | None = None
    extension: list[Extension] = Field(default_factory=list)
    modifier_extension: list[Extension] = Field(default_factory=list)


__all__ = [
    "BackboneElement",
    "Boolean",
    "Code",
    "CodeableConcept",
    "Coding",
    "ConformanceResourceStatus",
    "ContactPoint",
    "ContactPointSystem",
    "ContactPointUse",
    "Date",
    "DateTime",
    "Decimal",
    "DomainResource",
    "Element",
    "Id",
    "Identifier",
    "IdentifierUse",
    "Instant",
    "Integer",
    "Markdown",
    "Meta",
    "Narrative",
    "NarrativeStatus",
    "Period",
    "Reference",
    "Resource",
    "String",
    "Uri",
]
