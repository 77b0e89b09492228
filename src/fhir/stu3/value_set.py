"""
STU3 (FHIR 3.0) ValueSet.

http://hl7.org/fhir/STU3/valueset.html
"""

from typing import Literal

from pydantic import Field

from src.fhir.base import BackboneElement, Enumeration, FhirEnum
from src.fhir.stu3.datatypes import (
    Boolean,
    Code,
    CodeableConcept,
    Coding,
    ContactDetail,
    Date,
    DateTime,
    Decimal,
    DomainResource,
    Identifier,
    Integer,
    Markdown,
    PublicationStatus,
    String,
    Uri,
    UsageContext,
)


class FilterOperator(FhirEnum):
    EQUAL = "="
    IS_A = "is-a"
    DESCENDENT_OF = "descendent-of"
    IS_NOT_A = "is-not-a"
    REGEX = "regex"
    IN = "in"
    NOT_IN = "not-in"
    GENERALIZES = "generalizes"
    EXISTS = "exists"
    NULL = "null"


class ConceptReferenceDesignation(BackboneElement):
    language: Code | None = None
    use: Coding | None = None
    value: String | None = None


class ConceptReference(BackboneElement):
    code: Code | None = None
    display: String | None = None
    designation: list[ConceptReferenceDesignation] = Field(default_factory=list)


class ConceptSetFilter(BackboneElement):
    property_: Code | None = Field(default=None, alias="property")
    op: Enumeration[FilterOperator] | None = None
    value: Code | None = None


class ConceptSet(BackboneElement):
    system: Uri | None = None
    version: String | None = None
    concept: list[ConceptReference] = Field(default_factory=list)
    filter: list[ConceptSetFilter] = Field(default_factory=list)
    value_set: list[Uri] = Field(default_factory=list)


class ValueSetCompose(BackboneElement):
    locked_date: Date | None = None
    inactive: Boolean | None = None
    include: list[ConceptSet] = Field(default_factory=list)
    exclude: list[ConceptSet] = Field(default_factory=list)


class ValueSetExpansionParameter(BackboneElement):
    name: String | None = None
    value_string: String | None = None
    value_boolean: Boolean | None = None
    value_integer: Integer | None = None
    value_decimal: Decimal | None = None
    value_uri: Uri | None = None
    value_code: Code | None = None


class ValueSetExpansionContains(BackboneElement):
    system: Uri | None = None
    abstract: Boolean | None = None
    inactive: Boolean | None = None
    version: String | None = None
    code: Code | None = None
    display: String | None = None
    designation: list[ConceptReferenceDesignation] = Field(default_factory=list)
    contains: list["ValueSetExpansionContains"] = Field(default_factory=list)


class ValueSetExpansion(BackboneElement):
    identifier: Uri | None = None
    timestamp: DateTime | None = None
    total: Integer | None = None
    offset: Integer | None = None
    parameter: list[ValueSetExpansionParameter] = Field(default_factory=list)
    contains: list[ValueSetExpansionContains] = Field(default_factory=list)


class ValueSet(DomainResource):
    resource_type: Literal["ValueSet"] = "ValueSet"
    url: Uri | None = None
    identifier: list[Identifier] = Field(default_factory=list)
    version: String | None = None
    name: String | None = None
    title: String | None = None
    status: Enumeration[PublicationStatus] | None = None
    experimental: Boolean | None = None
    date: DateTime | None = None
    publisher: String | None = None
    contact: list[ContactDetail] = Field(default_factory=list)
    description: Markdown | None = None
    use_context: list[UsageContext] = Field(default_factory=list)
    jurisdiction: list[CodeableConcept] = Field(default_factory=list)
    immutable: Boolean | None = None
    purpose: Markdown | None = None
    copyright: Markdown | None = None
    extensible: Boolean | None = None
    compose: ValueSetCompose | None = None
    expansion: ValueSetExpansion | None = None
