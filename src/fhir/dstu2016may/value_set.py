"""
DSTU2016May (FHIR 1.4) ValueSet.

http://hl7.org/fhir/2016May/valueset.html
"""

from typing import Literal

from pydantic import Field

from src.fhir.base import BackboneElement, Enumeration, FhirEnum
from src.fhir.dstu2016may.datatypes import (
    Boolean,
    Code,
    CodeableConcept,
    Coding,
    ConformanceResourceStatus,
    ContactPoint,
    Date,
    DateTime,
    Decimal,
    DomainResource,
    Identifier,
    Integer,
    Markdown,
    String,
    Uri,
)


class FilterOperator(FhirEnum):
    EQUAL = "="
    IS_A = "is-a"
    IS_NOT_A = "is-not-a"
    REGEX = "regex"
    IN = "in"
    NOT_IN = "not-in"
    NULL = "null"


class ValueSetContact(BackboneElement):
    name: String | None = None
    telecom: list[ContactPoint] = Field(default_factory=list)


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


class ValueSetCompose(BackboneElement):
    # Whole value sets pulled in by canonical URL
    import_: list[Uri] = Field(default_factory=list, alias="import")
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
    version: String | None = None
    code: Code | None = None
    display: String | None = None
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
    identifier: Identifier | None = None
    version: String | None = None
    name: String | None = None
    status: Enumeration[ConformanceResourceStatus] | None = None
    experimental: Boolean | None = None
    publisher: String | None = None
    contact: list[ValueSetContact] = Field(default_factory=list)
    date: DateTime | None = None
    locked_date: Date | None = None
    description: Markdown | None = None
    use_context: list[CodeableConcept] = Field(default_factory=list)
    immutable: Boolean | None = None
    requirements: Markdown | None = None
    copyright: Markdown | None = None
    extensible: Boolean | None = None
    compose: ValueSetCompose | None = None
    expansion: ValueSetExpansion | None = None
