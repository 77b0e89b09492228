"""
DSTU2016May (FHIR 1.4) models.

The May 2016 ballot release that sits between DSTU2 and STU3.
"""

from src.fhir.dstu2016may.datatypes import (
    Boolean,
    Code,
    CodeableConcept,
    Coding,
    ConformanceResourceStatus,
    ContactPoint,
    ContactPointSystem,
    ContactPointUse,
    Date,
    DateTime,
    Decimal,
    DomainResource,
    Id,
    Identifier,
    IdentifierUse,
    Instant,
    Integer,
    Markdown,
    Meta,
    Narrative,
    NarrativeStatus,
    Period,
    Reference,
    Resource,
    String,
    Uri,
)
from src.fhir.dstu2016may.value_set import (
    ConceptReference,
    ConceptReferenceDesignation,
    ConceptSet,
    ConceptSetFilter,
    FilterOperator,
    ValueSet,
    ValueSetCompose,
    ValueSetContact,
    ValueSetExpansion,
    ValueSetExpansionContains,
    ValueSetExpansionParameter,
)

__all__ = [
    "Boolean",
    "Code",
    "CodeableConcept",
    "Coding",
    "ConceptReference",
    "ConceptReferenceDesignation",
    "ConceptSet",
    "ConceptSetFilter",
    "ConformanceResourceStatus",
    "ContactPoint",
    "ContactPointSystem",
    "ContactPointUse",
    "Date",
    "DateTime",
    "Decimal",
    "DomainResource",
    "FilterOperator",
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
    "ValueSet",
    "ValueSetCompose",
    "ValueSetContact",
    "ValueSetExpansion",
    "ValueSetExpansionContains",
    "ValueSetExpansionParameter",
]
