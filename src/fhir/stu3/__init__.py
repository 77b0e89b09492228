"""STU3 (FHIR 3.0) models."""

from src.fhir.stu3.conformance import (
    BindingStrength,
    CodeSystem,
    ElementDefinition,
    ElementDefinitionBinding,
    ElementDefinitionType,
    OperationDefinition,
    OperationDefinitionParameter,
    OperationDefinitionParameterBinding,
    OperationParameterUse,
    StructureDefinition,
    StructureDefinitionDifferential,
    StructureDefinitionKind,
    StructureDefinitionSnapshot,
)
from src.fhir.stu3.datatypes import (
    Boolean,
    Code,
    CodeableConcept,
    Coding,
    ContactDetail,
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
    PublicationStatus,
    Reference,
    Resource,
    String,
    Uri,
    UsageContext,
)
from src.fhir.stu3.value_set import (
    ConceptReference,
    ConceptReferenceDesignation,
    ConceptSet,
    ConceptSetFilter,
    FilterOperator,
    ValueSet,
    ValueSetCompose,
    ValueSetExpansion,
    ValueSetExpansionContains,
    ValueSetExpansionParameter,
)

__all__ = [
    "BindingStrength",
    "Boolean",
    "Code",
    "CodeSystem",
    "CodeableConcept",
    "Coding",
    "ConceptReference",
    "ConceptReferenceDesignation",
    "ConceptSet",
    "ConceptSetFilter",
    "ContactDetail",
    "ContactPoint",
    "ContactPointSystem",
    "ContactPointUse",
    "Date",
    "DateTime",
    "Decimal",
    "DomainResource",
    "ElementDefinition",
    "ElementDefinitionBinding",
    "ElementDefinitionType",
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
    "OperationDefinition",
    "OperationDefinitionParameter",
    "OperationDefinitionParameterBinding",
    "OperationParameterUse",
    "Period",
    "PublicationStatus",
    "Reference",
    "Resource",
    "String",
    "StructureDefinition",
    "StructureDefinitionDifferential",
    "StructureDefinitionKind",
    "StructureDefinitionSnapshot",
    "Uri",
    "UsageContext",
    "ValueSet",
    "ValueSetCompose",
    "ValueSetExpansion",
    "ValueSetExpansionContains",
    "ValueSetExpansionParameter",
]
