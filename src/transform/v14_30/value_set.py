"""
ValueSet converters between DSTU2016May (1.4) and STU3 (3.0).

http://hl7.org/fhir/STU3/valueset-version-maps.html

Structural differences handled here:
- identifier: single in 1.4, repeating in 3.0 (only the first goes back)
- lockedDate: top level in 1.4, compose.lockedDate in 3.0
- requirements (1.4) is purpose (3.0)
- useContext (1.4) is split into useContext and jurisdiction (3.0)
- compose.import (1.4) becomes an include carrying only valueSet (3.0)
- contact is ValueSetContact in 1.4 and ContactDetail in 3.0
"""

from src.fhir import dstu2016may as v14
from src.fhir import stu3 as v30
from src.fhir.versions import VersionFamily
from src.transform.common import convert_list, copy_element, is_empty_except
from src.transform.enums import map_enumeration
from src.transform.registry import register
from src.transform.v14_30 import elements as el
from src.transform.v14_30 import enums

# --- ValueSet -----------------------------------------------------------------


@register(VersionFamily.R2B, VersionFamily.R3, "ValueSet")
def value_set_14_to_30(source: v14.ValueSet | None) -> v30.ValueSet | None:
    """
    Convert a 1.4 ValueSet to 3.0.

    Args:
        source: DSTU2016May ValueSet

    Returns:
        STU3 ValueSet, or None when the source is empty
    """
    if source is None or source.is_empty():
        return None
    target = v30.ValueSet()
    el.copy_domain_resource_14_to_30(source, target)
    target.url = el.uri_14_to_30(source.url)
    identifier = el.identifier_14_to_30(source.identifier)
    if identifier is not None:
        target.identifier = [identifier]
    target.version = el.string_14_to_30(source.version)
    target.name = el.string_14_to_30(source.name)
    target.status = map_enumeration(source.status, enums.STATUS_14_TO_30)
    target.experimental = el.boolean_14_to_30(source.experimental)
    target.publisher = el.string_14_to_30(source.publisher)
    target.contact = convert_list(source.contact, value_set_contact_14_to_30)
    target.date = el.date_time_14_to_30(source.date)
    target.description = el.markdown_14_to_30(source.description)

    for concept in source.use_context:
        if el.is_jurisdiction(concept):
            jurisdiction = el.codeable_concept_14_to_30(concept)
            if jurisdiction is not None:
                target.jurisdiction.append(jurisdiction)
        else:
            usage_context = codeable_concept_to_usage_context(concept)
            if usage_context is not None:
                target.use_context.append(usage_context)

    target.immutable = el.boolean_14_to_30(source.immutable)
    target.purpose = el.markdown_14_to_30(source.requirements)
    target.copyright = el.markdown_14_to_30(source.copyright)
    target.extensible = el.boolean_14_to_30(source.extensible)
    target.compose = value_set_compose_14_to_30(source.compose)

    locked_date = el.date_14_to_30(source.locked_date)
    if locked_date is not None:
        if target.compose is None:
            target.compose = v30.ValueSetCompose()
        target.compose.locked_date = locked_date

    target.expansion = value_set_expansion_14_to_30(source.expansion)
    return target


@register(VersionFamily.R3, VersionFamily.R2B, "ValueSet")
def value_set_30_to_14(source: v30.ValueSet | None) -> v14.ValueSet | None:
    """
    Convert a 3.0 ValueSet to 1.4.

    title, compose.inactive and the non-CodeableConcept useContext values
    have no 1.4 home and are dropped.

    Args:
        source: STU3 ValueSet

    Returns:
        DSTU2016May ValueSet, or None when the source is empty
    """
    if source is None or source.is_empty():
        return None
    target = v14.ValueSet()
    el.copy_domain_resource_30_to_14(source, target)
    target.url = el.uri_30_to_14(source.url)
    identifiers = convert_list(source.identifier, el.identifier_30_to_14)
    if identifiers:
        target.identifier = identifiers[0]
    target.version = el.string_30_to_14(source.version)
    target.name = el.string_30_to_14(source.name)
    target.status = map_enumeration(source.status, enums.STATUS_30_TO_14)
    target.experimental = el.boolean_30_to_14(source.experimental)
    target.publisher = el.string_30_to_14(source.publisher)
    target.contact = convert_list(source.contact, value_set_contact_30_to_14)
    target.date = el.date_time_30_to_14(source.date)
    if source.compose is not None:
        target.locked_date = el.date_30_to_14(source.compose.locked_date)
    target.description = el.markdown_30_to_14(source.description)

    for usage_context in source.use_context:
        concept = el.codeable_concept_30_to_14(usage_context.value_codeable_concept)
        if concept is not None:
            target.use_context.append(concept)
    target.use_context.extend(
        convert_list(source.jurisdiction, el.codeable_concept_30_to_14)
    )

    target.immutable = el.boolean_30_to_14(source.immutable)
    target.requirements = el.markdown_30_to_14(source.purpose)
    target.copyright = el.markdown_30_to_14(source.copyright)
    target.extensible = el.boolean_30_to_14(source.extensible)
    target.compose = value_set_compose_30_to_14(source.compose)
    target.expansion = value_set_expansion_30_to_14(source.expansion)
    return target


def codeable_concept_to_usage_context(
    source: v14.CodeableConcept | None,
) -> v30.UsageContext | None:
    """Wrap a 1.4 useContext concept as a 3.0 UsageContext value."""
    concept = el.codeable_concept_14_to_30(source)
    if concept is None:
        return None
    return v30.UsageContext(value_codeable_concept=concept)


# --- Contact ------------------------------------------------------------------


def value_set_contact_14_to_30(
    source: v14.ValueSetContact | None,
) -> v30.ContactDetail | None:
    if source is None or source.is_empty():
        return None
    target = v30.ContactDetail()
    copy_element(source, target)
    target.name = el.string_14_to_30(source.name)
    target.telecom = convert_list(source.telecom, el.contact_point_14_to_30)
    return target


def value_set_contact_30_to_14(
    source: v30.ContactDetail | None,
) -> v14.ValueSetContact | None:
    if source is None or source.is_empty():
        return None
    target = v14.ValueSetContact()
    copy_element(source, target)
    target.name = el.string_30_to_14(source.name)
    target.telecom = convert_list(source.telecom, el.contact_point_30_to_14)
    return target


# --- Compose ------------------------------------------------------------------


def value_set_compose_14_to_30(
    source: v14.ValueSetCompose | None,
) -> v30.ValueSetCompose | None:
    if source is None or source.is_empty():
        return None
    target = v30.ValueSetCompose()
    copy_element(source, target)
    # Each imported value set becomes an include of its own
    for uri in source.import_:
        value_set = el.uri_14_to_30(uri)
        if value_set is not None:
            target.include.append(v30.ConceptSet(value_set=[value_set]))
    target.include.extend(convert_list(source.include, concept_set_14_to_30))
    target.exclude = convert_list(source.exclude, concept_set_14_to_30)
    return target


def value_set_compose_30_to_14(
    source: v30.ValueSetCompose | None,
) -> v14.ValueSetCompose | None:
    # lockedDate moves to the resource and inactive has no 1.4 counterpart
    if is_empty_except(source, "locked_date", "inactive"):
        return None
    target = v14.ValueSetCompose()
    copy_element(source, target)
    for include in source.include:
        target.import_.extend(convert_list(include.value_set, el.uri_30_to_14))
        concept_set = concept_set_30_to_14(include)
        if concept_set is not None:
            target.include.append(concept_set)
    target.exclude = convert_list(source.exclude, concept_set_30_to_14)
    return target


# --- Concept sets -------------------------------------------------------------


def concept_set_14_to_30(source: v14.ConceptSet | None) -> v30.ConceptSet | None:
    if source is None or source.is_empty():
        return None
    target = v30.ConceptSet()
    copy_element(source, target)
    target.system = el.uri_14_to_30(source.system)
    target.version = el.string_14_to_30(source.version)
    target.concept = convert_list(source.concept, concept_reference_14_to_30)
    target.filter = convert_list(source.filter, concept_set_filter_14_to_30)
    return target


def concept_set_30_to_14(source: v30.ConceptSet | None) -> v14.ConceptSet | None:
    # valueSet entries are collected into compose.import by the caller
    if is_empty_except(source, "value_set"):
        return None
    target = v14.ConceptSet()
    copy_element(source, target)
    target.system = el.uri_30_to_14(source.system)
    target.version = el.string_30_to_14(source.version)
    target.concept = convert_list(source.concept, concept_reference_30_to_14)
    target.filter = convert_list(source.filter, concept_set_filter_30_to_14)
    return target


def concept_reference_14_to_30(
    source: v14.ConceptReference | None,
) -> v30.ConceptReference | None:
    if source is None or source.is_empty():
        return None
    target = v30.ConceptReference()
    copy_element(source, target)
    target.code = el.code_14_to_30(source.code)
    target.display = el.string_14_to_30(source.display)
    target.designation = convert_list(source.designation, designation_14_to_30)
    return target


def concept_reference_30_to_14(
    source: v30.ConceptReference | None,
) -> v14.ConceptReference | None:
    if source is None or source.is_empty():
        return None
    target = v14.ConceptReference()
    copy_element(source, target)
    target.code = el.code_30_to_14(source.code)
    target.display = el.string_30_to_14(source.display)
    target.designation = convert_list(source.designation, designation_30_to_14)
    return target


def designation_14_to_30(
    source: v14.ConceptReferenceDesignation | None,
) -> v30.ConceptReferenceDesignation | None:
    if source is None or source.is_empty():
        return None
    target = v30.ConceptReferenceDesignation()
    copy_element(source, target)
    target.language = el.code_14_to_30(source.language)
    target.use = el.coding_14_to_30(source.use)
    target.value = el.string_14_to_30(source.value)
    return target


def designation_30_to_14(
    source: v30.ConceptReferenceDesignation | None,
) -> v14.ConceptReferenceDesignation | None:
    if source is None or source.is_empty():
        return None
    target = v14.ConceptReferenceDesignation()
    copy_element(source, target)
    target.language = el.code_30_to_14(source.language)
    target.use = el.coding_30_to_14(source.use)
    target.value = el.string_30_to_14(source.value)
    return target


def concept_set_filter_14_to_30(
    source: v14.ConceptSetFilter | None,
) -> v30.ConceptSetFilter | None:
    if source is None or source.is_empty():
        return None
    target = v30.ConceptSetFilter()
    copy_element(source, target)
    target.property_ = el.code_14_to_30(source.property_)
    target.op = map_enumeration(source.op, enums.FILTER_OPERATOR_14_TO_30)
    target.value = el.code_14_to_30(source.value)
    return target


def concept_set_filter_30_to_14(
    source: v30.ConceptSetFilter | None,
) -> v14.ConceptSetFilter | None:
    if source is None or source.is_empty():
        return None
    target = v14.ConceptSetFilter()
    copy_element(source, target)
    target.property_ = el.code_30_to_14(source.property_)
    target.op = map_enumeration(source.op, enums.FILTER_OPERATOR_30_TO_14)
    target.value = el.code_30_to_14(source.value)
    return target


# --- Expansion ----------------------------------------------------------------


def value_set_expansion_14_to_30(
    source: v14.ValueSetExpansion | None,
) -> v30.ValueSetExpansion | None:
    if source is None or source.is_empty():
        return None
    target = v30.ValueSetExpansion()
    copy_element(source, target)
    target.identifier = el.uri_14_to_30(source.identifier)
    target.timestamp = el.date_time_14_to_30(source.timestamp)
    target.total = el.integer_14_to_30(source.total)
    target.offset = el.integer_14_to_30(source.offset)
    target.parameter = convert_list(source.parameter, expansion_parameter_14_to_30)
    target.contains = convert_list(source.contains, expansion_contains_14_to_30)
    return target


def value_set_expansion_30_to_14(
    source: v30.ValueSetExpansion | None,
) -> v14.ValueSetExpansion | None:
    if source is None or source.is_empty():
        return None
    target = v14.ValueSetExpansion()
    copy_element(source, target)
    target.identifier = el.uri_30_to_14(source.identifier)
    target.timestamp = el.date_time_30_to_14(source.timestamp)
    target.total = el.integer_30_to_14(source.total)
    target.offset = el.integer_30_to_14(source.offset)
    target.parameter = convert_list(source.parameter, expansion_parameter_30_to_14)
    target.contains = convert_list(source.contains, expansion_contains_30_to_14)
    return target


def expansion_parameter_14_to_30(
    source: v14.ValueSetExpansionParameter | None,
) -> v30.ValueSetExpansionParameter | None:
    if source is None or source.is_empty():
        return None
    target = v30.ValueSetExpansionParameter()
    copy_element(source, target)
    target.name = el.string_14_to_30(source.name)
    target.value_string = el.string_14_to_30(source.value_string)
    target.value_boolean = el.boolean_14_to_30(source.value_boolean)
    target.value_integer = el.integer_14_to_30(source.value_integer)
    target.value_decimal = el.decimal_14_to_30(source.value_decimal)
    target.value_uri = el.uri_14_to_30(source.value_uri)
    target.value_code = el.code_14_to_30(source.value_code)
    return target


def expansion_parameter_30_to_14(
    source: v30.ValueSetExpansionParameter | None,
) -> v14.ValueSetExpansionParameter | None:
    if source is None or source.is_empty():
        return None
    target = v14.ValueSetExpansionParameter()
    copy_element(source, target)
    target.name = el.string_30_to_14(source.name)
    target.value_string = el.string_30_to_14(source.value_string)
    target.value_boolean = el.boolean_30_to_14(source.value_boolean)
    target.value_integer = el.integer_30_to_14(source.value_integer)
    target.value_decimal = el.decimal_30_to_14(source.value_decimal)
    target.value_uri = el.uri_30_to_14(source.value_uri)
    target.value_code = el.code_30_to_14(source.value_code)
    return target


def expansion_contains_14_to_30(
    source: v14.ValueSetExpansionContains | None,
) -> v30.ValueSetExpansionContains | None:
    if source is None or source.is_empty():
        return None
    target = v30.ValueSetExpansionContains()
    copy_element(source, target)
    target.system = el.uri_14_to_30(source.system)
    target.abstract = el.boolean_14_to_30(source.abstract)
    target.version = el.string_14_to_30(source.version)
    target.code = el.code_14_to_30(source.code)
    target.display = el.string_14_to_30(source.display)
    target.contains = convert_list(source.contains, expansion_contains_14_to_30)
    return target


def expansion_contains_30_to_14(
    source: v30.ValueSetExpansionContains | None,
) -> v14.ValueSetExpansionContains | None:
    # inactive and designation do not exist in 1.4
    if source is None or source.is_empty():
        return None
    target = v14.ValueSetExpansionContains()
    copy_element(source, target)
    target.system = el.uri_30_to_14(source.system)
    target.abstract = el.boolean_30_to_14(source.abstract)
    target.version = el.string_30_to_14(source.version)
    target.code = el.code_30_to_14(source.code)
    target.display = el.string_30_to_14(source.display)
    target.contains = convert_list(source.contains, expansion_contains_30_to_14)
    return target
