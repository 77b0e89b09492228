"""
Primitive and general-purpose datatype converters, 1.4 <-> 3.0.

Every converter returns None for an absent or empty source and otherwise
builds a new target-version object carrying the same values.
"""

from src.fhir import dstu2016may as v14
from src.fhir import stu3 as v30
from src.transform.common import (
    convert_list,
    convert_primitive,
    copy_domain_resource,
    copy_element,
)
from src.transform.enums import map_enumeration
from src.transform.v14_30 import enums

# Coding systems that make a 1.4 useContext concept a 3.0 jurisdiction
JURISDICTION_SYSTEMS = frozenset(
    {
        "http://unstats.un.org/unsd/methods/m49/m49.htm",
        "urn:iso:std:iso:3166",
        "https://www.usps.com/",
    }
)

# --- Primitives ---------------------------------------------------------------


def string_14_to_30(source: v14.String | None) -> v30.String | None:
    return convert_primitive(source, v30.String)


def string_30_to_14(source: v30.String | None) -> v14.String | None:
    return convert_primitive(source, v14.String)


def boolean_14_to_30(source: v14.Boolean | None) -> v30.Boolean | None:
    return convert_primitive(source, v30.Boolean)


def boolean_30_to_14(source: v30.Boolean | None) -> v14.Boolean | None:
    return convert_primitive(source, v14.Boolean)


def integer_14_to_30(source: v14.Integer | None) -> v30.Integer | None:
    return convert_primitive(source, v30.Integer)


def integer_30_to_14(source: v30.Integer | None) -> v14.Integer | None:
    return convert_primitive(source, v14.Integer)


def decimal_14_to_30(source: v14.Decimal | None) -> v30.Decimal | None:
    return convert_primitive(source, v30.Decimal)


def decimal_30_to_14(source: v30.Decimal | None) -> v14.Decimal | None:
    return convert_primitive(source, v14.Decimal)


def date_time_14_to_30(source: v14.DateTime | None) -> v30.DateTime | None:
    return convert_primitive(source, v30.DateTime)


def date_time_30_to_14(source: v30.DateTime | None) -> v14.DateTime | None:
    return convert_primitive(source, v14.DateTime)


def date_14_to_30(source: v14.Date | None) -> v30.Date | None:
    return convert_primitive(source, v30.Date)


def date_30_to_14(source: v30.Date | None) -> v14.Date | None:
    return convert_primitive(source, v14.Date)


def instant_14_to_30(source: v14.Instant | None) -> v30.Instant | None:
    return convert_primitive(source, v30.Instant)


def instant_30_to_14(source: v30.Instant | None) -> v14.Instant | None:
    return convert_primitive(source, v14.Instant)


def code_14_to_30(source: v14.Code | None) -> v30.Code | None:
    return convert_primitive(source, v30.Code)


def code_30_to_14(source: v30.Code | None) -> v14.Code | None:
    return convert_primitive(source, v14.Code)


def uri_14_to_30(source: v14.Uri | None) -> v30.Uri | None:
    return convert_primitive(source, v30.Uri)


def uri_30_to_14(source: v30.Uri | None) -> v14.Uri | None:
    return convert_primitive(source, v14.Uri)


def id_14_to_30(source: v14.Id | None) -> v30.Id | None:
    return convert_primitive(source, v30.Id)


def id_30_to_14(source: v30.Id | None) -> v14.Id | None:
    return convert_primitive(source, v14.Id)


def markdown_14_to_30(source: v14.Markdown | None) -> v30.Markdown | None:
    return convert_primitive(source, v30.Markdown)


def markdown_30_to_14(source: v30.Markdown | None) -> v14.Markdown | None:
    return convert_primitive(source, v14.Markdown)


# --- Datatypes ----------------------------------------------------------------


def coding_14_to_30(source: v14.Coding | None) -> v30.Coding | None:
    if source is None or source.is_empty():
        return None
    target = v30.Coding()
    copy_element(source, target)
    target.system = uri_14_to_30(source.system)
    target.version = string_14_to_30(source.version)
    target.code = code_14_to_30(source.code)
    target.display = string_14_to_30(source.display)
    target.user_selected = boolean_14_to_30(source.user_selected)
    return target


def coding_30_to_14(source: v30.Coding | None) -> v14.Coding | None:
    if source is None or source.is_empty():
        return None
    target = v14.Coding()
    copy_element(source, target)
    target.system = uri_30_to_14(source.system)
    target.version = string_30_to_14(source.version)
    target.code = code_30_to_14(source.code)
    target.display = string_30_to_14(source.display)
    target.user_selected = boolean_30_to_14(source.user_selected)
    return target


def codeable_concept_14_to_30(
    source: v14.CodeableConcept | None,
) -> v30.CodeableConcept | None:
    if source is None or source.is_empty():
        return None
    target = v30.CodeableConcept()
    copy_element(source, target)
    target.coding = convert_list(source.coding, coding_14_to_30)
    target.text = string_14_to_30(source.text)
    return target


def codeable_concept_30_to_14(
    source: v30.CodeableConcept | None,
) -> v14.CodeableConcept | None:
    if source is None or source.is_empty():
        return None
    target = v14.CodeableConcept()
    copy_element(source, target)
    target.coding = convert_list(source.coding, coding_30_to_14)
    target.text = string_30_to_14(source.text)
    return target


def period_14_to_30(source: v14.Period | None) -> v30.Period | None:
    if source is None or source.is_empty():
        return None
    target = v30.Period()
    copy_element(source, target)
    target.start = date_time_14_to_30(source.start)
    target.end = date_time_14_to_30(source.end)
    return target


def period_30_to_14(source: v30.Period | None) -> v14.Period | None:
    if source is None or source.is_empty():
        return None
    target = v14.Period()
    copy_element(source, target)
    target.start = date_time_30_to_14(source.start)
    target.end = date_time_30_to_14(source.end)
    return target


def reference_14_to_30(source: v14.Reference | None) -> v30.Reference | None:
    if source is None or source.is_empty():
        return None
    target = v30.Reference()
    copy_element(source, target)
    target.reference = string_14_to_30(source.reference)
    target.display = string_14_to_30(source.display)
    return target


def reference_30_to_14(source: v30.Reference | None) -> v14.Reference | None:
    if source is None or source.is_empty():
        return None
    target = v14.Reference()
    copy_element(source, target)
    target.reference = string_30_to_14(source.reference)
    target.display = string_30_to_14(source.display)
    return target


def identifier_14_to_30(source: v14.Identifier | None) -> v30.Identifier | None:
    if source is None or source.is_empty():
        return None
    target = v30.Identifier()
    copy_element(source, target)
    target.use = map_enumeration(source.use, enums.IDENTIFIER_USE_14_TO_30)
    target.type = codeable_concept_14_to_30(source.type)
    target.system = uri_14_to_30(source.system)
    target.value = string_14_to_30(source.value)
    target.period = period_14_to_30(source.period)
    target.assigner = reference_14_to_30(source.assigner)
    return target


def identifier_30_to_14(source: v30.Identifier | None) -> v14.Identifier | None:
    if source is None or source.is_empty():
        return None
    target = v14.Identifier()
    copy_element(source, target)
    target.use = map_enumeration(source.use, enums.IDENTIFIER_USE_30_TO_14)
    target.type = codeable_concept_30_to_14(source.type)
    target.system = uri_30_to_14(source.system)
    target.value = string_30_to_14(source.value)
    target.period = period_30_to_14(source.period)
    target.assigner = reference_30_to_14(source.assigner)
    return target


def contact_point_14_to_30(
    source: v14.ContactPoint | None,
) -> v30.ContactPoint | None:
    if source is None or source.is_empty():
        return None
    target = v30.ContactPoint()
    copy_element(source, target)
    target.system = map_enumeration(source.system, enums.CONTACT_POINT_SYSTEM_14_TO_30)
    target.value = string_14_to_30(source.value)
    target.use = map_enumeration(source.use, enums.CONTACT_POINT_USE_14_TO_30)
    target.rank = integer_14_to_30(source.rank)
    target.period = period_14_to_30(source.period)
    return target


def contact_point_30_to_14(
    source: v30.ContactPoint | None,
) -> v14.ContactPoint | None:
    if source is None or source.is_empty():
        return None
    target = v14.ContactPoint()
    copy_element(source, target)
    target.system = map_enumeration(source.system, enums.CONTACT_POINT_SYSTEM_30_TO_14)
    target.value = string_30_to_14(source.value)
    target.use = map_enumeration(source.use, enums.CONTACT_POINT_USE_30_TO_14)
    target.rank = integer_30_to_14(source.rank)
    target.period = period_30_to_14(source.period)
    return target


def meta_14_to_30(source: v14.Meta | None) -> v30.Meta | None:
    if source is None or source.is_empty():
        return None
    target = v30.Meta()
    copy_element(source, target)
    target.version_id = id_14_to_30(source.version_id)
    target.last_updated = instant_14_to_30(source.last_updated)
    target.profile = convert_list(source.profile, uri_14_to_30)
    target.security = convert_list(source.security, coding_14_to_30)
    target.tag = convert_list(source.tag, coding_14_to_30)
    return target


def meta_30_to_14(source: v30.Meta | None) -> v14.Meta | None:
    if source is None or source.is_empty():
        return None
    target = v14.Meta()
    copy_element(source, target)
    target.version_id = id_30_to_14(source.version_id)
    target.last_updated = instant_30_to_14(source.last_updated)
    target.profile = convert_list(source.profile, uri_30_to_14)
    target.security = convert_list(source.security, coding_30_to_14)
    target.tag = convert_list(source.tag, coding_30_to_14)
    return target


def narrative_14_to_30(source: v14.Narrative | None) -> v30.Narrative | None:
    if source is None or source.is_empty():
        return None
    target = v30.Narrative()
    copy_element(source, target)
    target.status = map_enumeration(source.status, enums.NARRATIVE_STATUS_14_TO_30)
    target.div = source.div
    return target


def narrative_30_to_14(source: v30.Narrative | None) -> v14.Narrative | None:
    if source is None or source.is_empty():
        return None
    target = v14.Narrative()
    copy_element(source, target)
    target.status = map_enumeration(source.status, enums.NARRATIVE_STATUS_30_TO_14)
    target.div = source.div
    return target


# --- Resource bases -----------------------------------------------------------


def copy_domain_resource_14_to_30(
    source: v14.DomainResource, target: v30.DomainResource
) -> None:
    copy_domain_resource(source, target, meta_14_to_30, narrative_14_to_30)


def copy_domain_resource_30_to_14(
    source: v30.DomainResource, target: v14.DomainResource
) -> None:
    copy_domain_resource(source, target, meta_30_to_14, narrative_30_to_14)


def is_jurisdiction(concept: v14.CodeableConcept) -> bool:
    """
    Whether a 1.4 useContext concept names a jurisdiction.

    Decided by the system of the concept's first coding.
    """
    if not concept.coding:
        return False
    system = concept.coding[0].system
    return system is not None and system.value in JURISDICTION_SYSTEMS
