"""
Enumeration case tables between DSTU2016May (1.4) and STU3 (3.0).

Every non-NULL source member is listed explicitly, including those whose
answer is NULL, so the tables can be checked for exhaustiveness.
"""

from src.fhir import dstu2016may as v14
from src.fhir import stu3 as v30
from src.transform.enums import EnumMap

# --- FilterOperator -----------------------------------------------------------

FILTER_OPERATOR_14_TO_30 = EnumMap(
    v14.FilterOperator,
    v30.FilterOperator,
    {
        v14.FilterOperator.EQUAL: v30.FilterOperator.EQUAL,
        v14.FilterOperator.IS_A: v30.FilterOperator.IS_A,
        v14.FilterOperator.IS_NOT_A: v30.FilterOperator.IS_NOT_A,
        v14.FilterOperator.REGEX: v30.FilterOperator.REGEX,
        v14.FilterOperator.IN: v30.FilterOperator.IN,
        v14.FilterOperator.NOT_IN: v30.FilterOperator.NOT_IN,
    },
)

FILTER_OPERATOR_30_TO_14 = EnumMap(
    v30.FilterOperator,
    v14.FilterOperator,
    {
        v30.FilterOperator.EQUAL: v14.FilterOperator.EQUAL,
        v30.FilterOperator.IS_A: v14.FilterOperator.IS_A,
        v30.FilterOperator.DESCENDENT_OF: v14.FilterOperator.NULL,
        v30.FilterOperator.IS_NOT_A: v14.FilterOperator.IS_NOT_A,
        v30.FilterOperator.REGEX: v14.FilterOperator.REGEX,
        v30.FilterOperator.IN: v14.FilterOperator.IN,
        v30.FilterOperator.NOT_IN: v14.FilterOperator.NOT_IN,
        v30.FilterOperator.GENERALIZES: v14.FilterOperator.NULL,
        v30.FilterOperator.EXISTS: v14.FilterOperator.NULL,
    },
)

# --- ConformanceResourceStatus <-> PublicationStatus --------------------------

STATUS_14_TO_30 = EnumMap(
    v14.ConformanceResourceStatus,
    v30.PublicationStatus,
    {
        v14.ConformanceResourceStatus.DRAFT: v30.PublicationStatus.DRAFT,
        v14.ConformanceResourceStatus.ACTIVE: v30.PublicationStatus.ACTIVE,
        v14.ConformanceResourceStatus.RETIRED: v30.PublicationStatus.RETIRED,
    },
)

STATUS_30_TO_14 = EnumMap(
    v30.PublicationStatus,
    v14.ConformanceResourceStatus,
    {
        v30.PublicationStatus.DRAFT: v14.ConformanceResourceStatus.DRAFT,
        v30.PublicationStatus.ACTIVE: v14.ConformanceResourceStatus.ACTIVE,
        v30.PublicationStatus.RETIRED: v14.ConformanceResourceStatus.RETIRED,
        v30.PublicationStatus.UNKNOWN: v14.ConformanceResourceStatus.NULL,
    },
)

# --- ContactPoint -------------------------------------------------------------

CONTACT_POINT_SYSTEM_14_TO_30 = EnumMap(
    v14.ContactPointSystem,
    v30.ContactPointSystem,
    {
        v14.ContactPointSystem.PHONE: v30.ContactPointSystem.PHONE,
        v14.ContactPointSystem.FAX: v30.ContactPointSystem.FAX,
        v14.ContactPointSystem.EMAIL: v30.ContactPointSystem.EMAIL,
        v14.ContactPointSystem.PAGER: v30.ContactPointSystem.PAGER,
        v14.ContactPointSystem.OTHER: v30.ContactPointSystem.OTHER,
    },
)

CONTACT_POINT_SYSTEM_30_TO_14 = EnumMap(
    v30.ContactPointSystem,
    v14.ContactPointSystem,
    {
        v30.ContactPointSystem.PHONE: v14.ContactPointSystem.PHONE,
        v30.ContactPointSystem.FAX: v14.ContactPointSystem.FAX,
        v30.ContactPointSystem.EMAIL: v14.ContactPointSystem.EMAIL,
        v30.ContactPointSystem.PAGER: v14.ContactPointSystem.PAGER,
        v30.ContactPointSystem.URL: v14.ContactPointSystem.NULL,
        v30.ContactPointSystem.SMS: v14.ContactPointSystem.NULL,
        v30.ContactPointSystem.OTHER: v14.ContactPointSystem.OTHER,
    },
)

CONTACT_POINT_USE_14_TO_30 = EnumMap(
    v14.ContactPointUse,
    v30.ContactPointUse,
    {
        v14.ContactPointUse.HOME: v30.ContactPointUse.HOME,
        v14.ContactPointUse.WORK: v30.ContactPointUse.WORK,
        v14.ContactPointUse.TEMP: v30.ContactPointUse.TEMP,
        v14.ContactPointUse.OLD: v30.ContactPointUse.OLD,
        v14.ContactPointUse.MOBILE: v30.ContactPointUse.MOBILE,
    },
)

CONTACT_POINT_USE_30_TO_14 = EnumMap(
    v30.ContactPointUse,
    v14.ContactPointUse,
    {
        v30.ContactPointUse.HOME: v14.ContactPointUse.HOME,
        v30.ContactPointUse.WORK: v14.ContactPointUse.WORK,
        v30.ContactPointUse.TEMP: v14.ContactPointUse.TEMP,
        v30.ContactPointUse.OLD: v14.ContactPointUse.OLD,
        v30.ContactPointUse.MOBILE: v14.ContactPointUse.MOBILE,
    },
)

# --- IdentifierUse ------------------------------------------------------------

IDENTIFIER_USE_14_TO_30 = EnumMap(
    v14.IdentifierUse,
    v30.IdentifierUse,
    {
        v14.IdentifierUse.USUAL: v30.IdentifierUse.USUAL,
        v14.IdentifierUse.OFFICIAL: v30.IdentifierUse.OFFICIAL,
        v14.IdentifierUse.TEMP: v30.IdentifierUse.TEMP,
        v14.IdentifierUse.SECONDARY: v30.IdentifierUse.SECONDARY,
    },
)

IDENTIFIER_USE_30_TO_14 = EnumMap(
    v30.IdentifierUse,
    v14.IdentifierUse,
    {
        v30.IdentifierUse.USUAL: v14.IdentifierUse.USUAL,
        v30.IdentifierUse.OFFICIAL: v14.IdentifierUse.OFFICIAL,
        v30.IdentifierUse.TEMP: v14.IdentifierUse.TEMP,
        v30.IdentifierUse.SECONDARY: v14.IdentifierUse.SECONDARY,
    },
)

# --- NarrativeStatus ----------------------------------------------------------

NARRATIVE_STATUS_14_TO_30 = EnumMap(
    v14.NarrativeStatus,
    v30.NarrativeStatus,
    {
        v14.NarrativeStatus.GENERATED: v30.NarrativeStatus.GENERATED,
        v14.NarrativeStatus.EXTENSIONS: v30.NarrativeStatus.EXTENSIONS,
        v14.NarrativeStatus.ADDITIONAL: v30.NarrativeStatus.ADDITIONAL,
        v14.NarrativeStatus.EMPTY: v30.NarrativeStatus.EMPTY,
    },
)

NARRATIVE_STATUS_30_TO_14 = EnumMap(
    v30.NarrativeStatus,
    v14.NarrativeStatus,
    {
        v30.NarrativeStatus.GENERATED: v14.NarrativeStatus.GENERATED,
        v30.NarrativeStatus.EXTENSIONS: v14.NarrativeStatus.EXTENSIONS,
        v30.NarrativeStatus.ADDITIONAL: v14.NarrativeStatus.ADDITIONAL,
        v30.NarrativeStatus.EMPTY: v14.NarrativeStatus.EMPTY,
    },
)

ALL_ENUM_MAPS: tuple[EnumMap, ...] = (
    FILTER_OPERATOR_14_TO_30,
    FILTER_OPERATOR_30_TO_14,
    STATUS_14_TO_30,
    STATUS_30_TO_14,
    CONTACT_POINT_SYSTEM_14_TO_30,
    CONTACT_POINT_SYSTEM_30_TO_14,
    CONTACT_POINT_USE_14_TO_30,
    CONTACT_POINT_USE_30_TO_14,
    IDENTIFIER_USE_14_TO_30,
    IDENTIFIER_USE_30_TO_14,
    NARRATIVE_STATUS_14_TO_30,
    NARRATIVE_STATUS_30_TO_14,
)
