"""
FHIR version families.

A package declares a FHIR version string ("1.4.0", "3.0.2", "4.0.1", ...).
Conversion only cares about the family (major generation) that string
belongs to, including the ballot releases that preceded each generation.
"""

from collections.abc import Callable
from enum import Enum

from src.exceptions import UnsupportedVersionError


class VersionFamily(str, Enum):
    """Supported FHIR generations, valued by their canonical version segment."""

    R2 = "1.0"  # DSTU2
    R2B = "1.4"  # DSTU2016May
    R3 = "3.0"  # STU3
    R4 = "4.0"
    R5 = "5.0"


# The version every loader converts into
NATIVE_FAMILY = VersionFamily.R3

_FAMILY_PREFIXES: dict[VersionFamily, tuple[str, ...]] = {
    VersionFamily.R5: ("5.0", "4.2", "4.4", "4.5", "4.6"),
    VersionFamily.R4: ("4.0", "3.3", "3.5"),
    VersionFamily.R3: ("3.0", "1.8"),
    VersionFamily.R2: ("1.0",),
    VersionFamily.R2B: ("1.4",),
}

_FAMILY_ALIASES: dict[VersionFamily, frozenset[str]] = {
    VersionFamily.R5: frozenset({"r5"}),
    VersionFamily.R4: frozenset({"r4"}),
    VersionFamily.R3: frozenset({"r3", "stu3"}),
    VersionFamily.R2: frozenset({"r2", "dstu2"}),
    VersionFamily.R2B: frozenset({"r2b", "dstu2016may"}),
}


def _in_family(version: str | None, family: VersionFamily) -> bool:
    if not version:
        return False
    version = version.strip()
    return version.lower() in _FAMILY_ALIASES[family] or version.startswith(
        _FAMILY_PREFIXES[family]
    )


def is_r2_ver(version: str | None) -> bool:
    return _in_family(version, VersionFamily.R2)


def is_r2b_ver(version: str | None) -> bool:
    return _in_family(version, VersionFamily.R2B)


def is_r3_ver(version: str | None) -> bool:
    return _in_family(version, VersionFamily.R3)


def is_r4_ver(version: str | None) -> bool:
    return _in_family(version, VersionFamily.R4)


def is_r5_ver(version: str | None) -> bool:
    return _in_family(version, VersionFamily.R5)


# Tested in order; the first matching family wins
DISPATCH_ORDER: tuple[tuple[Callable[[str | None], bool], VersionFamily], ...] = (
    (is_r5_ver, VersionFamily.R5),
    (is_r4_ver, VersionFamily.R4),
    (is_r3_ver, VersionFamily.R3),
    (is_r2_ver, VersionFamily.R2),
    (is_r2b_ver, VersionFamily.R2B),
)


def classify_version(version: str | None) -> VersionFamily:
    """
    Classify a declared FHIR version string into its family.

    Args:
        version: Version string from a package manifest or request

    Returns:
        The matching VersionFamily

    Raises:
        UnsupportedVersionError: If no supported family matches
    """
    for predicate, family in DISPATCH_ORDER:
        if predicate(version):
            return family
    raise UnsupportedVersionError(f"Unsupported FHIR Version {version}")
