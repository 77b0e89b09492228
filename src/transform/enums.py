"""
Enumeration cross-mapping.

Each EnumMap is an explicit case table from one version's code set to
another's. Codes with no counterpart fall through to the target NULL member;
that is a normal outcome, not an error.
"""

import logging
from collections.abc import Mapping
from typing import Generic, TypeVar

from src.fhir.base import Enumeration, FhirEnum
from src.transform.common import copy_element

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=FhirEnum)
T = TypeVar("T", bound=FhirEnum)


class EnumMap(Generic[S, T]):
    """Total mapping from a source enumeration to a target enumeration."""

    def __init__(self, source: type[S], target: type[T], cases: Mapping[S, T]):
        self.source = source
        self.target = target
        self._cases = dict(cases)

    def __call__(self, code: S | None) -> T | None:
        if code is None:
            return None
        mapped = self._cases.get(code)
        if mapped is None:
            mapped = self.target.NULL
        if mapped.is_null and not code.is_null:
            logger.debug(
                "No %s equivalent for %s.%s",
                self.target.__name__,
                self.source.__name__,
                code.value,
            )
        return mapped

    def missing_cases(self) -> set[S]:
        """Source members (other than NULL) without an explicit case."""
        return {
            member
            for member in self.source
            if not member.is_null and member not in self._cases
        }

    def __repr__(self) -> str:
        return f"EnumMap({self.source.__name__} -> {self.target.__name__})"


def map_enumeration(
    source: Enumeration | None, enum_map: EnumMap
) -> Enumeration | None:
    """
    Convert an enumeration element (code plus id and extensions).

    Args:
        source: Source Enumeration element, or None
        enum_map: Case table for the enumeration

    Returns:
        A new Enumeration of the target enum, or None when source is absent
    """
    if source is None or source.is_empty():
        return None
    target = Enumeration[enum_map.target](value=enum_map(source.value))
    copy_element(source, target)
    return target
