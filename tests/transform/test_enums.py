"""Tests for enumeration cross-mapping."""

import logging

import pytest

from src.fhir import dstu2016may as v14
from src.fhir import stu3 as v30
from src.fhir.base import Enumeration, Extension
from src.transform.enums import EnumMap, map_enumeration
from src.transform.v14_30 import enums
from src.transform.v14_30.enums import ALL_ENUM_MAPS


class TestEnumTables:
    """Tests that every case table is complete."""

    @pytest.mark.parametrize("enum_map", ALL_ENUM_MAPS, ids=repr)
    def test_every_source_member_is_listed(self, enum_map: EnumMap) -> None:
        """Each non-NULL source member has an explicit case."""
        assert enum_map.missing_cases() == set()

    @pytest.mark.parametrize("enum_map", ALL_ENUM_MAPS, ids=repr)
    def test_null_maps_to_null(self, enum_map: EnumMap) -> None:
        """NULL always maps to the target NULL."""
        assert enum_map(enum_map.source.NULL) is enum_map.target.NULL

    @pytest.mark.parametrize("enum_map", ALL_ENUM_MAPS, ids=repr)
    def test_results_belong_to_target(self, enum_map: EnumMap) -> None:
        """Every mapped value is a member of the target enumeration."""
        for member in enum_map.source:
            assert isinstance(enum_map(member), enum_map.target)

    def test_none_maps_to_none(self) -> None:
        """An absent code stays absent."""
        assert enums.FILTER_OPERATOR_14_TO_30(None) is None


class TestFilterOperator:
    """Tests for the FilterOperator tables."""

    def test_is_a_maps_both_ways(self) -> None:
        """is-a is preserved in both directions."""
        assert enums.FILTER_OPERATOR_14_TO_30(v14.FilterOperator.IS_A) is v30.FilterOperator.IS_A
        assert enums.FILTER_OPERATOR_30_TO_14(v30.FilterOperator.IS_A) is v14.FilterOperator.IS_A

    @pytest.mark.parametrize(
        "operator",
        [
            v30.FilterOperator.DESCENDENT_OF,
            v30.FilterOperator.GENERALIZES,
            v30.FilterOperator.EXISTS,
        ],
    )
    def test_stu3_only_operators_map_to_null(self, operator: v30.FilterOperator) -> None:
        """Operators introduced in 3.0 have no 1.4 equivalent."""
        assert enums.FILTER_OPERATOR_30_TO_14(operator) is v14.FilterOperator.NULL

    def test_unmapped_value_is_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        """Falling back to NULL is reported at debug level only."""
        with caplog.at_level(logging.DEBUG, logger="src.transform.enums"):
            enums.FILTER_OPERATOR_30_TO_14(v30.FilterOperator.EXISTS)

        assert any("exists" in record.getMessage() for record in caplog.records)
        assert all(record.levelno == logging.DEBUG for record in caplog.records)


class TestOtherTables:
    """Spot checks of the remaining tables."""

    def test_unknown_status_maps_to_null(self) -> None:
        """PublicationStatus.unknown has no ConformanceResourceStatus."""
        assert enums.STATUS_30_TO_14(v30.PublicationStatus.UNKNOWN) is v14.ConformanceResourceStatus.NULL

    @pytest.mark.parametrize("system", [v30.ContactPointSystem.URL, v30.ContactPointSystem.SMS])
    def test_new_contact_systems_map_to_null(self, system: v30.ContactPointSystem) -> None:
        """url and sms did not exist in 1.4."""
        assert enums.CONTACT_POINT_SYSTEM_30_TO_14(system) is v14.ContactPointSystem.NULL

    def test_other_contact_system_is_kept(self) -> None:
        """other maps to other in both directions."""
        assert enums.CONTACT_POINT_SYSTEM_30_TO_14(v30.ContactPointSystem.OTHER) is v14.ContactPointSystem.OTHER
        assert enums.CONTACT_POINT_SYSTEM_14_TO_30(v14.ContactPointSystem.OTHER) is v30.ContactPointSystem.OTHER

    def test_identity_tables(self) -> None:
        """Unchanged code sets map member for member."""
        for member in v14.NarrativeStatus:
            assert enums.NARRATIVE_STATUS_14_TO_30(member).value == member.value


class TestMapEnumeration:
    """Tests for converting enumeration elements."""

    def test_element_properties_are_copied(self) -> None:
        """The element id and extensions move with the code."""
        source = Enumeration[v14.FilterOperator](
            id="op-1",
            extension=[Extension(url="http://example.org/e")],
            value=v14.FilterOperator.REGEX,
        )

        target = map_enumeration(source, enums.FILTER_OPERATOR_14_TO_30)

        assert target is not None
        assert target.value is v30.FilterOperator.REGEX
        assert target.id == "op-1"
        assert target.extension[0].url == "http://example.org/e"
        assert target.extension[0] is not source.extension[0]

    def test_absent_element_stays_absent(self) -> None:
        """None converts to None."""
        assert map_enumeration(None, enums.FILTER_OPERATOR_14_TO_30) is None
