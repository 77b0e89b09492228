"""Tests for canonical URL patching."""

from typing import Any

import pytest

from src.fhir import stu3 as v30
from src.transform.url_patcher import (
    URL_BASE,
    URL_ELEMENT_DEF_NAMESPACE,
    UrlPatcher,
    assign_element_ids,
)


@pytest.fixture
def patcher() -> UrlPatcher:
    return UrlPatcher("3.0")


class TestPatchUrl:
    """Tests for patch_url."""

    def test_core_url_of_type_is_patched(self, patcher: UrlPatcher) -> None:
        """The type segment is replaced by the version segment."""
        assert (
            patcher.patch_url("http://hl7.org/fhir/ValueSet/x", "ValueSet")
            == "http://hl7.org/fhir/3.0/x"
        )

    def test_non_core_url_is_unchanged(self, patcher: UrlPatcher) -> None:
        """URLs outside the core namespace pass through."""
        assert patcher.patch_url("http://example.org/x", "ValueSet") == "http://example.org/x"

    def test_other_type_is_unchanged(self, patcher: UrlPatcher) -> None:
        """Only URLs of the given type are patched."""
        url = "http://hl7.org/fhir/StructureDefinition/Patient"

        assert patcher.patch_url(url, "ValueSet") == url

    def test_code_system_matches_any_core_url(self, patcher: UrlPatcher) -> None:
        """Code system URLs are patched whatever their path."""
        assert (
            patcher.patch_url("http://hl7.org/fhir/filter-operator", "CodeSystem")
            == "http://hl7.org/fhir/3.0/filter-operator"
        )
        assert (
            patcher.patch_url("http://hl7.org/fhir/CodeSystem/x", "CodeSystem")
            == "http://hl7.org/fhir/3.0/x"
        )

    def test_none_and_disabled(self) -> None:
        """None passes through and a disabled patcher changes nothing."""
        assert UrlPatcher("3.0").patch_url(None, "ValueSet") is None
        disabled = UrlPatcher("3.0", enabled=False)
        assert disabled.patch_url("http://hl7.org/fhir/ValueSet/x", "ValueSet") == (
            "http://hl7.org/fhir/ValueSet/x"
        )

    @pytest.mark.parametrize(
        ("url", "type_name"),
        [
            ("http://hl7.org/fhir/ValueSet/x", "ValueSet"),
            ("http://hl7.org/fhir/administrative-gender", "CodeSystem"),
            ("http://hl7.org/fhir/CodeSystem/y", "CodeSystem"),
            ("http://hl7.org/fhir/1.4/z", "CodeSystem"),
            ("http://example.org/x", "CodeSystem"),
        ],
    )
    def test_patching_is_idempotent(self, patcher: UrlPatcher, url: str, type_name: str) -> None:
        """Patching patched output changes nothing."""
        once = patcher.patch_url(url, type_name)

        assert patcher.patch_url(once, type_name) == once


class TestPatchResource:
    """Tests for patch_resource."""

    def test_value_set(self, patcher: UrlPatcher) -> None:
        """The url and compose systems are patched."""
        vs = v30.ValueSet.model_validate(
            {
                "resourceType": "ValueSet",
                "url": "http://hl7.org/fhir/ValueSet/example",
                "compose": {
                    "include": [{"system": "http://hl7.org/fhir/contact-point-system"}],
                    "exclude": [{"system": "http://loinc.org"}],
                },
            }
        )

        patcher.patch_resource(vs)

        assert vs.url.value == "http://hl7.org/fhir/3.0/example"
        assert vs.compose.include[0].system.value == "http://hl7.org/fhir/3.0/contact-point-system"
        assert vs.compose.exclude[0].system.value == "http://loinc.org"

    def test_structure_definition(
        self, patcher: UrlPatcher, structure_definition_30: dict[str, Any]
    ) -> None:
        """Element ids, the namespace extension and references are patched."""
        sd = v30.StructureDefinition.model_validate(structure_definition_30)

        patcher.patch_resource(sd)

        assert sd.url.value == "http://hl7.org/fhir/3.0/example-profile"
        elements = sd.differential.element
        assert [e.id for e in elements] == [
            "Observation",
            "Observation.component:systolic",
            "Observation.component:systolic.code",
            "Observation.subject",
            "Observation.status",
        ]
        assert elements[2].binding.value_set_reference.reference.value == (
            "http://hl7.org/fhir/3.0/observation-codes"
        )
        assert elements[3].type[0].target_profile.value == "http://hl7.org/fhir/3.0/Patient"
        assert elements[4].binding.value_set_uri.value == (
            "http://hl7.org/fhir/3.0/observation-status"
        )
        namespace = [ext for ext in sd.extension if ext.url == URL_ELEMENT_DEF_NAMESPACE]
        assert len(namespace) == 1
        assert namespace[0].to_json()["valueUri"] == URL_BASE

    def test_namespace_extension_added_once(
        self, patcher: UrlPatcher, structure_definition_30: dict[str, Any]
    ) -> None:
        """Patching twice does not duplicate the namespace extension."""
        sd = v30.StructureDefinition.model_validate(structure_definition_30)

        patcher.patch_resource(sd)
        first = sd.to_json()
        patcher.patch_resource(sd)

        assert sd.to_json() == first

    def test_operation_definition_parts(self, patcher: UrlPatcher) -> None:
        """Bindings on nested parameter parts are patched."""
        od = v30.OperationDefinition.model_validate(
            {
                "resourceType": "OperationDefinition",
                "url": "http://hl7.org/fhir/OperationDefinition/ValueSet-expand",
                "parameter": [
                    {
                        "name": "outer",
                        "part": [
                            {
                                "name": "inner",
                                "binding": {
                                    "strength": "required",
                                    "valueSetUri": "http://hl7.org/fhir/ValueSet/languages",
                                },
                            }
                        ],
                    }
                ],
            }
        )

        patcher.patch_resource(od)

        assert od.url.value == "http://hl7.org/fhir/3.0/ValueSet-expand"
        inner = od.parameter[0].part[0]
        assert inner.binding.value_set_uri.value == "http://hl7.org/fhir/3.0/languages"

    def test_code_system_url(self, patcher: UrlPatcher) -> None:
        """Other canonical resources only have their url patched."""
        cs = v30.CodeSystem.model_validate(
            {"resourceType": "CodeSystem", "url": "http://hl7.org/fhir/CodeSystem/x"}
        )

        patcher.patch_resource(cs)

        assert cs.url.value == "http://hl7.org/fhir/3.0/x"


class TestAssignElementIds:
    """Tests for assign_element_ids."""

    def test_slice_scope_ends_at_next_unsliced_sibling(self) -> None:
        """A slice name applies to its children only until the path repeats."""
        elements = [
            v30.ElementDefinition.model_validate(data)
            for data in [
                {"path": "Patient.identifier", "sliceName": "mrn"},
                {"path": "Patient.identifier.system"},
                {"path": "Patient.identifier"},
                {"path": "Patient.identifier.value"},
            ]
        ]

        assign_element_ids(elements)

        assert [e.id for e in elements] == [
            "Patient.identifier:mrn",
            "Patient.identifier:mrn.system",
            "Patient.identifier",
            "Patient.identifier.value",
        ]

    def test_existing_ids_are_regenerated(self) -> None:
        """Ids already present are replaced by path-derived ones."""
        elements = [
            v30.ElementDefinition.model_validate(data)
            for data in [
                {"id": "stale-root", "path": "Patient"},
                {"id": "Patient.name:old", "path": "Patient.name"},
            ]
        ]

        assign_element_ids(elements)

        assert [e.id for e in elements] == ["Patient", "Patient.name"]
