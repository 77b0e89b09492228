"""Tests for conversion and loading endpoints."""

from typing import Any

import pytest
from httpx import AsyncClient


class TestConvertEndpoint:
    """Tests for POST /convert."""

    @pytest.mark.anyio
    async def test_convert_dstu2016may_to_stu3(
        self, client: AsyncClient, minimal_value_set_14: dict[str, Any]
    ) -> None:
        """A 1.4 ValueSet converts to 3.0."""
        response = await client.post(
            "/convert",
            json={
                "resource": {**minimal_value_set_14, "lockedDate": "2016-01-01"},
                "source_version": "1.4.0",
                "target_version": "STU3",
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["source_family"] == "1.4"
        assert data["target_family"] == "3.0"
        assert data["resource"]["compose"]["lockedDate"] == "2016-01-01"
        assert data["resource"]["compose"]["include"] == minimal_value_set_14["compose"]["include"]

    @pytest.mark.anyio
    async def test_convert_stu3_to_dstu2016may(self, client: AsyncClient) -> None:
        """A 3.0 ValueSet converts to 1.4."""
        response = await client.post(
            "/convert",
            json={
                "resource": {
                    "resourceType": "ValueSet",
                    "identifier": [{"value": "a"}, {"value": "b"}],
                    "purpose": "Testing",
                },
                "source_version": "3.0.1",
                "target_version": "1.4.0",
            },
        )

        assert response.status_code == 200
        assert response.json()["resource"] == {
            "resourceType": "ValueSet",
            "identifier": {"value": "a"},
            "requirements": "Testing",
        }

    @pytest.mark.anyio
    async def test_decimals_are_json_numbers(self, client: AsyncClient) -> None:
        """Decimal and integer values come back as JSON numbers."""
        response = await client.post(
            "/convert",
            json={
                "resource": {
                    "resourceType": "ValueSet",
                    "expansion": {
                        "timestamp": "2016-05-01",
                        "parameter": [
                            {"name": "threshold", "valueDecimal": 2.5},
                            {"name": "whole", "valueDecimal": 3},
                        ],
                    },
                },
                "source_version": "1.4.0",
                "target_version": "3.0.1",
            },
        )

        assert response.status_code == 200
        parameters = response.json()["resource"]["expansion"]["parameter"]
        assert parameters[0]["valueDecimal"] == 2.5
        assert parameters[1]["valueDecimal"] == 3

    @pytest.mark.anyio
    async def test_unsupported_version(
        self, client: AsyncClient, minimal_value_set_14: dict[str, Any]
    ) -> None:
        """An unknown FHIR version is rejected with 422."""
        response = await client.post(
            "/convert",
            json={
                "resource": minimal_value_set_14,
                "source_version": "9.9.9",
                "target_version": "3.0.1",
            },
        )

        assert response.status_code == 422
        assert "Unsupported FHIR Version" in response.json()["detail"]

    @pytest.mark.anyio
    async def test_missing_converter(self, client: AsyncClient) -> None:
        """A type without a converter for the pair is rejected with 422."""
        response = await client.post(
            "/convert",
            json={
                "resource": {"resourceType": "CodeSystem", "url": "http://x"},
                "source_version": "3.0.1",
                "target_version": "1.4.0",
            },
        )

        assert response.status_code == 422

    @pytest.mark.anyio
    async def test_malformed_resource(self, client: AsyncClient) -> None:
        """A resource that does not fit the model is rejected with 400."""
        response = await client.post(
            "/convert",
            json={
                "resource": {"resourceType": "ValueSet", "compose": []},
                "source_version": "1.4.0",
                "target_version": "3.0.1",
            },
        )

        assert response.status_code == 400


class TestLoadEndpoint:
    """Tests for POST /load."""

    @pytest.mark.anyio
    async def test_load_with_patching(
        self, client: AsyncClient, full_value_set_14: dict[str, Any]
    ) -> None:
        """Resources load into STU3 with patched URLs and paths."""
        response = await client.post(
            "/load",
            json={
                "fhir_version": "1.4.0",
                "resources": [full_value_set_14, {"resourceType": "Patient", "id": "p"}],
                "patch_urls": True,
                "web_root": "http://example.org/ig",
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["family"] == "1.4"
        assert data["native_version"] == "3.0"
        assert data["count"] == 1
        assert data["skipped"] == []
        loaded = data["resources"][0]
        assert loaded["resource"]["url"] == "http://hl7.org/fhir/1.4/example-vs"
        assert loaded["resource"]["purpose"] == "Needed for testing"
        assert loaded["path"] == "http://example.org/ig/ValueSet-example-vs.html"
        assert loaded["webroot"] == "http://example.org/ig"

    @pytest.mark.anyio
    async def test_load_uses_configured_defaults(
        self, client: AsyncClient, full_value_set_14: dict[str, Any]
    ) -> None:
        """Unset switches fall back to the settings (patching off)."""
        response = await client.post(
            "/load",
            json={"fhir_version": "DSTU2016May", "resources": [full_value_set_14]},
        )

        assert response.status_code == 200
        url = response.json()["resources"][0]["resource"]["url"]
        assert url == "http://hl7.org/fhir/ValueSet/example-vs"

    @pytest.mark.anyio
    async def test_load_unsupported_version(self, client: AsyncClient) -> None:
        """An unknown FHIR version is rejected with 422."""
        response = await client.post(
            "/load", json={"fhir_version": "0.0.82", "resources": []}
        )

        assert response.status_code == 422

    @pytest.mark.anyio
    async def test_load_malformed_resource(self, client: AsyncClient) -> None:
        """A malformed resource is rejected with 400."""
        response = await client.post(
            "/load",
            json={
                "fhir_version": "1.4.0",
                "resources": [{"resourceType": "ValueSet", "contact": "nobody"}],
            },
        )

        assert response.status_code == 400

    @pytest.mark.anyio
    async def test_load_expands_bundles(
        self, client: AsyncClient, minimal_value_set_14: dict[str, Any]
    ) -> None:
        """Entries of a Bundle document are loaded."""
        bundle = {
            "resourceType": "Bundle",
            "type": "collection",
            "entry": [
                {"resource": {**minimal_value_set_14, "id": "a"}},
                {"resource": {**minimal_value_set_14, "id": "b"}},
            ],
        }

        response = await client.post(
            "/load", json={"fhir_version": "1.4.0", "resources": [bundle]}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 2
        assert [r["resource"]["id"] for r in data["resources"]] == ["a", "b"]

    @pytest.mark.anyio
    async def test_load_reports_skipped_resources(
        self, client: AsyncClient, minimal_value_set_14: dict[str, Any]
    ) -> None:
        """Resources a version family cannot load are listed as skipped."""
        response = await client.post(
            "/load",
            json={
                "fhir_version": "4.0.1",
                "resources": [{**minimal_value_set_14, "id": "r4"}],
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["family"] == "4.0"
        assert data["count"] == 0
        [skipped] = data["skipped"]
        assert skipped["resource_type"] == "ValueSet"
        assert skipped["id"] == "r4"
        assert "4.0" in skipped["reason"]
