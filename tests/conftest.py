"""Test configuration and fixtures."""

from typing import Any, AsyncGenerator, Generator, Protocol

import pytest
from httpx import ASGITransport, AsyncClient

from src.clients.conversion import get_conversion_service
from src.main import app
from src.services.conversion_service import ConversionService
from src.settings import Settings


@pytest.fixture(scope="session")
def anyio_backend() -> str:
    """Configure pytest-anyio to use asyncio."""
    return "asyncio"


@pytest.fixture
def test_settings() -> Settings:
    """Settings with loader post-processing switched off."""
    return Settings(patch_urls=False, kill_primitives=False)


@pytest.fixture
def conversion_service(test_settings: Settings) -> ConversionService:
    """Conversion service bound to the test settings."""
    return ConversionService(test_settings)


class ClientFactory(Protocol):
    """Protocol for client factory fixture."""

    def __call__(self) -> AsyncClient: ...


@pytest.fixture
def client_factory(
    conversion_service: ConversionService,
) -> Generator[ClientFactory, None, None]:
    """Factory for creating test clients with overridden dependencies."""

    def _create_client() -> AsyncClient:
        app.dependency_overrides[get_conversion_service] = lambda: conversion_service

        transport = ASGITransport(app=app)
        return AsyncClient(transport=transport, base_url="http://testserver")

    yield _create_client

    app.dependency_overrides.clear()


@pytest.fixture
async def client(
    client_factory: ClientFactory,
) -> AsyncGenerator[AsyncClient, None]:
    """Async client for testing endpoints."""
    async with client_factory() as c:
        yield c


# --- Sample resources ---------------------------------------------------------


@pytest.fixture
def minimal_value_set_14() -> dict[str, Any]:
    """DSTU2016May ValueSet with a single included code."""
    return {
        "resourceType": "ValueSet",
        "compose": {
            "include": [
                {
                    "system": "http://x/CS",
                    "concept": [{"code": "A", "display": "Alpha"}],
                }
            ]
        },
    }


@pytest.fixture
def full_value_set_14() -> dict[str, Any]:
    """DSTU2016May ValueSet exercising every converted element."""
    return {
        "resourceType": "ValueSet",
        "id": "example-vs",
        "meta": {"versionId": "2", "profile": ["http://example.org/profile"]},
        "language": "en",
        "text": {
            "status": "generated",
            "div": '<div xmlns="http://www.w3.org/1999/xhtml">Example</div>',
        },
        "extension": [
            {"url": "http://example.org/ext", "valueString": "kept"},
        ],
        "url": "http://hl7.org/fhir/ValueSet/example-vs",
        "_url": {"id": "url-1"},
        "identifier": {
            "use": "official",
            "assigner": {"reference": "Organization/hl7"},
            "system": "urn:ietf:rfc:3986",
            "value": "urn:oid:2.16.840.1.113883.4.642.3.1",
        },
        "version": "1.4.0",
        "name": "Example Value Set",
        "status": "draft",
        "experimental": True,
        "publisher": "HL7",
        "contact": [
            {
                "name": "FHIR project team",
                "telecom": [
                    {"system": "other", "value": "http://hl7.org/fhir", "use": "work"},
                    {"system": "email", "value": "fhir@example.org", "rank": 1},
                ],
            }
        ],
        "date": "2016-05-01",
        "lockedDate": "2016-04-01",
        "description": "An example value set",
        # Plain contexts come back before jurisdictions, so list them first
        "useContext": [
            {
                "coding": [
                    {"system": "http://example.org/contexts", "code": "venue"},
                ],
                "text": "Venue",
            },
            {
                "coding": [
                    {"system": "urn:iso:std:iso:3166", "code": "US"},
                ]
            },
        ],
        "immutable": False,
        "requirements": "Needed for testing",
        "copyright": "CC0",
        "extensible": True,
        "compose": {
            "import": ["http://hl7.org/fhir/ValueSet/other"],
            "include": [
                {
                    "system": "http://loinc.org",
                    "version": "2.56",
                    "concept": [
                        {
                            "code": "14647-2",
                            "display": "Cholesterol",
                            "designation": [
                                {
                                    "language": "nl",
                                    "use": {"system": "http://snomed.info/sct", "code": "900000000000013009"},
                                    "value": "Cholesterol [Mol/Vol]",
                                }
                            ],
                        },
                        {"code": "2093-3", "display": "Cholesterol [Mass/Vol]"},
                    ],
                },
                {
                    "system": "http://snomed.info/sct",
                    "filter": [
                        {"property": "concept", "op": "is-a", "value": "73211009"},
                    ],
                },
            ],
            "exclude": [
                {
                    "system": "http://loinc.org",
                    "concept": [{"code": "5932-9"}],
                }
            ],
        },
        "expansion": {
            "identifier": "urn:uuid:42316ff8-2714-4680-9980-f37a6d1a71bc",
            "timestamp": "2016-05-01T10:00:00Z",
            "total": 2,
            "offset": 0,
            "parameter": [
                {"name": "activeOnly", "valueBoolean": True},
                {"name": "count", "valueInteger": 10},
                {"name": "filter", "valueString": "chol"},
            ],
            "contains": [
                {
                    "system": "http://loinc.org",
                    "abstract": True,
                    "display": "Cholesterol codes",
                    "contains": [
                        {"system": "http://loinc.org", "code": "14647-2", "display": "Cholesterol"},
                        {"system": "http://loinc.org", "code": "2093-3"},
                    ],
                }
            ],
        },
    }


@pytest.fixture
def structure_definition_30() -> dict[str, Any]:
    """STU3 StructureDefinition with references to core canonicals."""
    return {
        "resourceType": "StructureDefinition",
        "id": "example-profile",
        "url": "http://hl7.org/fhir/StructureDefinition/example-profile",
        "name": "ExampleProfile",
        "status": "draft",
        "kind": "resource",
        "abstract": False,
        "type": "Observation",
        "baseDefinition": "http://hl7.org/fhir/StructureDefinition/Observation",
        "fhirVersion": "3.0.1",
        "differential": {
            "element": [
                {"path": "Observation"},
                {"path": "Observation.component", "sliceName": "systolic"},
                {
                    "path": "Observation.component.code",
                    "binding": {
                        "strength": "required",
                        "valueSetReference": {
                            "reference": "http://hl7.org/fhir/ValueSet/observation-codes"
                        },
                    },
                },
                {
                    "path": "Observation.subject",
                    "type": [
                        {
                            "code": "Reference",
                            "targetProfile": "http://hl7.org/fhir/StructureDefinition/Patient",
                        }
                    ],
                },
                {
                    "id": "Observation.status",
                    "path": "Observation.status",
                    "binding": {
                        "strength": "required",
                        "valueSetUri": "http://hl7.org/fhir/ValueSet/observation-status",
                    },
                },
            ]
        },
    }
