"""
Resource model lookup and JSON parsing per version family.
"""

import logging
from typing import Any

from pydantic import ValidationError

from src.exceptions import LoaderError, UnsupportedConversionError
from src.fhir import dstu2016may, stu3
from src.fhir.base import FhirResource
from src.fhir.versions import VersionFamily

logger = logging.getLogger(__name__)

# Resource types each family can be parsed into
RESOURCE_MODELS: dict[VersionFamily, dict[str, type[FhirResource]]] = {
    VersionFamily.R2B: {
        "ValueSet": dstu2016may.ValueSet,
    },
    VersionFamily.R3: {
        "ValueSet": stu3.ValueSet,
        "CodeSystem": stu3.CodeSystem,
        "StructureDefinition": stu3.StructureDefinition,
        "OperationDefinition": stu3.OperationDefinition,
    },
}


def get_model(family: VersionFamily, resource_type: str) -> type[FhirResource]:
    """
    Look up the model class for a resource type in a version family.

    Raises:
        UnsupportedConversionError: If the family has no model for the type
    """
    model = RESOURCE_MODELS.get(family, {}).get(resource_type)
    if model is None:
        raise UnsupportedConversionError(
            f"No {family.value} model for resource type {resource_type}"
        )
    return model


def parse_resource(data: dict[str, Any], family: VersionFamily) -> FhirResource:
    """
    Parse a FHIR JSON resource into the model classes of a version family.

    Args:
        data: Resource JSON (must carry resourceType)
        family: Version family the JSON was authored in

    Returns:
        The parsed resource model

    Raises:
        UnsupportedConversionError: If the family has no model for the type
        LoaderError: If the JSON does not fit the model
    """
    resource_type = data.get("resourceType")
    if not resource_type:
        raise LoaderError("Resource is missing resourceType")

    model = get_model(family, resource_type)
    try:
        return model.model_validate(data)
    except ValidationError as e:
        logger.warning(
            "Failed to parse %s %s as %s", resource_type, data.get("id"), family.value
        )
        raise LoaderError(
            f"Invalid {resource_type} for FHIR {family.value}: {e}"
        ) from e
