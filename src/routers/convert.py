"""Conversion and loading endpoints."""

import logging

from fastapi import APIRouter, HTTPException, status

from src.exceptions import LoaderError, UnsupportedConversionError, UnsupportedVersionError
from src.fhir.versions import NATIVE_FAMILY
from src.routers.deps import ConversionServiceDep
from src.schemas.convert_schemas import (
    ConvertRequest,
    ConvertResponse,
    LoadedResource,
    LoadRequest,
    LoadResponse,
    SkippedResource,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Conversion"])


@router.post("/convert", response_model=ConvertResponse)
async def convert(
    request: ConvertRequest,
    conversion: ConversionServiceDep,
) -> ConvertResponse:
    """
    Convert a single resource between FHIR versions.

    Supported pairs: DSTU2016May (1.4) <-> STU3 (3.0) for ValueSet, plus
    same-version copies of any resource type with a model.
    """
    try:
        resource, source, target = conversion.convert(
            request.resource, request.source_version, request.target_version
        )
    except (UnsupportedVersionError, UnsupportedConversionError) as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        ) from e
    except LoaderError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e

    return ConvertResponse(
        resource=resource,
        source_family=source.value,
        target_family=target.value,
    )


@router.post("/load", response_model=LoadResponse)
async def load(
    request: LoadRequest,
    conversion: ConversionServiceDep,
) -> LoadResponse:
    """
    Load a set of resources into the native FHIR version (STU3).

    Resources of types without a model or converter for the declared version
    are skipped and listed in the response.
    """
    try:
        result = conversion.load(
            request.fhir_version,
            request.resources,
            types=request.types,
            patch_urls=request.patch_urls,
            kill_primitives=request.kill_primitives,
            web_root=request.web_root,
        )
    except UnsupportedVersionError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        ) from e
    except LoaderError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e

    logger.info(
        "Loaded %d resources (%d skipped) from FHIR %s",
        len(result.resources),
        len(result.skipped),
        request.fhir_version,
    )
    return LoadResponse(
        fhir_version=request.fhir_version,
        family=result.family.value,
        native_version=NATIVE_FAMILY.value,
        resources=[
            LoadedResource(resource=resource, path=path, webroot=web_root)
            for resource, path, web_root in zip(
                result.resources, result.paths, result.web_roots
            )
        ],
        count=len(result.resources),
        skipped=[
            SkippedResource(resource_type=s.resource_type, id=s.id, reason=s.reason)
            for s in result.skipped
        ],
    )
