"""Health check endpoint."""

from fastapi import APIRouter

from src.routers.deps import ConversionServiceDep
from src.schemas.health import HealthResponse

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(conversion: ConversionServiceDep) -> HealthResponse:
    """Report service health and the FHIR versions it can load."""
    return HealthResponse(
        status="healthy",
        native_version=conversion.native_version(),
        supported_versions=conversion.supported_versions(),
    )
