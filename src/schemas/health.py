"""Health check schemas."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Response model for health check endpoint."""

    status: str
    native_version: str
    supported_versions: list[str]
