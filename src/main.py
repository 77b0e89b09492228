"""Janus - FHIR cross-version conversion service."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from src.exceptions import JanusError
from src.routers import convert, health
from src.settings import settings

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan management."""
    # Startup
    logger.info("Janus starting (patch_urls=%s)", settings.patch_urls)
    yield
    # Shutdown - cleanup resources if needed


app = FastAPI(
    title="Janus",
    description="FHIR cross-version conversion service - load and convert conformance resources between FHIR releases",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware - localhost only for development
app.add_middleware(
    CORSMiddleware,
    allow_origin_regex=r"^http://(localhost|127\.0\.0\.1)(:\d+)?$",
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(JanusError)
async def handle_janus_error(request: Request, exc: JanusError) -> JSONResponse:
    """Handle conversion errors not translated by a router."""
    logger.warning("Unhandled conversion error on %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": str(exc)},
    )


@app.exception_handler(ValidationError)
async def handle_validation_error(
    request: Request, exc: ValidationError
) -> JSONResponse:
    """Handle Pydantic ValidationError and return 422."""
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": exc.errors()},
    )


@app.exception_handler(Exception)
async def handle_unhandled_exceptions(request: Request, exc: Exception) -> JSONResponse:
    """Catch and log all unhandled exceptions."""
    logger.exception("Unhandled error on %s", request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


# Register routers
app.include_router(health.router)
app.include_router(convert.router)


@app.get("/")
def root() -> dict[str, str]:
    """Root endpoint."""
    return {"service": "janus", "version": "0.1.0"}
