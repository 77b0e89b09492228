"""Shared dependencies for routers."""

from typing import Annotated

from fastapi import Depends

from src.clients.conversion import get_conversion_service
from src.services.conversion_service import ConversionService

# Typed dependency aliases for use in endpoint signatures
ConversionServiceDep = Annotated[ConversionService, Depends(get_conversion_service)]
