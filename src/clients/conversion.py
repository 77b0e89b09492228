"""Dependency injection provider for the conversion service."""

from src.services.conversion_service import ConversionService

_conversion_service: ConversionService | None = None


def get_conversion_service() -> ConversionService:
    """Get or create the ConversionService singleton."""
    global _conversion_service
    if _conversion_service is None:
        _conversion_service = ConversionService()
    return _conversion_service
