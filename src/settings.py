"""
Application settings for the Janus service.

- Defaults are intended for development use.
- For testing, pass a Settings instance to ConversionService.
- For production, set environment variables to override fields.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Janus service configuration."""

    # Loader defaults (requests may override per call)
    patch_urls: bool = Field(
        default=False,
        description="Rewrite core canonical URLs into the source version namespace",
    )
    kill_primitives: bool = Field(
        default=False,
        description="Drop primitive-type StructureDefinitions while loading",
    )
    default_types: list[str] = Field(
        default=["ValueSet", "CodeSystem", "StructureDefinition", "OperationDefinition"],
        description="Resource types a loader accepts when the caller names none",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Root log level")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
