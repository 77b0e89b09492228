"""Custom exceptions for the Janus conversion service."""


class JanusError(Exception):
    """Base exception for Janus errors."""

    pass


class UnsupportedVersionError(JanusError):
    """A declared FHIR version does not belong to any supported family."""

    pass


class UnsupportedConversionError(JanusError):
    """No model or converter is registered for a resource type and version pair."""

    pass


class LoaderError(JanusError):
    """Error while reading a package or parsing a resource."""

    pass
