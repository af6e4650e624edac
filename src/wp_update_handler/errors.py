"""Exceptions raised for integration mistakes (never for remote failures)."""


class UpdateHandlerError(Exception):
    """Base class for all wp-update-handler errors."""


class ReadOnlyMetadataError(UpdateHandlerError, TypeError):
    """Raised when code tries to mutate package metadata."""


class MetadataSourceError(UpdateHandlerError, OSError):
    """Raised by a metadata source when the host cannot supply metadata."""


class ConfigurationError(UpdateHandlerError, ValueError):
    """Raised when an updater is configured with invalid values."""


class FrozenConfigError(UpdateHandlerError, RuntimeError):
    """Raised when a config builder is modified after build()."""
