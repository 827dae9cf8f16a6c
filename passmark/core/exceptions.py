"""Custom exceptions for Passmark."""


class PassmarkError(Exception):
    """Base exception for all Passmark errors."""

    pass


class ConfigurationError(PassmarkError):
    """Raised when processing configuration is invalid or unreadable."""

    pass


class ValidationError(PassmarkError):
    """Raised when a configuration file fails model validation."""

    pass
