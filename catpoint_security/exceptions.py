"""Exceptions raised by the security system."""


class SecurityError(Exception):
    """Base class for security system errors."""


class InvalidSensorError(SecurityError, ValueError):
    """A sensor argument was missing or malformed."""


class UnknownSensorError(SecurityError, KeyError):
    """A sensor is not registered with the repository."""

    def __str__(self) -> str:
        return Exception.__str__(self)


class InvalidImageError(SecurityError, ValueError):
    """An image could not be used for cat detection."""


class ConfigurationError(SecurityError, ValueError):
    """Configuration values are missing or out of range."""
