"""Exceptions for criteria construction and configuration."""


class CriteriaError(Exception):
    """Base exception for criteria errors."""

    pass


class InvalidConfigurationError(CriteriaError, ValueError):
    """Criteria values are missing or malformed."""

    pass


class TypeResolutionError(InvalidConfigurationError):
    """A dotted type name could not be imported."""

    pass


class ConfigLoadError(CriteriaError):
    """Failed to read or validate a criteria configuration file."""

    pass
