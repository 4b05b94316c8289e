"""Custom exceptions for foogle charts."""


from __future__ import annotations


class FoogleError(Exception):
    """Base exception for the project."""


class ConfigError(FoogleError):
    """Raised when chart definition files or settings are missing/invalid."""


class ValidationError(FoogleError):
    """Raised for values that cannot be boxed or converted (e.g., None as a data point)."""


class PayloadError(FoogleError):
    """Raised when a serialized chart payload is malformed."""
