"""Typed exceptions for helptext.

The layout engine itself never raises: every odd input has a degraded
rendering. These types cover schema loading and CLI startup only.
"""


class HelpTextError(Exception):
    """Base exception for helptext failures."""


class SchemaLoadError(HelpTextError):
    """Raised when a schema file cannot be read or validated."""


class StartupValidationError(HelpTextError):
    """Raised when startup arguments are invalid."""
