"""
Domain exceptions for Edgy.

Follows the "Fail Fast" and "Strict Types" principles.
All application errors should inherit from EdgyError.
"""


class EdgyError(Exception):
    """Base class for all Edgy exceptions."""

    def __init__(self, message: str, context: dict = None):
        super().__init__(message)
        self.context = context or {}


class MalformedTreeError(EdgyError):
    """Raised when a design node tree contains a cycle or is nested too deeply."""

    pass


class ScreenFileError(EdgyError):
    """Raised when a screen export is missing, unreadable or malformed."""

    pass


class KnowledgeBaseError(EdgyError):
    """Raised when a knowledge base table cannot be loaded."""

    pass


class ConfigurationError(EdgyError):
    """Raised when configuration is invalid or corrupt."""

    pass
