"""Glossary exception hierarchy with structured diagnostics.

Lookups never raise: missing keys, missing bindings and missing metadata
degrade to fallback strings. Exceptions exist only for compile-time misuse.

Python 3.13+.
"""

from .codes import Diagnostic

__all__ = [
    "GlossaryError",
    "LexiconCompileError",
]


class GlossaryError(Exception):
    """Base exception for all glossary errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize GlossaryError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class LexiconCompileError(GlossaryError):
    """Source document could not be compiled in strict mode.

    Only raised when compilation runs with ``strict=True``. The default
    permissive mode records the failure in the load summary and skips the
    document instead.
    """
