"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages shared by the compiler,
the lexeme resolver and the lookup layer.

Python 3.13+.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Diagnostic codes with unique identifiers.

    Organized by category:
        1000-1999: Lookup diagnostics (keys absent from a compiled lexicon)
        2000-2999: Derivation diagnostics (lexemes from validation metadata)
        3000-3999: Compilation diagnostics (locating and reading documents)
    """

    # Lookup (1000-1999)
    KEY_NOT_FOUND = 1001

    # Derivation (2000-2999)
    VALIDATION_FIELD_MISSING = 2001

    # Compilation (3000-3999)
    SOURCE_NOT_FOUND = 3001
    SOURCE_UNREADABLE = 3002
    SOURCE_MALFORMED = 3003
    SOURCE_NOT_MAPPING = 3004


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics: a code, a one-line message and
    optional location and help text.

    Attributes:
        code: Unique diagnostic code
        message: Human-readable description
        path: Source document the diagnostic refers to (compile diagnostics)
        hint: Suggestion for fixing the problem
        severity: Diagnostic severity level
    """

    code: DiagnosticCode
    message: str
    path: str | None = None
    hint: str | None = None
    severity: Literal["error", "warning"] = "warning"

    def __str__(self) -> str:
        """Return human-readable description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            warning[SOURCE_MALFORMED]: Malformed glossary document
              --> locales/common.en.yml
              = help: Fix the YAML syntax error reported above

        Returns:
            Formatted diagnostic message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
