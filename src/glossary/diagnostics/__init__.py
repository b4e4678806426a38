"""Diagnostic system for glossary warnings and errors.

Provides structured diagnostics with codes, paths and hints, shared by the
logging channel and the strict-mode exceptions.

Python 3.13+.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import GlossaryError, LexiconCompileError
from .formatter import DiagnosticFormatter, OutputFormat

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "GlossaryError",
    "LexiconCompileError",
    "OutputFormat",
]
