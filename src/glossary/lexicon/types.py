"""Type aliases for the lexicon domain.

Provides semantic type aliases used throughout the lexicon and runtime
packages and by user code when annotating glossary call sites.

Python 3.13+.
"""

from typing import TypeAlias

__all__ = [
    "LocaleCode",
    "Lexeme",
    "QualifiedKey",
    "SourceName",
    "Template",
]

Lexeme: TypeAlias = str
"""Locale-independent dotted key (e.g., 'game.score', 'validation.required')."""

LocaleCode: TypeAlias = str
"""Locale token taken verbatim from a source file name (e.g., 'en', 'ru', 'pt_BR')."""

QualifiedKey: TypeAlias = str
"""Locale-prefixed lexeme used against a compiled lexicon (e.g., 'en.game.score')."""

SourceName: TypeAlias = str
"""Base name of a glossary document without locale or extension (e.g., '../common')."""

Template: TypeAlias = str
"""Localized expression, possibly containing {{name}} placeholders."""
