"""Shared constants for glossary.

This module provides centralized constants used across the lexicon and
runtime packages. Placing constants here avoids circular imports and
provides a single source of truth.

Constants are grouped by domain:
- Source files: naming of locale-suffixed glossary documents
- Keys: separators used when flattening and qualifying lexemes
- Placeholders: delimiters of interpolation slots in templates
- Validation: lexeme derivation for validation metadata

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Source files
    "DEFAULT_EXTENSION",
    "DEFAULT_ENCODING",
    "MIN_LOCALE_LENGTH",
    # Keys
    "KEY_SEPARATOR",
    # Placeholders
    "PLACEHOLDER_OPEN",
    "PLACEHOLDER_CLOSE",
    # Validation
    "VALIDATION_NAMESPACE",
    "UNKNOWN_LEXEME",
]

# ============================================================================
# SOURCE FILES
# ============================================================================

# Source documents are named "<base_name>.<locale>.<extension>".
DEFAULT_EXTENSION: str = "yml"

DEFAULT_ENCODING: str = "utf-8"

# Locale suffixes shorter than this are not treated as locales ("en", "ru",
# "pt_BR" qualify; a single character does not).
MIN_LOCALE_LENGTH: int = 2

# ============================================================================
# KEYS
# ============================================================================

# Joins nested document keys and prefixes lexemes with their locale.
# Not escaped: a literal "." inside a document key is indistinguishable
# from nesting.
KEY_SEPARATOR: str = "."

# ============================================================================
# PLACEHOLDERS
# ============================================================================

PLACEHOLDER_OPEN: str = "{{"
PLACEHOLDER_CLOSE: str = "}}"

# ============================================================================
# VALIDATION
# ============================================================================

# Root segment of every lexeme derived from validation metadata.
VALIDATION_NAMESPACE: str = "validation"

# Returned when metadata carries no "validation" field.
UNKNOWN_LEXEME: str = "validation.unknown"
