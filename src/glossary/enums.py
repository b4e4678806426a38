"""Enumerations for glossary type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class LoadStatus(StrEnum):
    """Outcome of locating and reading one glossary document.

    StrEnum provides automatic string conversion: str(LoadStatus.SUCCESS) == "success"
    """

    SUCCESS = "success"
    """Document was read and flattened (possibly into zero entries)."""

    NOT_FOUND = "not_found"
    """No document matched the base name, or the file vanished before reading."""

    ERROR = "error"
    """Document exists but could not be read or parsed into a mapping."""


class MetadataField(StrEnum):
    """Metadata keys recognized when deriving a lexeme from validation errors.

    Any other metadata key is treated as an interpolation binding only.
    """

    VALIDATION = "validation"
    """Validation name, e.g. "required" or "length". Required for derivation."""

    KIND = "kind"
    """Validation variant, e.g. "min" or "is" for a length validation."""

    TYPE = "type"
    """Value type the validation applied to, e.g. "string" or "map"."""


__all__ = [
    "LoadStatus",
    "MetadataField",
]
