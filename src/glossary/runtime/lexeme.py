"""Lexeme derivation and qualification.

identify() turns validation metadata into a lexeme using an ordered rule
table, most specific rule first:

    validation + kind + type  ->  "validation.{validation}.{kind}.{type}"
    validation + kind         ->  "validation.{validation}.{kind}"
    validation                ->  "validation.{validation}"
    (anything else)           ->  "validation.unknown" (with a warning)

qualify() prefixes a lexeme with its locale to form the lookup key.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import TypeAlias

from glossary.constants import KEY_SEPARATOR, UNKNOWN_LEXEME, VALIDATION_NAMESPACE
from glossary.diagnostics import Diagnostic, DiagnosticCode
from glossary.enums import MetadataField
from glossary.lexicon.types import Lexeme, LocaleCode, QualifiedKey

__all__ = [
    "LEXEME_RULES",
    "LexemeRule",
    "Metadata",
    "identify",
    "normalize_metadata",
    "qualify",
]

logger = logging.getLogger(__name__)

Metadata: TypeAlias = Mapping[object, object] | Iterable[tuple[object, object]]
"""Validation metadata: a mapping or a sequence of (name, value) pairs."""


def _segment(value: object) -> str:
    return "" if value is None else str(value)


@dataclass(frozen=True, slots=True)
class LexemeRule:
    """One row of the lexeme decision table.

    Matches when every field is present in the metadata and formats the
    lexeme from those fields, in order, under the validation namespace.

    Attributes:
        fields: Metadata fields the rule requires
    """

    fields: tuple[MetadataField, ...]

    def matches(self, metadata: Mapping[str, object]) -> bool:
        """Check that every required field is present (None counts as present)."""
        return all(field.value in metadata for field in self.fields)

    def format(self, metadata: Mapping[str, object]) -> Lexeme:
        """Build the lexeme from the required fields.

        A None value contributes an empty segment: {"validation": None}
        yields "validation.".
        """
        segments = [_segment(metadata[field.value]) for field in self.fields]
        return KEY_SEPARATOR.join([VALIDATION_NAMESPACE, *segments])


LEXEME_RULES: tuple[LexemeRule, ...] = (
    LexemeRule((MetadataField.VALIDATION, MetadataField.KIND, MetadataField.TYPE)),
    LexemeRule((MetadataField.VALIDATION, MetadataField.KIND)),
    LexemeRule((MetadataField.VALIDATION,)),
)


def normalize_metadata(metadata: Metadata | None) -> dict[str, object]:
    """Convert metadata to a dict keyed by field name.

    Keys are converted with str(), so StrEnum members and plain strings are
    interchangeable. For pair sequences a repeated name keeps its last value.
    Input that is neither a mapping nor a sequence of pairs yields an empty
    dict.

    Args:
        metadata: Mapping, sequence of pairs, or None

    Returns:
        New dict of metadata
    """
    if metadata is None:
        return {}
    items = metadata.items() if isinstance(metadata, Mapping) else metadata
    try:
        return {str(name): value for name, value in items}
    except (TypeError, ValueError):
        logger.warning("Ignoring metadata that is not a mapping or (name, value) pairs: %r", metadata)
        return {}


def identify(metadata: Metadata | None) -> Lexeme:
    """Derive a lexeme from validation metadata.

    Total: never raises. Metadata without a "validation" field logs a
    warning and yields "validation.unknown".

    Args:
        metadata: Validation metadata (mapping or pairs)

    Returns:
        Most specific lexeme the metadata supports

    Example:
        >>> identify({"validation": "length", "kind": "min", "type": "string"})
        'validation.length.min.string'
        >>> identify([("validation", "required")])
        'validation.required'
    """
    fields = normalize_metadata(metadata)
    for rule in LEXEME_RULES:
        if rule.matches(fields):
            return rule.format(fields)

    diagnostic = Diagnostic(
        code=DiagnosticCode.VALIDATION_FIELD_MISSING,
        message=f"Missing key: 'validation' in metadata {fields!r}",
        hint="Add a 'validation' option when recording the error",
    )
    logger.warning("%s", diagnostic.format_error())
    return UNKNOWN_LEXEME


def qualify(lexeme: Lexeme, locale: LocaleCode) -> QualifiedKey:
    """Prefix a lexeme with its locale.

    Example:
        >>> qualify("validation.required", "en")
        'en.validation.required'
    """
    return f"{locale}{KEY_SEPARATOR}{lexeme}"
