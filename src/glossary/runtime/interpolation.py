"""Template interpolation and lexicon lookup.

Templates carry placeholders of the form {{name}}: two opening braces, a
name without whitespace or braces, two closing braces. There is no escape
for literal braces.

Substitution is a single pass over the template: a placeholder with a
binding is replaced by the binding's str() value, a placeholder without a
binding is kept verbatim, and substituted text is never scanned again.

Python 3.13+.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import TypeAlias

from glossary.constants import PLACEHOLDER_CLOSE, PLACEHOLDER_OPEN
from glossary.diagnostics import Diagnostic, DiagnosticCode
from glossary.lexicon.types import QualifiedKey, Template

__all__ = [
    "Bindings",
    "MissingKeyInfo",
    "interpolate",
    "lookup",
    "normalize_bindings",
]

logger = logging.getLogger(__name__)

Bindings: TypeAlias = Mapping[object, object] | Iterable[tuple[object, object]]
"""Placeholder values: a mapping or a sequence of (name, value) pairs."""

_PLACEHOLDER_PATTERN = re.compile(
    re.escape(PLACEHOLDER_OPEN) + r"([^\s{}]+)" + re.escape(PLACEHOLDER_CLOSE)
)


@dataclass(frozen=True, slots=True)
class MissingKeyInfo:
    """Information about a lookup that found no expression.

    Provided to the on_missing callback of lookup() and of the facades.

    Attributes:
        qualified_key: Key that was looked up
        fallback: Fallback supplied by the caller (None if absent)
        result: String returned to the caller instead of an expression

    Example:
        >>> def report(info: MissingKeyInfo) -> None:
        ...     untranslated.add(info.qualified_key)
        >>> glossary = Glossary("locales", ["common"], on_missing=report)
    """

    qualified_key: QualifiedKey
    fallback: str | None
    result: str


def normalize_bindings(bindings: Bindings | None) -> dict[str, str]:
    """Convert bindings to a dict of placeholder name to replacement text.

    Names and values are converted with str(). For pair sequences a
    repeated name keeps its last value. Input that is neither a mapping nor
    a sequence of pairs is ignored with a warning, so resolution never
    raises for malformed bindings.
    """
    if not bindings:
        return {}
    items = bindings.items() if isinstance(bindings, Mapping) else bindings
    try:
        return {str(name): str(value) for name, value in items}
    except (TypeError, ValueError):
        logger.warning(
            "Ignoring bindings that are not a mapping or (name, value) pairs: %r", bindings
        )
        return {}


def interpolate(template: Template, bindings: Bindings | None = None) -> str:
    """Substitute bound placeholders in a template.

    Args:
        template: Template text
        bindings: Placeholder values (mapping or pairs)

    Returns:
        Template with every bound placeholder replaced

    Example:
        >>> interpolate("Hello, {{name}}! {{unknown}}", {"name": "Alice"})
        'Hello, Alice! {{unknown}}'
    """
    text = template if isinstance(template, str) else str(template)
    values = normalize_bindings(bindings)
    if not values:
        return text

    def _substitute(match: re.Match[str]) -> str:
        return values.get(match.group(1), match.group(0))

    return _PLACEHOLDER_PATTERN.sub(_substitute, text)


def lookup(
    qualified_key: QualifiedKey,
    table: Mapping[QualifiedKey, Template],
    bindings: Bindings | None = None,
    fallback: str | None = None,
    *,
    on_missing: Callable[[MissingKeyInfo], None] | None = None,
) -> str:
    """Resolve a qualified key against a compiled table.

    A present key yields its interpolated template. A missing key logs a
    warning and yields the fallback, or the key itself when the fallback is
    None or empty.

    Args:
        qualified_key: "{locale}.{lexeme}" key
        table: Compiled lexicon (any mapping)
        bindings: Placeholder values
        fallback: Returned when the key is missing
        on_missing: Called with a MissingKeyInfo when the key is missing

    Returns:
        Resolved string; never raises for missing data

    Example:
        >>> lookup("en.validation.required", {"en.validation.required": "can't be blank"})
        "can't be blank"
        >>> lookup("en.validation.format", {}, fallback="has invalid format")
        'has invalid format'
    """
    template = table.get(qualified_key)
    if template is not None:
        return interpolate(template, bindings)

    result = fallback or qualified_key
    diagnostic = Diagnostic(
        code=DiagnosticCode.KEY_NOT_FOUND,
        message=f"Missing key: {qualified_key}",
        hint="Add the lexeme to the glossary document for this locale",
    )
    logger.warning("%s", diagnostic.format_error())
    if on_missing is not None:
        on_missing(MissingKeyInfo(qualified_key=qualified_key, fallback=fallback, result=result))
    return result
