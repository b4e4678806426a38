"""Flattening of nested glossary documents into dotted keys.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from glossary.constants import KEY_SEPARATOR

__all__ = ["flatten_keys"]


def flatten_keys(document: Mapping[Any, Any], prefix: str | None = None) -> list[tuple[str, Any]]:
    """Flatten a nested mapping into (dotted_key, value) pairs.

    Traverses depth-first in the mapping's own order. Nested mappings
    recurse; every other value is emitted as a leaf under its full path.
    Keys are converted with str(), since YAML may load numbers or booleans
    as keys.

    Note:
        Segments are joined without escaping, so a document key that itself
        contains "." produces the same dotted key as the equivalent nesting.

    Args:
        document: Parsed source document
        prefix: Dotted path of the mapping within the root document

    Returns:
        List of (dotted_key, value) pairs, one per leaf

    Example:
        >>> flatten_keys({"count": {"first": "First"}, "title": "Glossary"})
        [('count.first', 'First'), ('title', 'Glossary')]
    """
    pairs: list[tuple[str, Any]] = []
    for key, value in document.items():
        full_key = f"{prefix}{KEY_SEPARATOR}{key}" if prefix is not None else str(key)
        if isinstance(value, Mapping):
            pairs.extend(flatten_keys(value, full_key))
        else:
            pairs.append((full_key, value))
    return pairs
