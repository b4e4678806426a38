"""Hypothesis strategies for glossary property-based testing.

This package provides reusable strategies for generating test data
across multiple test modules:

- lexicon: lexemes, nested documents, templates and validation metadata

Usage:
    from tests.strategies import glossary_documents, templates
    from tests.strategies.lexicon import validation_metadata
"""

from .lexicon import (
    LOCALE_POOL,
    glossary_documents,
    lexemes,
    locales,
    placeholder_names,
    plain_text,
    segments,
    templates,
    validation_metadata,
)

__all__ = [
    "LOCALE_POOL",
    "glossary_documents",
    "lexemes",
    "locales",
    "placeholder_names",
    "plain_text",
    "segments",
    "templates",
    "validation_metadata",
]
