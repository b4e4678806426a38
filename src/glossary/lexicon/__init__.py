"""Lexicon compilation package.

Provides the compile-time half of the glossary: locating locale-suffixed
YAML documents, flattening them and merging them into an immutable table.

Submodules:
    types    - PEP 695 type aliases (Lexeme, LocaleCode, QualifiedKey, SourceName, Template)
    flatten  - flatten_keys() for nested documents
    loading  - document discovery, DocumentLoadResult, LoadSummary
    compiler - Lexicon and compile_lexicon()

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from glossary.enums import LoadStatus
from glossary.lexicon.compiler import Lexicon, compile_lexicon
from glossary.lexicon.flatten import flatten_keys
from glossary.lexicon.loading import DocumentLoadResult, LoadSummary, SourceDocument
from glossary.lexicon.types import Lexeme, LocaleCode, QualifiedKey, SourceName, Template

__all__ = [
    # Compilation
    "Lexicon",
    "compile_lexicon",
    "flatten_keys",
    # Load tracking
    "DocumentLoadResult",
    "LoadStatus",
    "LoadSummary",
    "SourceDocument",
    # Type aliases for user code type annotations
    "Lexeme",
    "LocaleCode",
    "QualifiedKey",
    "SourceName",
    "Template",
]
