"""Source document discovery and loading for lexicon compilation.

Locates "<base_name>.<locale>.<ext>" documents, reads them with PyYAML and
records the outcome of every attempt. Loading is permissive: missing,
unreadable and malformed documents contribute no entries and are reported
through load results and the logging channel instead of exceptions.

Components:
    SourceDocument - Immutable record of one located document
    DocumentLoadResult - Immutable result of one discovery or load attempt
    LoadSummary - Immutable aggregate of all results from one compilation
    discover_documents - Glob the locale variants of a base name
    load_document - Read, parse and flatten one document

Python 3.13+.
"""

from __future__ import annotations

import glob
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from glossary.config import LexiconConfig
from glossary.constants import KEY_SEPARATOR
from glossary.diagnostics import Diagnostic, DiagnosticCode
from glossary.enums import LoadStatus
from glossary.lexicon.flatten import flatten_keys
from glossary.lexicon.types import LocaleCode, QualifiedKey, SourceName, Template

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Located documents
    "SourceDocument",
    "discover_documents",
    "load_document",
    # Load result types
    "DocumentLoadResult",
    "LoadSummary",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SourceDocument:
    """A located glossary document.

    Attributes:
        source_name: Base name the document was discovered for
        locale: Locale segment taken from the file name
        path: Resolved path of the document
    """

    source_name: SourceName
    locale: LocaleCode
    path: Path


def _locale_from_filename(filename: str, stem: str, config: LexiconConfig) -> str | None:
    """Extract the locale segment from "<stem>.<locale>.<ext>".

    Returns None when the file name belongs to another base name, e.g.
    "common.extra.en.yml" matched by the pattern for "common".
    """
    prefix = f"{stem}{KEY_SEPARATOR}"
    if not filename.startswith(prefix) or not filename.endswith(config.suffix):
        return None
    locale = filename[len(prefix) : len(filename) - len(config.suffix)]
    return locale if config.accepts_locale(locale) else None


def discover_documents(
    base_directory: Path,
    source_name: SourceName,
    config: LexiconConfig,
) -> tuple[SourceDocument, ...]:
    """Find every locale variant of a base name.

    The base name is joined to base_directory and may walk upwards
    ("../common"). Glob metacharacters inside the base name are matched
    literally. Matches are sorted so that merge order is deterministic.

    Args:
        base_directory: Directory base names resolve against
        source_name: Base name without locale suffix or extension
        config: Lexicon configuration (extension, locale length)

    Returns:
        Located documents sorted by path
    """
    base_path = base_directory / source_name
    pattern = config.pattern_for(glob.escape(str(base_path)))
    documents: list[SourceDocument] = []
    for match in sorted(glob.glob(pattern)):
        path = Path(match)
        locale = _locale_from_filename(path.name, base_path.name, config)
        if locale is None or not path.is_file():
            continue
        documents.append(SourceDocument(source_name=source_name, locale=locale, path=path.resolve()))
    return tuple(documents)


def load_document(
    document: SourceDocument,
    config: LexiconConfig,
) -> tuple[list[tuple[QualifiedKey, Template]], DocumentLoadResult]:
    """Read, parse and flatten one located document.

    Never raises for I/O or YAML errors: the failure is captured in the
    returned DocumentLoadResult and the entry list is empty.

    Args:
        document: Located document
        config: Lexicon configuration (encoding)

    Returns:
        Tuple of (locale-qualified entries, load result)
    """
    path_text = str(document.path)

    def _failed(
        status: LoadStatus,
        code: DiagnosticCode,
        message: str,
        error: Exception | None = None,
        hint: str | None = None,
    ) -> tuple[list[tuple[QualifiedKey, Template]], DocumentLoadResult]:
        diagnostic = Diagnostic(code=code, message=message, path=path_text, hint=hint)
        if status == LoadStatus.NOT_FOUND:
            logger.debug("%s", diagnostic.format_error())
        else:
            logger.warning("%s", diagnostic.format_error())
        result = DocumentLoadResult(
            source_name=document.source_name,
            status=status,
            locale=document.locale,
            path=document.path,
            error=error,
            diagnostic=diagnostic,
        )
        return [], result

    try:
        text = document.path.read_text(encoding=config.encoding)
    except FileNotFoundError as e:
        return _failed(
            LoadStatus.NOT_FOUND,
            DiagnosticCode.SOURCE_NOT_FOUND,
            f"Glossary document disappeared before reading: {path_text}",
            e,
        )
    except (OSError, UnicodeDecodeError) as e:
        return _failed(
            LoadStatus.ERROR,
            DiagnosticCode.SOURCE_UNREADABLE,
            f"Cannot read glossary document {path_text}: {e}",
            e,
            hint=f"Check file permissions and that the file is {config.encoding} text",
        )

    try:
        data: Any = yaml.safe_load(text)
    except yaml.YAMLError as e:
        return _failed(
            LoadStatus.ERROR,
            DiagnosticCode.SOURCE_MALFORMED,
            f"Malformed glossary document {path_text}: {e}",
            e,
            hint="Fix the YAML syntax error reported above",
        )

    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        return _failed(
            LoadStatus.ERROR,
            DiagnosticCode.SOURCE_NOT_MAPPING,
            f"Glossary document {path_text} must contain a mapping, "
            f"got {type(data).__name__}",
            hint="The top level of a glossary document must be a mapping of keys",
        )

    # Null leaves are untranslated; they never become entries.
    entries = [
        (f"{document.locale}{KEY_SEPARATOR}{lexeme}", expression)
        for lexeme, expression in flatten_keys(data)
        if expression is not None
    ]
    logger.debug("Loaded %d entries from %s", len(entries), path_text)
    result = DocumentLoadResult(
        source_name=document.source_name,
        status=LoadStatus.SUCCESS,
        locale=document.locale,
        path=document.path,
        entry_count=len(entries),
    )
    return entries, result


@dataclass(frozen=True, slots=True)
class DocumentLoadResult:
    """Result of one discovery or load attempt.

    A base name that matched no document produces a single NOT_FOUND result
    with locale and path set to None.

    Attributes:
        source_name: Base name the attempt belongs to
        status: Load status (success, not_found, error)
        locale: Locale of the document (None if nothing was located)
        path: Resolved document path (None if nothing was located)
        error: Exception that caused the failure, if any
        diagnostic: Diagnostic describing the failure, if any
        entry_count: Number of entries the document contributed
    """

    source_name: SourceName
    status: LoadStatus
    locale: LocaleCode | None = None
    path: Path | None = None
    error: Exception | None = None
    diagnostic: Diagnostic | None = None
    entry_count: int = 0

    @property
    def is_success(self) -> bool:
        """Check if the document loaded successfully."""
        return self.status == LoadStatus.SUCCESS

    @property
    def is_not_found(self) -> bool:
        """Check if no document was found."""
        return self.status == LoadStatus.NOT_FOUND

    @property
    def is_error(self) -> bool:
        """Check if the document could not be read or parsed."""
        return self.status == LoadStatus.ERROR


@dataclass(frozen=True, slots=True)
class LoadSummary:
    """Immutable aggregate of load results from one compilation.

    All statistics are computed properties derived from the ``results``
    tuple, in the order documents were processed.

    Attributes:
        results: All individual load results (immutable tuple)

    Example:
        >>> lexicon = compile_lexicon("locales", ["common", "errors"])
        >>> summary = lexicon.load_summary
        >>> for result in summary.get_not_found():
        ...     print(f"No documents for {result.source_name}")
    """

    results: tuple[DocumentLoadResult, ...] = ()

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"LoadSummary(total={self.total_attempted}, "
            f"ok={self.successful}, "
            f"not_found={self.not_found}, "
            f"errors={self.errors}, "
            f"entries={self.entry_count})"
        )

    @property
    def total_attempted(self) -> int:
        """Total number of load attempts."""
        return len(self.results)

    @property
    def successful(self) -> int:
        """Number of successful loads."""
        return sum(1 for r in self.results if r.is_success)

    @property
    def not_found(self) -> int:
        """Number of attempts that found no document."""
        return sum(1 for r in self.results if r.is_not_found)

    @property
    def errors(self) -> int:
        """Number of load errors."""
        return sum(1 for r in self.results if r.is_error)

    @property
    def entry_count(self) -> int:
        """Entries contributed across all documents, before merging."""
        return sum(r.entry_count for r in self.results)

    @property
    def has_errors(self) -> bool:
        """Check if any document failed to load."""
        return self.errors > 0

    @property
    def all_successful(self) -> bool:
        """Check if every base name was found and every document loaded."""
        return self.errors == 0 and self.not_found == 0

    def get_errors(self) -> tuple[DocumentLoadResult, ...]:
        """Get all results with errors."""
        return tuple(r for r in self.results if r.is_error)

    def get_not_found(self) -> tuple[DocumentLoadResult, ...]:
        """Get all results where no document was found."""
        return tuple(r for r in self.results if r.is_not_found)

    def get_successful(self) -> tuple[DocumentLoadResult, ...]:
        """Get all successful load results."""
        return tuple(r for r in self.results if r.is_success)

    def get_by_locale(self, locale: LocaleCode) -> tuple[DocumentLoadResult, ...]:
        """Get all results for a specific locale."""
        return tuple(r for r in self.results if r.locale == locale)
