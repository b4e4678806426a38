"""Lexicon compilation: source documents into a flat lookup table.

compile_lexicon() discovers every locale variant of each declared base
name, flattens the documents and merges them into one immutable Lexicon
keyed by "{locale}.{lexeme}". Later documents win on key collisions, in
declared base-name order and then in sorted file order.

Compilation is a pure read. Each located document is reported to an
optional on_dependency hook so that an embedding build or reload system
can watch it for changes.

Python 3.13+.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import replace
from pathlib import Path
from types import MappingProxyType

from glossary.config import LexiconConfig
from glossary.constants import KEY_SEPARATOR
from glossary.diagnostics import Diagnostic, DiagnosticCode, LexiconCompileError
from glossary.enums import LoadStatus
from glossary.lexicon.loading import (
    DocumentLoadResult,
    LoadSummary,
    discover_documents,
    load_document,
)
from glossary.lexicon.types import Lexeme, LocaleCode, QualifiedKey, SourceName, Template

__all__ = ["Lexicon", "compile_lexicon", "normalize_source_names"]

logger = logging.getLogger(__name__)


class Lexicon(Mapping[QualifiedKey, Template]):
    """Immutable compiled table of localized expressions.

    Maps qualified keys ("en.game.score") to templates. Built once by
    compile_lexicon() and never mutated afterwards, so it can be shared
    between threads without locking. Reloading produces a new Lexicon.

    Example:
        >>> lexicon = Lexicon({"en.count.first": "First", "ru.count.first": "Первый"})
        >>> lexicon["en.count.first"]
        'First'
        >>> lexicon.locales
        ('en', 'ru')
    """

    __slots__ = ("_entries", "_load_summary", "_sources")

    def __init__(
        self,
        entries: Mapping[QualifiedKey, Template] | None = None,
        *,
        sources: tuple[Path, ...] = (),
        load_summary: LoadSummary | None = None,
    ) -> None:
        """Freeze a copy of entries.

        Args:
            entries: Qualified key to template mapping
            sources: Documents the entries were compiled from
            load_summary: Load results of the compilation
        """
        self._entries: Mapping[QualifiedKey, Template] = MappingProxyType(dict(entries or {}))
        self._sources = sources
        self._load_summary = load_summary if load_summary is not None else LoadSummary()

    def __getitem__(self, key: QualifiedKey) -> Template:
        return self._entries[key]

    def __iter__(self) -> Iterator[QualifiedKey]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"Lexicon(entries={len(self)}, locales={self.locales!r})"

    @property
    def sources(self) -> tuple[Path, ...]:
        """Resolved paths of every located source document."""
        return self._sources

    @property
    def load_summary(self) -> LoadSummary:
        """Load results recorded while compiling this lexicon."""
        return self._load_summary

    @property
    def locales(self) -> tuple[LocaleCode, ...]:
        """Sorted locales that contributed at least one entry."""
        return tuple(sorted({key.partition(KEY_SEPARATOR)[0] for key in self._entries}))

    def lexemes(self, locale: LocaleCode) -> tuple[Lexeme, ...]:
        """Sorted lexemes defined for a locale."""
        prefix = f"{locale}{KEY_SEPARATOR}"
        return tuple(sorted(key[len(prefix) :] for key in self._entries if key.startswith(prefix)))

    def missing_lexemes(
        self,
        reference_locale: LocaleCode,
        locale: LocaleCode,
    ) -> tuple[Lexeme, ...]:
        """Lexemes defined for reference_locale but absent for locale.

        Useful for checking translation coverage against a complete locale.

        Example:
            >>> lexicon.missing_lexemes("en", "ru")
            ('messages.farewell',)
        """
        translated = set(self.lexemes(locale))
        return tuple(lexeme for lexeme in self.lexemes(reference_locale) if lexeme not in translated)


def normalize_source_names(source_names: Iterable[SourceName | os.PathLike[str]]) -> tuple[SourceName, ...]:
    """Validate and freeze the declared base names.

    Structural misuse fails loudly at compile time instead of producing an
    empty lexicon.

    Args:
        source_names: Iterable of base names (str or path-like)

    Returns:
        Tuple of base names as strings, in declared order

    Raises:
        TypeError: If source_names is a single string, is not iterable, or
            contains an element that is neither a string nor path-like
    """
    if isinstance(source_names, str | bytes):
        msg = (
            f"source_names must be an iterable of base names, got a single string: "
            f"{source_names!r}. Wrap it in a list."
        )
        raise TypeError(msg)
    try:
        names = list(source_names)
    except TypeError as e:
        msg = f"source_names must be an iterable of base names, got {type(source_names).__name__}"
        raise TypeError(msg) from e

    normalized: list[SourceName] = []
    for name in names:
        if not isinstance(name, str | os.PathLike):
            msg = f"Source name must be a string or path-like object, got {type(name).__name__}"
            raise TypeError(msg)
        normalized.append(os.fspath(name))
    return tuple(normalized)


def compile_lexicon(
    base_directory: str | os.PathLike[str],
    source_names: Iterable[SourceName | os.PathLike[str]],
    *,
    config: LexiconConfig | None = None,
    on_dependency: Callable[[Path], None] | None = None,
    strict: bool = False,
) -> Lexicon:
    """Compile glossary documents into a Lexicon.

    For each base name, every "<base_directory>/<base_name>.<locale>.yml"
    document is flattened and its keys prefixed with the locale. Base names
    without documents and unreadable or malformed documents contribute
    nothing; they are recorded in the lexicon's load summary.

    Args:
        base_directory: Directory base names resolve against
        source_names: Base names without locale suffix or extension, in
            merge order (later names win on key collisions)
        config: Lexicon configuration (default: LexiconConfig())
        on_dependency: Called with the resolved path of every located
            document, before it is read
        strict: Raise LexiconCompileError on the first unreadable or
            malformed document instead of skipping it (default: False)

    Returns:
        Immutable Lexicon

    Raises:
        TypeError: If source_names is structurally invalid
        LexiconCompileError: In strict mode, if a document cannot be loaded

    Example:
        >>> lexicon = compile_lexicon(Path(__file__).parent, ["../locales/common", "game"])
        >>> lexicon["en.game.score"]
        'Score: {{score}}'
    """
    names = normalize_source_names(source_names)
    config = config if config is not None else LexiconConfig()
    base = Path(base_directory)

    entries: dict[QualifiedKey, Template] = {}
    sources: list[Path] = []
    results: list[DocumentLoadResult] = []

    for source_name in names:
        documents = discover_documents(base, source_name, config)
        if not documents:
            diagnostic = Diagnostic(
                code=DiagnosticCode.SOURCE_NOT_FOUND,
                message=f"No glossary documents found for '{source_name}' in {base}",
                path=config.pattern_for(str(base / source_name)),
                hint="Check the base name and the <base_name>.<locale>.<ext> file naming",
            )
            logger.debug("%s", diagnostic.format_error())
            results.append(
                DocumentLoadResult(
                    source_name=source_name,
                    status=LoadStatus.NOT_FOUND,
                    diagnostic=diagnostic,
                )
            )
            continue

        for document in documents:
            sources.append(document.path)
            if on_dependency is not None:
                on_dependency(document.path)

            document_entries, result = load_document(document, config)
            results.append(result)
            if strict and result.is_error:
                diagnostic = result.diagnostic or Diagnostic(
                    code=DiagnosticCode.SOURCE_MALFORMED,
                    message=f"Cannot load glossary document {document.path}",
                    path=str(document.path),
                )
                raise LexiconCompileError(replace(diagnostic, severity="error")) from result.error
            entries.update(document_entries)

    lexicon = Lexicon(entries, sources=tuple(sources), load_summary=LoadSummary(tuple(results)))
    logger.info(
        "Compiled lexicon from %s: %d entries, %d documents, locales=%s",
        base,
        len(lexicon),
        len(sources),
        ", ".join(lexicon.locales) or "-",
    )
    return lexicon
