"""Public facades over a compiled lexicon.

Glossary resolves lexemes directly; ValidationGlossary derives the lexeme
from validation error metadata first. Each facade compiles its own lexicon
when it is constructed and keeps it for its lifetime, typically as a
module-level object next to the code that uses it:

    # myapp/phrasebook.py
    phrasebook = Glossary.for_file(__file__, ["../locales/common", "game"])

    phrasebook.t("game.score", "en", score=42)

Key architectural decisions:
- Compile once at construction; lookups do no I/O
- The compiled Lexicon is immutable; reload() builds a new one and swaps
  the reference, so concurrent readers see either the old or the new table
- Lookups never raise for missing data

Python 3.13+.
"""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Callable, Iterable, Mapping
from pathlib import Path
from typing import Any, Self

from glossary.config import LexiconConfig
from glossary.lexicon import Lexicon, LoadSummary, compile_lexicon
from glossary.lexicon.compiler import normalize_source_names
from glossary.lexicon.types import Lexeme, LocaleCode, SourceName
from glossary.runtime import (
    Bindings,
    Metadata,
    MissingKeyInfo,
    identify,
    lookup,
    qualify,
)
from glossary.runtime.interpolation import normalize_bindings
from glossary.runtime.lexeme import normalize_metadata

__all__ = ["Glossary", "ValidationGlossary"]

logger = logging.getLogger(__name__)


class Glossary:
    """Lexeme localization over locale-suffixed YAML documents.

    Example:
        >>> # locales/example.en.yml:  messages: {hello: "Hello, {{name}}!"}
        >>> glossary = Glossary("locales", ["example"])
        >>> glossary.t("messages.hello", "en", name="Alice")
        'Hello, Alice!'
        >>> glossary.t("unknown.key", "ru")
        'ru.unknown.key'

    Attributes:
        lexicon: Currently published compiled table
    """

    __slots__ = (
        "_base_directory",
        "_config",
        "_lexicon",
        "_on_dependency",
        "_on_missing",
        "_reload_lock",
        "_source_names",
        "_strict",
    )

    def __init__(
        self,
        base_directory: str | os.PathLike[str],
        source_names: Iterable[SourceName | os.PathLike[str]],
        *,
        config: LexiconConfig | None = None,
        on_dependency: Callable[[Path], None] | None = None,
        on_missing: Callable[[MissingKeyInfo], None] | None = None,
        strict: bool = False,
    ) -> None:
        """Compile the lexicon for this glossary.

        Args:
            base_directory: Directory base names resolve against
            source_names: Base names without locale suffix or extension,
                in merge order (later names win on key collisions)
            config: Lexicon configuration (default: LexiconConfig())
            on_dependency: Called with each located document path, on
                construction and on every reload
            on_missing: Called with a MissingKeyInfo for each lookup that
                finds no expression
            strict: Raise LexiconCompileError for unreadable or malformed
                documents instead of skipping them

        Raises:
            TypeError: If source_names is structurally invalid
            LexiconCompileError: In strict mode, if a document cannot be loaded
        """
        self._base_directory = Path(base_directory)
        self._source_names = normalize_source_names(source_names)
        self._config = config if config is not None else LexiconConfig()
        self._on_dependency = on_dependency
        self._on_missing = on_missing
        self._strict = strict
        self._reload_lock = threading.Lock()
        self._lexicon = self._compile()

    @classmethod
    def for_file(
        cls,
        file: str | os.PathLike[str],
        source_names: Iterable[SourceName | os.PathLike[str]],
        **options: Any,
    ) -> Self:
        """Create a glossary whose base names resolve next to ``file``.

        Pass ``__file__`` to keep glossary documents beside the module that
        uses them.

        Example:
            >>> phrasebook = Glossary.for_file(__file__, ["../locales/common", "project"])
        """
        return cls(Path(file).resolve().parent, source_names, **options)

    def _compile(self) -> Lexicon:
        lexicon = compile_lexicon(
            self._base_directory,
            self._source_names,
            config=self._config,
            on_dependency=self._on_dependency,
            strict=self._strict,
        )
        logger.debug(
            "%s built from %s: %r",
            type(self).__name__,
            ", ".join(self._source_names) or "-",
            lexicon,
        )
        return lexicon

    def reload(self) -> Lexicon:
        """Recompile from the same documents and publish the new lexicon.

        The new table is built completely before the reference is swapped;
        the previous Lexicon is left untouched. Concurrent reloads are
        serialized.

        Returns:
            Newly published Lexicon
        """
        with self._reload_lock:
            lexicon = self._compile()
            self._lexicon = lexicon
        logger.info("%s reloaded: %d entries", type(self).__name__, len(lexicon))
        return lexicon

    @property
    def lexicon(self) -> Lexicon:
        """Currently published compiled table."""
        return self._lexicon

    @property
    def locales(self) -> tuple[LocaleCode, ...]:
        """Locales with at least one expression."""
        return self._lexicon.locales

    @property
    def sources(self) -> tuple[Path, ...]:
        """Documents the current lexicon was compiled from."""
        return self._lexicon.sources

    @property
    def load_summary(self) -> LoadSummary:
        """Load results of the current lexicon."""
        return self._lexicon.load_summary

    def resolve(
        self,
        lexeme: Lexeme,
        locale: LocaleCode,
        bindings: Bindings | None = None,
        /,
        **kwargs: object,
    ) -> str:
        """Return the expression of a lexeme in the given locale.

        Placeholders in the form ``{{name}}`` are replaced by the matching
        binding. Keyword bindings are applied after ``bindings`` and win on
        name clashes. Falls back to the qualified key ("ru.unknown.key")
        and logs a warning if no expression is found.

        Args:
            lexeme: Dotted lexeme (e.g. "game.score")
            locale: Locale code (e.g. "en")
            bindings: Placeholder values as a mapping or (name, value) pairs
            **kwargs: Placeholder values as keyword arguments

        Returns:
            Resolved expression or the qualified key

        Example:
            >>> glossary.resolve("messages.score", "en", score=42)
            'Score: 42'
            >>> glossary.resolve("messages.score", "en", {"score": 42})
            'Score: 42'
        """
        values: dict[str, str] = normalize_bindings(bindings)
        if kwargs:
            values.update(normalize_bindings(kwargs))
        return lookup(
            qualify(lexeme, locale),
            self._lexicon,
            values,
            on_missing=self._on_missing,
        )

    t = resolve


class ValidationGlossary(Glossary):
    """Glossary for validation error messages.

    Translates ``(message, options)`` error pairs, where options describe
    the failed validation. The lexeme is derived from the "validation",
    "kind" and "type" options; every option is also available as a
    placeholder. Without a translation the original message is returned.

    Source format:

        # validation.en.yml
        validation:
          required: "can't be blank"
          length:
            min:
              string: "should be at least {{count}} character(s)"
          foobar: "you're doing {{foo}} wrong"

    Example:
        >>> validation = ValidationGlossary("locales", ["validation"])
        >>> validation.hint(("you're doing it wrong", {"foo": "bar", "validation": "foobar"}), "en")
        "you're doing bar wrong"
    """

    __slots__ = ()

    def hint(self, error: tuple[str, Metadata], locale: LocaleCode) -> str:
        """Look up a localized message for a ``(message, options)`` error.

        ``options`` must include "validation" to identify the lexeme and may
        include "kind", "type" and any number of interpolation values. If
        no expression is found, the original message is returned.

        Args:
            error: Tuple of original message and validation options
            locale: Locale code

        Returns:
            Localized, interpolated message or the original message

        Example:
            >>> msg = ("should be %{count} character(s)",
            ...        [("validation", "length"), ("kind", "is"), ("type", "string"), ("count", 4)])
            >>> validation.hint(msg, "ru")
            'должно быть 4 символ(ов)'
        """
        message, options = error
        metadata = normalize_metadata(options)
        return lookup(
            qualify(identify(metadata), locale),
            self._lexicon,
            metadata,
            message,
            on_missing=self._on_missing,
        )

    def hint_all(
        self,
        errors: Mapping[str, Iterable[tuple[str, Metadata]]],
        locale: LocaleCode,
    ) -> dict[str, list[str]]:
        """Translate every error of a field-to-errors mapping.

        Args:
            errors: Field name mapped to its ``(message, options)`` errors
            locale: Locale code

        Returns:
            Field name mapped to translated messages, in the original order

        Example:
            >>> validation.hint_all({"title": [("can't be blank", {"validation": "required"})]}, "ru")
            {'title': ['не может быть пустым']}
        """
        return {
            field: [self.hint(error, locale) for error in field_errors]
            for field, field_errors in errors.items()
        }
