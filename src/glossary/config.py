"""Compilation configuration for glossary lexicons.

Provides a single frozen dataclass that encapsulates how source documents
are located and read. Passed to ``compile_lexicon`` and to the facades.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass

from glossary.constants import (
    DEFAULT_ENCODING,
    DEFAULT_EXTENSION,
    KEY_SEPARATOR,
    MIN_LOCALE_LENGTH,
)

__all__ = ["LexiconConfig"]


@dataclass(frozen=True, slots=True)
class LexiconConfig:
    """Immutable configuration for lexicon compilation.

    All fields have sensible defaults; constructing ``LexiconConfig()`` with
    no arguments matches the "<base_name>.<locale>.yml" convention.

    Attributes:
        extension: File extension of source documents, without the leading
            dot (default: "yml").
        encoding: Text encoding used to read source documents
            (default: "utf-8").
        min_locale_length: Shortest file name segment accepted as a locale
            (default: 2).

    Example:
        >>> config = LexiconConfig(extension="yaml")
        >>> config.pattern_for("locales/common")
        'locales/common.*.yaml'
    """

    extension: str = DEFAULT_EXTENSION
    encoding: str = DEFAULT_ENCODING
    min_locale_length: int = MIN_LOCALE_LENGTH

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If extension is empty or starts with a dot, if
                encoding is empty, or if min_locale_length is not positive.
        """
        if not self.extension or self.extension.startswith(KEY_SEPARATOR):
            msg = f"extension must be non-empty and have no leading dot, got {self.extension!r}"
            raise ValueError(msg)
        if not self.encoding:
            msg = "encoding must be non-empty"
            raise ValueError(msg)
        if self.min_locale_length < 1:
            msg = f"min_locale_length must be positive, got {self.min_locale_length}"
            raise ValueError(msg)

    @property
    def suffix(self) -> str:
        """File name suffix including the leading dot (e.g. ".yml")."""
        return f"{KEY_SEPARATOR}{self.extension}"

    def pattern_for(self, base_name: str) -> str:
        """Return the glob pattern matching every locale of ``base_name``."""
        return f"{base_name}{KEY_SEPARATOR}*{self.suffix}"

    def accepts_locale(self, locale: str) -> bool:
        """Check whether a file name segment is a locale for this configuration."""
        return len(locale) >= self.min_locale_length and KEY_SEPARATOR not in locale
