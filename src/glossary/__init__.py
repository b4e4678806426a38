"""glossary - lexeme localization from locale-suffixed YAML glossaries.

Compiles "<base_name>.<locale>.yml" documents into a flat, immutable table
keyed by "{locale}.{lexeme}" and resolves lexemes against it with
{{placeholder}} interpolation and deterministic fallback. Validation errors
described as (message, options) pairs are translated by deriving the
lexeme from their metadata.

Public API:
    Glossary - Direct facade: t(lexeme, locale, **bindings)
    ValidationGlossary - Validation facade: hint((message, options), locale)
    Lexicon - Immutable compiled table
    LexiconConfig - Source document naming and encoding
    compile_lexicon - Compile documents into a Lexicon
    identify - Derive a lexeme from validation metadata
    qualify - Prefix a lexeme with its locale
    lookup - Resolve a qualified key with interpolation and fallback

Exceptions:
    GlossaryError - Base exception class
    LexiconCompileError - Strict-mode compilation failure

Submodules:
    glossary.lexicon - Document loading, load summaries and type aliases
    glossary.runtime - Lexeme derivation and interpolation
    glossary.diagnostics - Diagnostic codes and formatting
"""

from .config import LexiconConfig
from .diagnostics import GlossaryError, LexiconCompileError
from .glossary import Glossary, ValidationGlossary
from .lexicon import Lexicon, compile_lexicon
from .runtime import MissingKeyInfo, identify, interpolate, lookup, qualify

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("glossary")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Glossary",
    "GlossaryError",
    "Lexicon",
    "LexiconCompileError",
    "LexiconConfig",
    "MissingKeyInfo",
    "ValidationGlossary",
    "__version__",
    "compile_lexicon",
    "identify",
    "interpolate",
    "lookup",
    "qualify",
]
