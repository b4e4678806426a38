"""Quickstart example for glossary.

Writes a few YAML glossary documents to a temporary directory, compiles
them and resolves expressions through both facades.

Python 3.13+.
"""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path

from glossary import Glossary, MissingKeyInfo, ValidationGlossary

logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

GAME_EN = """\
game:
  score: "Score: {{score}}"
  greeting: "Hello, {{name}}!"
"""

GAME_RU = """\
game:
  score: "Счёт: {{score}}"
  greeting: "Привет, {{name}}!"
"""

VALIDATION_EN = """\
validation:
  required: "can't be blank"
  length:
    min:
      string: "should be at least {{count}} character(s)"
"""

VALIDATION_RU = """\
validation:
  required: "не может быть пустым"
"""


def write_documents(directory: Path) -> None:
    """Write the example documents as <base_name>.<locale>.yml files."""
    (directory / "game.en.yml").write_text(GAME_EN, encoding="utf-8")
    (directory / "game.ru.yml").write_text(GAME_RU, encoding="utf-8")
    (directory / "validation.en.yml").write_text(VALIDATION_EN, encoding="utf-8")
    (directory / "validation.ru.yml").write_text(VALIDATION_RU, encoding="utf-8")


def example_1_direct_lookup(directory: Path) -> None:
    """Example 1: t(lexeme, locale[, bindings])."""
    print("=" * 50)
    print("Example 1: Direct Lookup")
    print("=" * 50)

    glossary = Glossary(directory, ["game"])

    print(glossary.t("game.score", "en", score=42))
    # Output: Score: 42
    print(glossary.t("game.greeting", "ru", name="Алиса"))
    # Output: Привет, Алиса!
    print(glossary.t("game.greeting", "en"))
    # Output: Hello, {{name}}!
    print(glossary.t("game.unknown", "en"))
    # Output: en.game.unknown (and a warning in the log)


def example_2_validation_hints(directory: Path) -> None:
    """Example 2: hint((message, options), locale)."""
    print("\n" + "=" * 50)
    print("Example 2: Validation Hints")
    print("=" * 50)

    validation = ValidationGlossary(directory, ["validation"])
    error = (
        "should be at least %{count} character(s)",
        {"validation": "length", "kind": "min", "type": "string", "count": 3},
    )

    print(validation.hint(error, "en"))
    # Output: should be at least 3 character(s)
    print(validation.hint(error, "ru"))
    # Output: should be at least %{count} character(s)  (no Russian expression)
    print(validation.hint_all({"title": [("can't be blank", {"validation": "required"})]}, "ru"))
    # Output: {'title': ['не может быть пустым']}


def example_3_coverage(directory: Path) -> None:
    """Example 3: load summary and translation coverage."""
    print("\n" + "=" * 50)
    print("Example 3: Load Summary and Coverage")
    print("=" * 50)

    untranslated: set[str] = set()

    def report(info: MissingKeyInfo) -> None:
        untranslated.add(info.qualified_key)

    glossary = Glossary(directory, ["game", "validation", "missing"], on_missing=report)
    summary = glossary.load_summary

    print(f"Locales: {glossary.locales}")
    print(f"Documents loaded: {summary.successful}, base names not found: {summary.not_found}")
    print(f"Missing in ru: {glossary.lexicon.missing_lexemes('en', 'ru')}")

    glossary.t("game.bonus", "en")
    print(f"Untranslated lookups: {sorted(untranslated)}")


if __name__ == "__main__":
    with tempfile.TemporaryDirectory() as tmp:
        locales = Path(tmp)
        write_documents(locales)
        example_1_direct_lookup(locales)
        example_2_validation_hints(locales)
        example_3_coverage(locales)
