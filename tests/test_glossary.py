"""Tests for the direct Glossary facade.

Mirrors how applications use it: a glossary compiled once from YAML
documents, then t()/resolve() calls per request.
"""

from __future__ import annotations

import threading
from pathlib import Path

import pytest

from glossary import Glossary, Lexicon, LexiconCompileError, MissingKeyInfo


@pytest.fixture
def phrasebook(locales_dir: Path) -> Glossary:
    return Glossary(locales_dir, ["example", "not_exists"])


class TestT2:
    """Test t(lexeme, locale) without bindings."""

    def test_returns_english_translations(self, phrasebook: Glossary) -> None:
        """English expressions resolve."""
        assert phrasebook.t("count.first", "en") == "First"
        assert phrasebook.t("count.second", "en") == "Second"

    def test_returns_russian_translations(self, phrasebook: Glossary) -> None:
        """Russian expressions resolve."""
        assert phrasebook.t("count.first", "ru") == "Первый"
        assert phrasebook.t("count.second", "ru") == "Второй"

    def test_returns_latin_motto(self, phrasebook: Glossary) -> None:
        """Locales are not limited to a fixed list."""
        assert phrasebook.t("motto.glossary", "la") == "Clavis interpretandi"
        assert phrasebook.t("motto.glossary", "en") == "The key to understanding"

    def test_falls_back_to_key_if_missing(self, phrasebook: Glossary) -> None:
        """A missing lexeme returns the qualified key."""
        assert phrasebook.t("unknown.key", "ru") == "ru.unknown.key"

    def test_raw_template_without_bindings(self, phrasebook: Glossary) -> None:
        """Placeholders stay when nothing is bound."""
        assert phrasebook.t("messages.hello", "en") == "Hello, {{name}}!"


class TestT3:
    """Test t(lexeme, locale, bindings) interpolation."""

    def test_interpolates_bindings_in_english(self, phrasebook: Glossary) -> None:
        """Keyword bindings fill placeholders."""
        assert phrasebook.t("messages.score", "en", score=42) == "Score: 42"
        assert phrasebook.t("messages.hello", "en", name="Alice") == "Hello, Alice!"

    def test_interpolates_bindings_in_russian(self, phrasebook: Glossary) -> None:
        """Interpolation works for every locale."""
        assert phrasebook.t("messages.score", "ru", score=100) == "Счёт: 100"
        assert phrasebook.t("messages.hello", "ru", name="Алиса") == "Привет, Алиса!"

    def test_ignores_extra_bindings(self, phrasebook: Glossary) -> None:
        """Unused bindings are ignored."""
        assert phrasebook.t("messages.hello", "en", name="Bob", extra="ignored") == "Hello, Bob!"

    def test_does_not_interpolate_missing_keys(self, phrasebook: Glossary) -> None:
        """Unbound placeholders are left in the output."""
        assert phrasebook.t("messages.hello", "en", foo="Bar") == "Hello, {{name}}!"

    def test_positional_bindings(self, phrasebook: Glossary) -> None:
        """Bindings may be passed as a mapping or pairs."""
        assert phrasebook.resolve("messages.score", "en", {"score": 7}) == "Score: 7"
        assert phrasebook.resolve("messages.score", "en", [("score", 8)]) == "Score: 8"

    def test_keyword_bindings_win(self, phrasebook: Glossary) -> None:
        """Keyword bindings override positional ones with the same name."""
        assert phrasebook.resolve("messages.score", "en", {"score": 1}, score=2) == "Score: 2"

    def test_malformed_bindings_do_not_raise(self, phrasebook: Glossary) -> None:
        """Bindings that are not pairs are ignored; keyword bindings still apply."""
        assert phrasebook.resolve("messages.score", "en", ["score"]) == "Score: {{score}}"
        result = phrasebook.resolve("messages.score", "en", 5, score=3)  # type: ignore[arg-type]

        assert result == "Score: 3"

    def test_bindings_named_like_parameters(self, phrasebook: Glossary) -> None:
        """lexeme and locale are positional-only, so they can be binding names."""
        result = phrasebook.t("messages.hello", "en", name="x", lexeme="y", locale="z")

        assert result == "Hello, x!"


class TestConstruction:
    """Test glossary construction and introspection."""

    def test_for_file_resolves_next_to_file(self) -> None:
        """Base names are relative to the directory of the given file."""
        glossary = Glossary.for_file(__file__, ["support/locales/example"])

        assert glossary.t("count.first", "en") == "First"

    def test_properties(self, phrasebook: Glossary) -> None:
        """locales, sources and load_summary describe the current lexicon."""
        assert phrasebook.locales == ("en", "la", "ru")
        assert len(phrasebook.sources) == 3
        assert phrasebook.load_summary.not_found == 1
        assert isinstance(phrasebook.lexicon, Lexicon)

    def test_on_missing_callback(self, locales_dir: Path) -> None:
        """on_missing observes every unresolved lookup."""
        seen: list[MissingKeyInfo] = []
        glossary = Glossary(locales_dir, ["example"], on_missing=seen.append)

        glossary.t("count.first", "en")
        glossary.t("count.third", "en")

        assert [info.qualified_key for info in seen] == ["en.count.third"]
        assert seen[0].result == "en.count.third"

    def test_on_dependency_callback(self, locales_dir: Path) -> None:
        """on_dependency sees each located document."""
        seen: list[Path] = []

        Glossary(locales_dir, ["example"], on_dependency=seen.append)

        assert {p.name for p in seen} == {"example.en.yml", "example.la.yml", "example.ru.yml"}

    def test_invalid_source_names_fail_at_construction(self, locales_dir: Path) -> None:
        """Structural misuse raises before any lookup."""
        with pytest.raises(TypeError):
            Glossary(locales_dir, "example")  # type: ignore[arg-type]

    def test_strict_construction(self, tmp_path: Path, write_document) -> None:
        """strict=True propagates compile errors."""
        write_document("common.en.yml", "a: [\n")

        with pytest.raises(LexiconCompileError):
            Glossary(tmp_path, ["common"], strict=True)


class TestReload:
    """Test atomic replacement of the compiled table."""

    def test_reload_picks_up_changes(self, tmp_path: Path, write_document) -> None:
        """A changed document is visible after reload()."""
        write_document("common.en.yml", "greeting: Hello\n")
        glossary = Glossary(tmp_path, ["common"])
        assert glossary.t("greeting", "en") == "Hello"

        write_document("common.en.yml", "greeting: Hi\n")
        write_document("common.ru.yml", "greeting: Привет\n")

        assert glossary.t("greeting", "en") == "Hello"
        glossary.reload()
        assert glossary.t("greeting", "en") == "Hi"
        assert glossary.t("greeting", "ru") == "Привет"

    def test_previous_lexicon_is_unchanged(self, tmp_path: Path, write_document) -> None:
        """reload() publishes a new table instead of mutating the old one."""
        write_document("common.en.yml", "greeting: Hello\n")
        glossary = Glossary(tmp_path, ["common"])
        before = glossary.lexicon

        write_document("common.en.yml", "greeting: Hi\n")
        after = glossary.reload()

        assert after is glossary.lexicon
        assert after is not before
        assert before["en.greeting"] == "Hello"
        assert after["en.greeting"] == "Hi"

    def test_concurrent_readers_during_reload(self, tmp_path: Path, write_document) -> None:
        """Readers see either the old or the new expression, never a gap."""
        write_document("common.en.yml", "greeting: Hello\n")
        glossary = Glossary(tmp_path, ["common"])
        results: set[str] = set()
        stop = threading.Event()

        def reader() -> None:
            while not stop.is_set():
                results.add(glossary.t("greeting", "en"))

        threads = [threading.Thread(target=reader) for _ in range(4)]
        for thread in threads:
            thread.start()
        write_document("common.en.yml", "greeting: Hi\n")
        for _ in range(5):
            glossary.reload()
        stop.set()
        for thread in threads:
            thread.join()

        assert results <= {"Hello", "Hi"}
