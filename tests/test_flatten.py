"""Tests for flattening nested glossary documents into dotted keys."""

from __future__ import annotations

from glossary.lexicon import flatten_keys


class TestFlattenKeys:
    """Test depth-first flattening of nested mappings."""

    def test_flat_document(self) -> None:
        """Top-level leaves keep their own key."""
        assert flatten_keys({"hello": "Hello", "bye": "Bye"}) == [
            ("hello", "Hello"),
            ("bye", "Bye"),
        ]

    def test_nested_document(self) -> None:
        """Nested mappings join their path with dots."""
        document = {
            "validation": {
                "required": "can't be blank",
                "length": {"min": {"string": "too short"}},
            }
        }

        assert flatten_keys(document) == [
            ("validation.required", "can't be blank"),
            ("validation.length.min.string", "too short"),
        ]

    def test_prefix_is_prepended(self) -> None:
        """An explicit prefix becomes the first path segment."""
        assert flatten_keys({"first": "First"}, "count") == [("count.first", "First")]

    def test_sibling_order_follows_document(self) -> None:
        """Depth-first traversal keeps sibling order."""
        document = {"b": {"y": "1", "x": "2"}, "a": "3"}

        assert [key for key, _ in flatten_keys(document)] == ["b.y", "b.x", "a"]

    def test_empty_nested_mapping_contributes_nothing(self) -> None:
        """A key holding an empty mapping produces no entries."""
        assert flatten_keys({"empty": {}, "kept": "yes"}) == [("kept", "yes")]

    def test_non_string_keys_are_stringified(self) -> None:
        """YAML numbers and booleans as keys become their text form."""
        assert flatten_keys({404: {"title": "Not found"}, True: "on"}) == [
            ("404.title", "Not found"),
            ("True", "on"),
        ]

    def test_leaf_values_are_taken_verbatim(self) -> None:
        """Non-string leaves are not converted."""
        assert flatten_keys({"answer": 42, "items": ["a", "b"]}) == [
            ("answer", 42),
            ("items", ["a", "b"]),
        ]

    def test_dotted_key_collides_with_nesting(self) -> None:
        """A literal dot in a key is not escaped."""
        pairs = flatten_keys({"a.b": "literal", "a": {"b": "nested"}})

        assert pairs == [("a.b", "literal"), ("a.b", "nested")]
