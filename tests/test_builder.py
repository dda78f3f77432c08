"""Tests for the styled text builder."""

import unittest

from pydantic import ValidationError

from styledtext import (
    AttributeKey,
    BackgroundColor,
    Builder,
    BuilderFinalizedError,
    Link,
    StyledText,
    TextColor,
)
from styledtext.values import BLUE, RED, YELLOW


class BuilderTest(unittest.TestCase):
    """Tests for Builder append and build operations."""

    def test_append_order_is_preserved(self):
        styled = Builder().text("Hello").space().text("World").build()

        self.assertEqual(styled.string, "Hello World")
        self.assertEqual([r.text for r in styled.runs], ["Hello", " ", "World"])
        self.assertEqual(dict(styled.runs[1].attributes), {})

    def test_methods_return_the_builder(self):
        builder = Builder()
        self.assertIs(builder.text("a"), builder)
        self.assertIs(builder.space(), builder)
        self.assertIs(builder.spaces(2), builder)

    def test_text_color_sets_only_foreground(self):
        styled = Builder().text("x", [TextColor(RED)]).build()

        self.assertEqual(
            dict(styled.attributes_at(0)), {AttributeKey.FOREGROUND_COLOR: RED}
        )

    def test_duplicate_keys_last_write_wins(self):
        styled = Builder().text("x", [TextColor(RED), TextColor(BLUE)]).build()

        self.assertIs(styled.attributes_at(0)[AttributeKey.FOREGROUND_COLOR], BLUE)

    def test_default_attributes_equal_explicit_empty(self):
        implicit = Builder().text("plain").build()
        explicit = Builder().text("plain", []).build()

        self.assertEqual(implicit, explicit)
        self.assertEqual(len(implicit.runs[0].attributes), 0)

    def test_empty_text_appends_zero_length_run(self):
        styled = Builder().text("").text("a").build()

        self.assertEqual(len(styled.runs), 2)
        self.assertEqual(styled.string, "a")

    def test_space_carries_attributes(self):
        styled = Builder().space([Link("https://example.com")]).build()

        self.assertEqual(styled.string, " ")
        self.assertEqual(
            styled.attributes_at(0)[AttributeKey.LINK], "https://example.com"
        )

    def test_spaces_zero_is_noop(self):
        styled = Builder().text("A").spaces(0).text("B").build()

        self.assertEqual(styled.string, "AB")
        self.assertEqual(len(styled.runs), 2)

    def test_spaces_appends_independent_runs(self):
        styled = Builder().spaces(3, [BackgroundColor(YELLOW)]).build()

        self.assertEqual(len(styled.runs), 3)
        for run in styled.runs:
            self.assertEqual(run.text, " ")
            self.assertEqual(
                dict(run.attributes), {AttributeKey.BACKGROUND_COLOR: YELLOW}
            )

    def test_spaces_accepts_attribute_iterator(self):
        styled = Builder().spaces(2, iter([TextColor(RED)])).build()

        for run in styled.runs:
            self.assertIs(run.get(AttributeKey.FOREGROUND_COLOR), RED)

    def test_spaces_rejects_negative_count(self):
        builder = Builder().text("A")

        with self.assertRaises(ValidationError):
            builder.spaces(-1)
        self.assertEqual(len(builder), 1)

    def test_spaces_rejects_non_integer_count(self):
        with self.assertRaises(ValidationError):
            Builder().spaces(2.5)
        with self.assertRaises(ValidationError):
            Builder().spaces(True)

    def test_build_is_idempotent(self):
        builder = Builder().text("Hello", [TextColor(RED)]).space()

        first = builder.build()
        second = builder.build()

        self.assertEqual(first, second)
        self.assertEqual(first.string, second.string)

    def test_build_returns_snapshot(self):
        builder = Builder().text("Hello")
        snapshot = builder.build()

        builder.text(" again")

        self.assertEqual(snapshot.string, "Hello")
        self.assertEqual(builder.build().string, "Hello again")

    def test_finalized_builder_rejects_appends(self):
        builder = Builder().text("done")
        styled = builder.build(finalize=True)

        self.assertTrue(builder.finalized)
        with self.assertRaises(BuilderFinalizedError):
            builder.text("more")
        with self.assertRaises(BuilderFinalizedError):
            builder.space()
        with self.assertRaises(BuilderFinalizedError):
            builder.spaces(0)
        self.assertEqual(builder.build(), styled)

    def test_builder_starts_empty(self):
        builder = Builder()

        self.assertEqual(len(builder), 0)
        self.assertFalse(builder.finalized)
        self.assertEqual(builder.build(), StyledText())

    def test_non_attribute_is_rejected(self):
        with self.assertRaises(TypeError):
            Builder().text("x", ["red"])


if __name__ == "__main__":
    unittest.main()
