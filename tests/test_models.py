"""Tests for styled text document models."""

import os
import tempfile
import unittest
from unittest import mock

from pydantic import ValidationError

from styledtext import AttributeKey, Builder, DocumentError, Underline
from styledtext.models import (
    AttributesModel,
    ColorModel,
    DocumentModel,
    SegmentModel,
    load_document,
)
from styledtext.models.document import _extra_mode
from styledtext.values import Color, FontRef

FIXTURE = os.path.join(os.path.dirname(__file__), "fixtures", "document.json")


class DocumentModelTest(unittest.TestCase):
    def test_load_fixture(self):
        doc = load_document(FIXTURE)
        styled = doc.build()

        self.assertEqual(doc.title, "Release notes")
        self.assertEqual(styled.string, "Hello World  plain tail!")
        self.assertEqual(len(styled.runs), 7)

        hello = styled.attributes_at(0)
        self.assertEqual(
            hello[AttributeKey.FONT], FontRef("Helvetica Neue", 18.0, bold=True)
        )
        self.assertEqual(hello[AttributeKey.FOREGROUND_COLOR], Color.from_hex("#CC0000"))

        world = styled.attributes_at(6)
        self.assertEqual(world[AttributeKey.LINK], "https://example.com")
        self.assertEqual(
            world[AttributeKey.UNDERLINE_STYLE],
            Underline.SINGLE | Underline.PATTERN_DOT,
        )
        self.assertEqual(world[AttributeKey.UNDERLINE_COLOR], Color(0.0, 0.0, 1.0))

        self.assertEqual(styled.runs[3].text, " ")
        self.assertEqual(styled.runs[4].text, " ")
        self.assertEqual(len(styled.runs[5].attributes), 0)
        self.assertEqual(styled.attributes_at(-1)[AttributeKey.STROKE_WIDTH], -3.0)

    def test_build_finalizes(self):
        doc = DocumentModel(segments=[SegmentModel(text="x")])
        builder = doc.apply(Builder())
        self.assertFalse(builder.finalized)
        self.assertEqual(doc.build().string, "x")

    def test_attributes_follow_vocabulary_order(self):
        model = AttributesModel.model_validate(
            {"underline": "double", "link": "https://a", "text_color": "#000000"}
        )
        kinds = [type(a).__name__ for a in model.to_attributes()]
        self.assertEqual(kinds, ["TextColor", "Link", "UnderlineStyle"])

    def test_unknown_underline_style(self):
        with self.assertRaises(ValidationError):
            AttributesModel.model_validate({"underline": ["wavy"]})

    def test_invalid_color(self):
        with self.assertRaises(ValidationError):
            ColorModel.model_validate("#12")
        with self.assertRaises(ValidationError):
            ColorModel.model_validate({"red": 2.0})

    def test_negative_space_count(self):
        with self.assertRaises(ValidationError):
            SegmentModel.model_validate({"kind": "spaces", "count": -1})

    def test_unknown_keys_rejected(self):
        with self.assertRaises(ValidationError):
            SegmentModel.model_validate({"text": "x", "colour": "red"})

    def test_load_errors(self):
        with self.assertRaises(DocumentError):
            load_document(os.path.join(os.path.dirname(__file__), "missing.json"))

        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "bad.json")
            with open(path, "w") as f:
                f.write("{not json")
            with self.assertRaises(DocumentError) as ctx:
                load_document(path)
            self.assertIn("invalid document", str(ctx.exception))


class ExtraModeTest(unittest.TestCase):
    def test_extra_mode_from_env(self):
        cases = {
            "allow": "allow",
            "IGNORE": "ignore",
            " forbid ": "forbid",
            "bogus": "forbid",
        }
        for raw, expected in cases.items():
            with self.subTest(raw=raw):
                with mock.patch.dict(os.environ, {"STYLEDTEXT_EXTRA": raw}):
                    self.assertEqual(_extra_mode(), expected)


if __name__ == "__main__":
    unittest.main()
