"""
Unit tests for javadoc.py

Tests Javadoc detection, delimiter cleaning, description and block tag parsing.
"""

import unittest

from docgen.javadoc import (
    clean_lines,
    comment_content,
    is_javadoc_comment,
    parse_javadoc,
    parse_javadoc_content,
)


class TestJavadocDetection(unittest.TestCase):
    """Test Javadoc comment detection."""

    def test_double_star(self):
        self.assertTrue(is_javadoc_comment("/** Docs */"))

    def test_regular_block(self):
        self.assertFalse(is_javadoc_comment("/* Regular block comment */"))

    def test_line_comment(self):
        self.assertFalse(is_javadoc_comment("// not docs"))

    def test_empty_block(self):
        self.assertFalse(is_javadoc_comment("/**/"))

    def test_parse_non_javadoc_returns_none(self):
        self.assertIsNone(parse_javadoc("/* plain */"))


class TestCleaning(unittest.TestCase):

    def test_comment_content_strips_delimiters(self):
        self.assertEqual(comment_content("/** text */"), " text ")

    def test_clean_lines_removes_asterisks_and_blank_edges(self):
        content = "\n   * First line\n   *   indented\n   *\n   * Last\n   "
        self.assertEqual(clean_lines(content), "First line\n  indented\n\nLast")


class TestParsing(unittest.TestCase):
    """Test description and tag splitting."""

    def test_single_line_description(self):
        doc = parse_javadoc("/** Inline API doc */")
        self.assertEqual(doc.description, "Inline API doc")
        self.assertEqual(doc.block_tags, [])

    def test_description_and_type_tag(self):
        doc = parse_javadoc("/** does a jump \n @type number */")
        self.assertEqual(doc.description, "does a jump")
        self.assertEqual(doc.first_tag("type"), "number")

    def test_multiline_javadoc(self):
        doc = parse_javadoc(
            "/**\n"
            " * Moves the object.\n"
            " * Uses {@link Vec2} coordinates.\n"
            " *\n"
            " * @param dx horizontal\n"
            " *        distance\n"
            " * @param dy vertical distance\n"
            " * @return nothing\n"
            " */"
        )
        self.assertEqual(doc.description, "Moves the object.\nUses {@link Vec2} coordinates.")
        self.assertEqual([t.name for t in doc.block_tags], ["param", "param", "return"])
        self.assertEqual(doc.block_tags[0].content, "dx horizontal\n       distance")
        self.assertEqual(doc.first_tag("param"), doc.block_tags[0].content)

    def test_only_first_type_tag_is_honored(self):
        doc = parse_javadoc("/**\n * @type Vec2\n * @param x ignored\n * @type number\n */")
        self.assertEqual(doc.first_tag("type"), "Vec2")

    def test_missing_tag_is_none(self):
        doc = parse_javadoc("/** Text only */")
        self.assertIsNone(doc.first_tag("type"))

    def test_tags_without_description(self):
        doc = parse_javadoc_content("\n * @type Vec2\n ")
        self.assertEqual(doc.description, "")
        self.assertIsNone(doc.description_or_none())
        self.assertEqual(doc.first_tag("type"), "Vec2")

    def test_inline_at_sign_is_not_a_tag(self):
        doc = parse_javadoc("/** Mail admin@example.com for help. */")
        self.assertEqual(doc.description, "Mail admin@example.com for help.")
        self.assertEqual(doc.block_tags, [])


if __name__ == "__main__":
    unittest.main()
