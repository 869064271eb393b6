"""
Unit tests for annotation tag extraction and coercion.
"""

import math
import unittest

from ts_types_to_schema.pipeline.docs.annotations import coerce_tag, decode_annotations, extract_tags, to_number

JSDOC = "*\n     * @title A - COMMENTs\n     * @ignore\n     * @titleBy {{ soadkoaskdo as | }}\n     "


class TestExtractTags(unittest.TestCase):
    def test_tags_with_and_without_values(self):
        self.assertEqual(
            extract_tags(JSDOC),
            {"title": "A - COMMENTs", "ignore": True, "titleBy": "{{ soadkoaskdo as | }}"},
        )

    def test_value_is_trimmed(self):
        self.assertEqual(extract_tags("*\n * @title AA\n "), {"title": "AA"})

    def test_tag_at_end_of_text(self):
        self.assertEqual(extract_tags("@deprecated"), {"deprecated": True})

    def test_hyphenated_tag_names(self):
        self.assertEqual(extract_tags("* @x-order 3 "), {"x-order": "3"})

    def test_at_sign_inside_words_is_not_a_tag(self):
        self.assertEqual(extract_tags("contact me@example.com"), {})

    def test_repeated_tag_last_wins(self):
        self.assertEqual(extract_tags("@title one\n@title two"), {"title": "two"})

    def test_no_tags(self):
        self.assertEqual(extract_tags("* just prose "), {})


class TestCoerceTag(unittest.TestCase):
    def test_numeric_tags(self):
        for tag in ["maximum", "exclusiveMaximum", "minimum", "exclusiveMinimum", "maxLength", "minLength", "multipleOf", "maxItems", "minItems", "maxProperties", "minProperties"]:
            with self.subTest(tag=tag):
                self.assertEqual(coerce_tag(tag, "3"), 3)

    def test_numeric_tag_with_garbage_is_nan(self):
        value = coerce_tag("minimum", "abc")
        self.assertTrue(math.isnan(value))

    def test_numeric_tag_without_value_is_nan(self):
        self.assertTrue(math.isnan(coerce_tag("maxLength", True)))

    def test_always_true_tags(self):
        for tag in ["readOnly", "writeOnly", "ignore"]:
            with self.subTest(tag=tag):
                self.assertIs(coerce_tag(tag, True), True)
                self.assertIs(coerce_tag(tag, "false"), True)

    def test_truthy_tags(self):
        self.assertIs(coerce_tag("deprecated", True), True)
        self.assertIs(coerce_tag("deprecated", "use v2"), True)
        # Any non-empty string is truthy
        self.assertIs(coerce_tag("uniqueItems", "false"), True)
        self.assertIs(coerce_tag("uniqueItems", ""), False)

    def test_examples(self):
        self.assertEqual(coerce_tag("examples", " a \n b"), ["a", "b"])
        self.assertEqual(coerce_tag("examples", "foo"), ["foo"])
        self.assertEqual(coerce_tag("examples", True), [])

    def test_default(self):
        self.assertIs(coerce_tag("default", "true"), True)
        self.assertIs(coerce_tag("default", "false"), False)
        self.assertIs(coerce_tag("default", True), True)
        self.assertEqual(coerce_tag("default", "42"), 42)
        self.assertEqual(coerce_tag("default", "1.5"), 1.5)
        self.assertEqual(coerce_tag("default", "hello"), "hello")

    def test_unknown_tags_pass_through(self):
        self.assertEqual(coerce_tag("title", "AA"), "AA")
        self.assertIs(coerce_tag("oaksdoakds", True), True)


class TestToNumber(unittest.TestCase):
    def test_javascript_number_semantics(self):
        self.assertEqual(to_number(" 12 "), 12)
        self.assertEqual(to_number("-3"), -3)
        self.assertEqual(to_number("2.5"), 2.5)
        self.assertEqual(to_number(".5"), 0.5)
        self.assertEqual(to_number("1e3"), 1000)
        self.assertEqual(to_number("0x1F"), 31)
        self.assertEqual(to_number("0b101"), 5)
        self.assertEqual(to_number(""), 0)
        self.assertEqual(to_number("-Infinity"), -math.inf)

    def test_rejected_forms_are_nan(self):
        for text in ["abc", "1_000", "inf", "nan", "3px", "-0x10", "\u0663", "1\u0660"]:
            with self.subTest(text=text):
                self.assertTrue(math.isnan(to_number(text)))

    def test_integral_values_are_ints(self):
        self.assertIsInstance(to_number("3"), int)
        self.assertIsInstance(to_number("3.0"), int)
        self.assertIsInstance(to_number("3.25"), float)


class TestDecodeAnnotations(unittest.TestCase):
    def test_decode(self):
        self.assertEqual(
            decode_annotations("*\n * @minimum 3\n * @readOnly\n * @title Size\n "),
            {"minimum": 3, "readOnly": True, "title": "Size"},
        )

    def test_idempotent(self):
        self.assertEqual(decode_annotations(JSDOC), decode_annotations(JSDOC))

    def test_total_on_unknown_and_malformed_input(self):
        decoded = decode_annotations("@whatever @@\n@minimum abc\n@maxItems")
        self.assertEqual(decoded["whatever"], "@@")
        self.assertTrue(math.isnan(decoded["minimum"]))
        self.assertTrue(math.isnan(decoded["maxItems"]))


if __name__ == "__main__":
    unittest.main()
