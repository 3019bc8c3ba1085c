"""
Tests for the markup helpers.
"""

import unittest

from svg_scene.core import CONFIG, configure
from svg_scene.utils.markup import (
    attribute, attributes, build_element, format_number, indent, serialize_element
)


class TestFormatNumber(unittest.TestCase):
    """Tests for number formatting."""

    def test_integral_floats_drop_decimals(self):
        """Whole numbers are written without a fractional part."""
        self.assertEqual(format_number(30.0), "30")
        self.assertEqual(format_number(0), "0")

    def test_six_significant_digits(self):
        """Numbers keep six significant digits by default."""
        self.assertEqual(format_number(1 / 3), "0.333333")
        self.assertEqual(format_number(1234567), "1.23457e+06")
        self.assertEqual(format_number(11.000000000000002), "11")

    def test_negative_zero(self):
        """Negative zero is written as plain zero."""
        self.assertEqual(format_number(-0.0), "0")
        self.assertEqual(format_number(-1e-9 * 1e-9), "-1e-18")

    def test_precision_is_configurable(self):
        """The significant-digit count comes from the configuration."""
        previous = CONFIG["number_precision"]
        try:
            configure({"number_precision": 3})
            self.assertEqual(format_number(1 / 3), "0.333")
        finally:
            configure({"number_precision": previous})


class TestAttributes(unittest.TestCase):
    """Tests for attribute fragments."""

    def test_attribute_with_unit(self):
        """Units are appended after the formatted value."""
        self.assertEqual(attribute("width", 100, "px"), 'width="100px" ')

    def test_attribute_escaping(self):
        """Quotes and markup characters are escaped."""
        self.assertEqual(attribute("x", 'a"b<c&'), 'x="a&quot;b&lt;c&amp;" ')

    def test_attributes_keep_order(self):
        """Attributes are emitted in insertion order."""
        self.assertEqual(attributes({"b": 1, "a": "two"}), 'b="1" a="two" ')

    def test_build_and_serialize_element(self):
        """Leaf elements serialize as self-closing tags ending in a newline."""
        element = build_element("circle", {"cx": 1.5, "cy": 2, "r": 0.5})
        self.assertEqual(serialize_element(element), '<circle cx="1.5" cy="2" r="0.5" />\n')


class TestIndent(unittest.TestCase):
    """Tests for indentation."""

    def test_indents_every_line(self):
        """Each newline-terminated line gets one tab."""
        self.assertEqual(indent("a\nb\n"), "\ta\n\tb\n")

    def test_empty_text(self):
        """Empty text stays empty."""
        self.assertEqual(indent(""), "")

    def test_unterminated_last_line(self):
        """A final line without a newline is still indented."""
        self.assertEqual(indent("a\nb"), "\ta\n\tb")

    def test_nested_indentation(self):
        """Indenting already-indented text adds one more level."""
        self.assertEqual(indent(indent("<g>\n</g>\n")), "\t\t<g>\n\t\t</g>\n")


if __name__ == "__main__":
    unittest.main()
