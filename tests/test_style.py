"""
Tests for geometry, color and style descriptors.
"""

import unittest

from svg_scene.models.color import Color, ColorError, NamedColor
from svg_scene.models.geometry import Dimensions, Point, max_point, min_point
from svg_scene.models.layout import Layout
from svg_scene.models.style import Fill, Font, Stroke


class TestGeometry(unittest.TestCase):
    """Tests for points and extents."""

    def test_point_offset(self):
        """Offsetting adds component-wise."""
        self.assertEqual(Point(1, 2).offset(Point(3, 4)), Point(4, 6))

    def test_square_dimensions(self):
        """Square dimensions have equal sides."""
        self.assertEqual(Dimensions.square(5), Dimensions(5, 5))

    def test_min_max_point(self):
        """Extremes are taken per component."""
        points = [Point(1, 5), Point(3, 2), Point(2, 4)]
        self.assertEqual(min_point(points), Point(1, 2))
        self.assertEqual(max_point(points), Point(3, 5))

    def test_min_max_point_empty(self):
        """Empty input has no extreme."""
        self.assertIsNone(min_point([]))
        self.assertIsNone(max_point([]))


class TestColor(unittest.TestCase):
    """Tests for the Color class."""

    def test_named_colors(self):
        """Palette entries render as rgb triples."""
        self.assertEqual(Color.named(NamedColor.RED).render(), "rgb(255,0,0)")
        self.assertEqual(Color.named(NamedColor.BROWN).render(), "rgb(165,42,42)")
        self.assertEqual(Color.named(NamedColor.PURPLE).render(), "rgb(128,0,128)")

    def test_transparent(self):
        """The transparent color renders as none."""
        self.assertEqual(Color.transparent().render(), "none")
        self.assertEqual(Color.named(NamedColor.TRANSPARENT).render(), "none")
        self.assertIsNone(Color.transparent().rgb)

    def test_components_are_not_checked(self):
        """Out-of-range components appear verbatim."""
        self.assertEqual(Color(300, -1, 0).render(), "rgb(300,-1,0)")

    def test_parse(self):
        """Common inputs convert to colors."""
        self.assertEqual(Color.parse("Red"), Color(255, 0, 0))
        self.assertEqual(Color.parse(" none "), Color.transparent())
        self.assertEqual(Color.parse(None), Color.transparent())
        self.assertEqual(Color.parse([1, 2, 3]), Color(1, 2, 3))
        self.assertEqual(Color.parse(NamedColor.CYAN), Color.parse(NamedColor.AQUA))

    def test_parse_errors(self):
        """Unrecognized inputs raise ColorError."""
        for value in ("octarine", (1, 2), (True, 0, 0), 3.5):
            with self.assertRaises(ColorError):
                Color.parse(value)


class TestStyle(unittest.TestCase):
    """Tests for Fill, Stroke and Font."""

    def test_fill(self):
        """Fill renders one attribute."""
        self.assertEqual(Fill("blue").render(), 'fill="rgb(0,0,255)" ')
        self.assertEqual(Fill().render(), 'fill="none" ')

    def test_default_stroke_renders_nothing(self):
        """A negative width means no stroke."""
        self.assertFalse(Stroke().is_visible)
        self.assertEqual(Stroke().render(), "")

    def test_stroke(self):
        """Visible strokes emit width then color."""
        self.assertEqual(Stroke(1, "black").render(), 'stroke-width="1" stroke="rgb(0,0,0)" ')
        self.assertEqual(Stroke(0, "black").render(), 'stroke-width="0" stroke="rgb(0,0,0)" ')

    def test_non_scaling_stroke(self):
        """Non-scaling strokes add a vector-effect."""
        self.assertEqual(
            Stroke(1, "red", non_scaling=True).render(),
            'stroke-width="1" stroke="rgb(255,0,0)" vector-effect="non-scaling-stroke" '
        )

    def test_lengths_follow_layout_scale(self):
        """Stroke widths and font sizes scale with the layout."""
        layout = Layout(Dimensions(100, 100), scale=2)
        self.assertEqual(Stroke(1.5, "red").render(layout), 'stroke-width="3" stroke="rgb(255,0,0)" ')
        self.assertEqual(Font(10, "Arial").render(layout), 'font-size="20" font-family="Arial" ')

    def test_font_defaults(self):
        """Fonts default to the configured size and family."""
        self.assertEqual(Font().render(), 'font-size="12" font-family="Verdana" ')

    def test_equality(self):
        """Descriptors compare by value."""
        self.assertEqual(Stroke(1, "red"), Stroke(1, (255, 0, 0)))
        self.assertNotEqual(Stroke(1, "red"), Stroke(2, "red"))
        self.assertEqual(Fill("lime"), Fill([0, 255, 0]))


if __name__ == "__main__":
    unittest.main()
