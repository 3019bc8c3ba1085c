"""
Tests for the leaf shapes.
"""

import unittest

from svg_scene.models.chart import LineChart
from svg_scene.models.color import NamedColor
from svg_scene.models.geometry import Dimensions, Point
from svg_scene.models.layout import Layout, Origin
from svg_scene.models.shape import (
    Circle, Ellipse, Line, Path, Polygon, Polyline, Rectangle, ShapeError, ShapeType, Text
)
from svg_scene.models.style import Font, Stroke


class TestShapeMarkup(unittest.TestCase):
    """Tests for the markup each shape produces."""

    def setUp(self):
        """Set up a 100x100 bottom-left canvas."""
        self.layout = Layout(Dimensions(100, 100), Origin.BOTTOM_LEFT)

    def test_circle(self):
        """Circles take a diameter and emit a radius."""
        circle = Circle(Point(80, 80), 20, "red")
        self.assertEqual(circle.type, ShapeType.CIRCLE)
        self.assertEqual(
            circle.render(self.layout),
            '<circle cx="80" cy="20" r="10" fill="rgb(255,0,0)" />\n'
        )

    def test_ellipse(self):
        """Ellipses emit half their width and height as radii."""
        ellipse = Ellipse(Point(50, 50), 20, 10, "yellow")
        self.assertEqual(
            ellipse.render(self.layout),
            '<ellipse cx="50" cy="50" rx="10" ry="5" fill="rgb(255,255,0)" />\n'
        )

    def test_rectangle(self):
        """Rectangles emit their anchor corner and size."""
        rect = Rectangle(Point(10, 20), 30, 40, NamedColor.BLUE, Stroke(1, "black"))
        self.assertEqual(
            rect.render(self.layout),
            '<rect x="10" y="80" width="30" height="40" fill="rgb(0,0,255)" '
            'stroke-width="1" stroke="rgb(0,0,0)" />\n'
        )

    def test_line_has_no_fill(self):
        """Lines emit only their stroke."""
        line = Line(Point(0, 0), Point(10, 10), Stroke(2, "green"))
        self.assertEqual(
            line.render(self.layout),
            '<line x1="0" y1="100" x2="10" y2="90" stroke-width="2" stroke="rgb(0,128,0)" />\n'
        )

    def test_polygon(self):
        """Polygon points are space separated x,y pairs."""
        polygon = Polygon("lime") << Point(0, 0) << (10, 0) << (10, 10)
        self.assertEqual(len(polygon), 3)
        self.assertEqual(
            polygon.render(self.layout),
            '<polygon points="0,100 10,100 10,90" fill="rgb(0,255,0)" />\n'
        )

    def test_polyline(self):
        """Polylines default to no fill."""
        polyline = Polyline(stroke=Stroke(1, "red"), points=[(0, 0), (5, 5)])
        self.assertEqual(
            polyline.render(self.layout),
            '<polyline points="0,100 5,95" fill="none" stroke-width="1" stroke="rgb(255,0,0)" />\n'
        )

    def test_text_is_escaped(self):
        """Text content is escaped and followed by font attributes."""
        text = Text(Point(10, 10), "a < b & c", "black")
        self.assertEqual(
            text.render(self.layout),
            '<text x="10" y="90" fill="rgb(0,0,0)" font-size="12" '
            'font-family="Verdana">a &lt; b &amp; c</text>\n'
        )

    def test_text_font_scales(self):
        """Font sizes follow the layout scale."""
        layout = Layout(Dimensions(100, 100), Origin.TOP_LEFT, 2)
        text = Text(Point(1, 1), "hi", font=Font(8, "Arial"))
        self.assertIn('font-size="16" font-family="Arial"', text.render(layout))

    def test_invalid_input(self):
        """Bad points, fills and strokes raise ShapeError."""
        with self.assertRaises(ShapeError):
            Circle("nowhere", 10)
        with self.assertRaises(ShapeError):
            Circle(Point(0, 0), 10, "octarine")
        with self.assertRaises(ShapeError):
            Circle(Point(0, 0), 10, stroke="red")


class TestPath(unittest.TestCase):
    """Tests for multi-segment paths."""

    def setUp(self):
        """Set up a 100x100 bottom-left canvas."""
        self.layout = Layout(Dimensions(100, 100), Origin.BOTTOM_LEFT)

    def test_sub_paths(self):
        """Each non-empty sub-path becomes one closed segment."""
        path = Path("brown")
        path << (0, 0) << (10, 0) << (10, 10)
        path.start_new_sub_path()
        path << (2, 2) << (4, 2) << (4, 4)

        self.assertEqual(len(path.sub_paths), 2)
        self.assertEqual(
            path.render(self.layout),
            '<path d="M0,100 10,100 10,90 z M2,98 4,98 4,96 z" fill-rule="evenodd" '
            'fill="rgb(165,42,42)" />\n'
        )

    def test_new_sub_path_needs_points(self):
        """Starting a sub-path while the current one is empty does nothing."""
        path = Path()
        path.start_new_sub_path().start_new_sub_path()
        self.assertEqual(len(path.sub_paths), 1)

        path << (1, 1)
        path.start_new_sub_path().start_new_sub_path()
        self.assertEqual(len(path.sub_paths), 2)

    def test_empty_sub_paths_are_skipped(self):
        """Only sub-paths with points contribute to the path data."""
        path = Path(sub_paths=[[(0, 0), (1, 0)]])
        path.start_new_sub_path()
        self.assertEqual(path.path_data(self.layout), "M0,100 1,100 z")
        self.assertEqual(Path().path_data(self.layout), "")


class TestCloneAndTranslate(unittest.TestCase):
    """Tests for copying and moving shapes."""

    def test_clone_is_independent(self):
        """Changing the source shape does not reach its copy."""
        polygon = Polygon() << (1, 1)
        copy = polygon.clone()
        polygon << (2, 2)
        polygon.translate((5, 5))
        self.assertEqual(copy.points, (Point(1, 1),))

        path = Path() << (0, 0)
        path_copy = path.clone()
        path << (1, 1)
        self.assertEqual(path_copy.sub_paths, ((Point(0, 0),),))

    def test_clone_keeps_style(self):
        """Copies keep type and style."""
        circle = Circle(Point(1, 2), 6, "red", Stroke(1, "blue"))
        copy = circle.clone()
        self.assertIsInstance(copy, Circle)
        self.assertEqual(copy.radius, 3)
        self.assertEqual(copy.fill, circle.fill)
        self.assertEqual(copy.stroke, circle.stroke)

    def test_translate_is_additive(self):
        """Two translations add up."""
        circle = Circle(Point(0, 0), 2)
        circle.translate((1, 2))
        circle.translate(Point(3, 4))
        self.assertEqual(circle.center, Point(4, 6))

        line = Line((0, 0), (1, 1))
        line.translate((1, 1))
        self.assertEqual((line.start_point, line.end_point), (Point(1, 1), Point(2, 2)))

        text = Text((0, 0), "x")
        text.translate((2, 3))
        self.assertEqual(text.origin, Point(2, 3))

    def test_translate_path(self):
        """Every sub-path point moves."""
        path = Path(sub_paths=[[(0, 0)], [(1, 1)]])
        path.translate((1, 0))
        self.assertEqual(path.sub_paths, ((Point(1, 0),), (Point(2, 1),)))



def _shape_builders():
    """Builders that place each kind of shape at a given (dx, dy) offset."""
    stroke = Stroke(1.5, "blue", non_scaling=True)

    def shifted(dx, dy, *points):
        return [(x + dx, y + dy) for x, y in points]

    return {
        "circle": lambda dx, dy: Circle((10 + dx, 20 + dy), 8, "red", stroke),
        "ellipse": lambda dx, dy: Ellipse((30 + dx, 40 + dy), 12, 6, "yellow", stroke),
        "rectangle": lambda dx, dy: Rectangle((5 + dx, 6 + dy), 20, 10, NamedColor.SILVER, stroke),
        "line": lambda dx, dy: Line((1 + dx, 2 + dy), (7 + dx, 9 + dy), stroke),
        "polygon": lambda dx, dy: Polygon("lime", stroke, shifted(dx, dy, (0, 0), (10, 0), (10, 10))),
        "polyline": lambda dx, dy: Polyline(None, stroke, shifted(dx, dy, (0, 0), (4, 8), (9, 2))),
        "path": lambda dx, dy: Path("brown", stroke, [
            shifted(dx, dy, (0, 0), (20, 0), (20, 20)),
            shifted(dx, dy, (5, 5), (10, 5), (10, 10)),
        ]),
        "text": lambda dx, dy: Text((12 + dx, 14 + dy), "label", "black", Font(9, "Arial"), stroke),
        "line chart": lambda dx, dy: LineChart(Dimensions(2, 3)) << Polyline(
            points=shifted(dx, dy, (0, 0), (10, 5), (20, 15))),
    }


class TestCloneThenTranslate(unittest.TestCase):
    """Clone independence and translation checked on rendered markup."""

    def setUp(self):
        """Set up a 100x100 top-left canvas."""
        self.layout = Layout(Dimensions(100, 100), Origin.TOP_LEFT)

    def test_every_shape(self):
        """Clones keep their markup and the original moves by exactly (dx, dy)."""
        dx, dy = 3, 4
        for name, build in _shape_builders().items():
            with self.subTest(shape=name):
                shape = build(0, 0)
                before = shape.render(self.layout)
                copy = shape.clone()

                shape.translate((dx, dy))

                self.assertEqual(copy.render(self.layout), before)
                self.assertEqual(shape.render(self.layout), build(dx, dy).render(self.layout))
                self.assertNotEqual(shape.render(self.layout), before)

    def test_translations_add_up(self):
        """Two translations render like one combined translation."""
        for name, build in _shape_builders().items():
            with self.subTest(shape=name):
                shape = build(0, 0)
                shape.translate((1, 2))
                shape.translate((2, 2))
                self.assertEqual(shape.render(self.layout), build(3, 4).render(self.layout))


if __name__ == "__main__":
    unittest.main()
