"""
Tests for groups and line charts.
"""

import unittest

from svg_scene.models.chart import LineChart
from svg_scene.models.container import Container
from svg_scene.models.geometry import Dimensions, Point
from svg_scene.models.layout import Layout, Origin
from svg_scene.models.shape import Circle, Polyline, ShapeError
from svg_scene.models.style import Stroke
from svg_scene.models.transform import Transform

CIRCLE_MARKUP = '<circle cx="80" cy="20" r="10" fill="rgb(255,0,0)" />\n'


class TestContainer(unittest.TestCase):
    """Tests for the Container class."""

    def setUp(self):
        """Set up a 100x100 bottom-left canvas and a circle."""
        self.layout = Layout(Dimensions(100, 100), Origin.BOTTOM_LEFT)
        self.circle = Circle(Point(80, 80), 20, "red")

    def test_empty_container_renders_nothing(self):
        """An empty group produces no markup."""
        self.assertEqual(Container().render(self.layout), "")

    def test_group_markup(self):
        """Children are indented inside the group."""
        container = Container() << self.circle
        self.assertEqual(
            container.render(self.layout),
            '<g fill="none" >\n\t' + CIRCLE_MARKUP + '</g>\n'
        )

    def test_nested_groups(self):
        """Nested groups indent one level per depth."""
        inner = Container(stroke=Stroke(1, "black")) << self.circle
        outer = Container() << inner
        self.assertEqual(
            outer.render(self.layout),
            '<g fill="none" >\n'
            '\t<g fill="none" stroke-width="1" stroke="rgb(0,0,0)" >\n'
            '\t\t' + CIRCLE_MARKUP +
            '\t</g>\n'
            '</g>\n'
        )

    def test_append_stores_copy(self):
        """Later changes to the appended shape are not seen."""
        container = Container() << self.circle
        self.circle.translate((5, 5))
        self.assertEqual(container.children[0].center, Point(80, 80))
        self.assertIsNot(container.children[0], self.circle)

    def test_append_rejects_non_shapes(self):
        """Only shapes can be appended."""
        with self.assertRaises(ShapeError):
            Container().append("circle")

    def test_translate_is_noop(self):
        """Translating a group leaves its children in place."""
        container = Container() << self.circle
        before = container.render(self.layout)
        container.translate((10, 10))
        self.assertEqual(container.render(self.layout), before)

    def test_clone_is_deep(self):
        """Cloning a group copies its children."""
        container = Container() << self.circle
        copy = container.clone()
        container << self.circle
        self.assertEqual(len(copy), 1)
        self.assertEqual(len(container), 2)

    def test_group_transform(self):
        """Explicit transforms compose and render as a matrix."""
        container = Container(transform="translate(3,1.1)") << self.circle
        container.transform(Transform.scale(1.2))
        self.assertTrue(container.render(self.layout).startswith(
            '<g fill="none" transform="matrix(1.2,0,0,1.2,3,1.1)" >\n'
        ))

    def test_invalid_transform(self):
        """Non-transform values are rejected."""
        with self.assertRaises(ShapeError):
            Container(transform=42)


class TestLineChart(unittest.TestCase):
    """Tests for the LineChart class."""

    def setUp(self):
        """Set up a 100x100 top-left canvas."""
        self.layout = Layout(Dimensions(100, 100), Origin.TOP_LEFT)

    def test_empty_chart(self):
        """A chart without data renders nothing and has no extent."""
        chart = LineChart()
        chart << Polyline()
        self.assertEqual(len(chart.polylines), 0)
        self.assertIsNone(chart.dimensions())
        self.assertEqual(chart.render(self.layout), "")

    def test_chart_markup(self):
        """Series come first with vertex markers, then the axis."""
        chart = LineChart() << Polyline(points=[(0, 0), (10, 10)])
        self.assertEqual(chart.dimensions(), Dimensions(10, 10))
        self.assertEqual(
            chart.render(self.layout),
            '<polyline points="0,0 10,10" fill="none" />\n'
            '<circle cx="0" cy="0" r="0.166667" fill="rgb(0,0,0)" />\n'
            '<circle cx="10" cy="10" r="0.166667" fill="rgb(0,0,0)" />\n'
            '<polyline points="0,11 0,0 11,0" fill="none" stroke-width="0.5" '
            'stroke="rgb(128,0,128)" />\n'
        )

    def test_margin_shifts_series_and_axis(self):
        """The margin offsets the data and the axis corner."""
        chart = LineChart(Dimensions(5, 5)) << Polyline(points=[(0, 0), (10, 10)])
        markup = chart.render(self.layout)
        self.assertIn('<polyline points="5,5 15,15" fill="none" />', markup)
        self.assertIn('points="5,16 5,5 16,5"', markup)

    def test_append_stores_copy(self):
        """Charts keep their own copy of each series."""
        series = Polyline(points=[(0, 0), (1, 1)])
        chart = LineChart() << series
        series << (5, 5)
        self.assertEqual(len(chart.polylines[0]), 2)

    def test_append_rejects_other_shapes(self):
        """Only polylines can be charted."""
        with self.assertRaises(ShapeError):
            LineChart().append(Circle(Point(0, 0), 1))


if __name__ == "__main__":
    unittest.main()
