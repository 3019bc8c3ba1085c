"""
Simple line chart built from polylines.

Each data polyline is drawn with a small black marker at every vertex, and a
purple reference axis sized to 110% of the joint data extent.
"""

from typing import List, Optional, Tuple

from typing_extensions import Self

from svg_scene.models.color import NamedColor
from svg_scene.models.geometry import Dimensions, Point, max_point, min_point
from svg_scene.models.layout import Layout
from svg_scene.models.shape import Circle, PointLike, Polyline, Shape, ShapeError, ShapeType, as_point
from svg_scene.models.style import Stroke

AXIS_EXTENT = 1.1
MARKER_DIVISOR = 30.0


def _default_axis_stroke() -> Stroke:
    return Stroke(0.5, NamedColor.PURPLE)


class LineChart(Shape):
    """Line chart composed of data polylines plus an axis."""

    __slots__ = ('_margin', '_axis_stroke', '_polylines')

    def __init__(
        self,
        margin: Optional[Dimensions] = None,
        axis_stroke: Optional[Stroke] = None
    ):
        """
        Initialize an empty chart.

        Args:
            margin: Offset applied to the data and the axis corner
            axis_stroke: Stroke used for the axis (0.5 purple by default)
        """
        super().__init__(ShapeType.LINE_CHART, None, axis_stroke or _default_axis_stroke())
        self._margin = Dimensions(*margin) if margin is not None else Dimensions()
        self._polylines: List[Polyline] = []

    @property
    def margin(self) -> Dimensions:
        return self._margin

    @property
    def axis_stroke(self) -> Stroke:
        return self._stroke

    @property
    def polylines(self) -> Tuple[Polyline, ...]:
        return tuple(self._polylines)

    def append(self, polyline: Polyline) -> Self:
        """
        Store a copy of a data series; series without points are ignored.

        Returns:
            Self for method chaining
        """
        if not isinstance(polyline, Polyline):
            raise ShapeError(f"Charts take polylines, got {type(polyline).__name__}")
        if len(polyline):
            self._polylines.append(polyline.clone())
        return self

    def __lshift__(self, polyline: Polyline) -> Self:
        return self.append(polyline)

    def dimensions(self) -> Optional[Dimensions]:
        """
        Joint extent of every data point.

        Returns:
            Width/height of the data bounding box, or None for an empty chart
        """
        points = [p for polyline in self._polylines for p in polyline.points]
        low = min_point(points)
        high = max_point(points)
        if low is None or high is None:
            return None
        return Dimensions(high.x - low.x, high.y - low.y)

    def _axis(self, extent: Dimensions) -> Polyline:
        width = extent.width * AXIS_EXTENT
        height = extent.height * AXIS_EXTENT
        left, bottom = self._margin.width, self._margin.height
        return Polyline(stroke=self._stroke, points=[
            Point(left, bottom + height),
            Point(left, bottom),
            Point(left + width, bottom),
        ])

    def _series_markup(self, polyline: Polyline, extent: Dimensions, layout: Layout) -> str:
        shifted = polyline.clone()
        shifted.translate(Point(self._margin.width, self._margin.height))

        marker_diameter = extent.height / MARKER_DIVISOR
        markers = [Circle(point, marker_diameter, NamedColor.BLACK) for point in shifted.points]
        return shifted.render(layout) + "".join(marker.render(layout) for marker in markers)

    def render(self, layout: Layout) -> str:
        extent = self.dimensions()
        if extent is None:
            return ""

        series = "".join(self._series_markup(polyline, extent, layout) for polyline in self._polylines)
        return series + self._axis(extent).render(layout)

    def translate(self, delta: PointLike) -> None:
        delta = as_point(delta)
        for polyline in self._polylines:
            polyline.translate(delta)

    def clone(self) -> 'LineChart':
        chart = LineChart(self._margin, self._stroke)
        chart._polylines = [polyline.clone() for polyline in self._polylines]
        return chart
