"""
Shape models for SVG generation.

Every shape supports the same three operations:

* ``render(layout)`` - markup text for the shape, with each coordinate passed
  through the layout transform exactly once;
* ``clone()`` - an independent deep copy;
* ``translate(delta)`` - an in-place shift of every stored coordinate.

Shapes keep caller-space coordinates; nothing is converted until render time.
"""

import xml.etree.ElementTree as ET
from enum import Enum, auto
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from typing_extensions import Self

from svg_scene.models.color import ColorError, ColorValue
from svg_scene.models.geometry import Point
from svg_scene.models.layout import Layout
from svg_scene.models.style import Fill, Font, Stroke
from svg_scene.utils.markup import build_element, format_number, serialize_element

PointLike = Union[Point, Tuple[float, float]]
FillValue = Union[Fill, ColorValue]


class ShapeType(Enum):
    """Enum for the closed set of shape kinds."""
    RECTANGLE = auto()
    CIRCLE = auto()
    ELLIPSE = auto()
    LINE = auto()
    POLYGON = auto()
    POLYLINE = auto()
    PATH = auto()
    TEXT = auto()
    CONTAINER = auto()
    LINE_CHART = auto()


class ShapeError(Exception):
    """Custom exception for shape-related errors."""
    pass


def as_point(value: PointLike) -> Point:
    """
    Coerce a Point or an (x, y) pair into a Point.

    Raises:
        ShapeError: If the value is not a pair of numbers
    """
    if isinstance(value, Point):
        return value
    if isinstance(value, (str, bytes)):
        raise ShapeError(f"Invalid point: {value!r}")
    try:
        x, y = value
        return Point(float(x), float(y))
    except (TypeError, ValueError):
        raise ShapeError(f"Invalid point: {value!r}") from None


class Shape:
    """
    Base class for renderable shapes.

    Holds the fill and stroke shared by every variant. Subclasses build one
    element in ``to_svg_element``; composites override ``render`` instead.
    """

    __slots__ = ('_type', '_fill', '_stroke')

    def __init__(
        self,
        shape_type: ShapeType,
        fill: Optional[FillValue] = None,
        stroke: Optional[Stroke] = None
    ):
        """
        Initialize a new shape.

        Args:
            shape_type: Kind of shape
            fill: Fill, or any color value accepted by Color.parse
            stroke: Stroke or None for no stroke
        """
        self._type = shape_type
        self._fill = self._process_fill(fill)
        self._stroke = self._process_stroke(stroke)

    @staticmethod
    def _process_fill(fill: Optional[FillValue]) -> Fill:
        """
        Process fill input.

        Args:
            fill: Fill object, color value, or None (transparent)

        Returns:
            Fill object
        """
        if isinstance(fill, Fill):
            return fill
        try:
            return Fill(fill)
        except ColorError as e:
            raise ShapeError(f"Invalid fill: {fill!r} - {e}") from e

    @staticmethod
    def _process_stroke(stroke: Optional[Stroke]) -> Stroke:
        if stroke is None:
            return Stroke()
        if not isinstance(stroke, Stroke):
            raise ShapeError(f"Invalid stroke: {stroke!r}")
        return stroke

    @property
    def type(self) -> ShapeType:
        """Get shape type."""
        return self._type

    @property
    def fill(self) -> Fill:
        return self._fill

    @property
    def stroke(self) -> Stroke:
        return self._stroke

    def _style_attributes(self, layout: Layout) -> Dict[str, Any]:
        attrs = dict(self._fill.attributes(layout))
        attrs.update(self._stroke.attributes(layout))
        return attrs

    def to_svg_element(self, layout: Layout) -> ET.Element:
        """
        Convert shape to an SVG element in device coordinates.

        Args:
            layout: Coordinate transform to apply

        Returns:
            XML element representing the shape
        """
        raise NotImplementedError("Subclasses must implement to_svg_element")

    def render(self, layout: Layout) -> str:
        """
        Render the shape to markup text.

        Args:
            layout: Coordinate transform to apply

        Returns:
            Newline-terminated markup
        """
        return serialize_element(self.to_svg_element(layout))

    def clone(self) -> 'Shape':
        """
        Create an independent deep copy of the shape.

        Returns:
            Copied shape
        """
        raise NotImplementedError("Subclasses must implement clone")

    def translate(self, delta: PointLike) -> None:
        """
        Shift the shape's coordinates in place.

        Args:
            delta: Offset added to every coordinate
        """
        raise NotImplementedError("Subclasses must implement translate")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(type={self._type.name})"


class Circle(Shape):
    """Circle given by its center and diameter."""

    __slots__ = ('_center', '_radius')

    def __init__(
        self,
        center: PointLike,
        diameter: float,
        fill: Optional[FillValue] = None,
        stroke: Optional[Stroke] = None
    ):
        """
        Initialize a circle.

        Args:
            center: Center point
            diameter: Circle diameter in caller units
            fill: Fill or color value
            stroke: Stroke or None
        """
        super().__init__(ShapeType.CIRCLE, fill, stroke)
        self._center = as_point(center)
        self._radius = diameter / 2

    @property
    def center(self) -> Point:
        return self._center

    @property
    def radius(self) -> float:
        return self._radius

    def to_svg_element(self, layout: Layout) -> ET.Element:
        attrs = {
            "cx": layout.translate_x(self._center.x),
            "cy": layout.translate_y(self._center.y),
            "r": layout.translate_scale(self._radius),
        }
        attrs.update(self._style_attributes(layout))
        return build_element("circle", attrs)

    def translate(self, delta: PointLike) -> None:
        self._center = self._center.offset(as_point(delta))

    def clone(self) -> 'Circle':
        return Circle(self._center, self._radius * 2, self._fill, self._stroke)


class Ellipse(Shape):
    """Axis-aligned ellipse given by its center, width and height."""

    __slots__ = ('_center', '_radius_width', '_radius_height')

    def __init__(
        self,
        center: PointLike,
        width: float,
        height: float,
        fill: Optional[FillValue] = None,
        stroke: Optional[Stroke] = None
    ):
        """
        Initialize an ellipse.

        Args:
            center: Center point
            width: Full horizontal extent
            height: Full vertical extent
            fill: Fill or color value
            stroke: Stroke or None
        """
        super().__init__(ShapeType.ELLIPSE, fill, stroke)
        self._center = as_point(center)
        self._radius_width = width / 2
        self._radius_height = height / 2

    @property
    def center(self) -> Point:
        return self._center

    @property
    def radii(self) -> Tuple[float, float]:
        return (self._radius_width, self._radius_height)

    def to_svg_element(self, layout: Layout) -> ET.Element:
        attrs = {
            "cx": layout.translate_x(self._center.x),
            "cy": layout.translate_y(self._center.y),
            "rx": layout.translate_scale(self._radius_width),
            "ry": layout.translate_scale(self._radius_height),
        }
        attrs.update(self._style_attributes(layout))
        return build_element("ellipse", attrs)

    def translate(self, delta: PointLike) -> None:
        self._center = self._center.offset(as_point(delta))

    def clone(self) -> 'Ellipse':
        return Ellipse(self._center, self._radius_width * 2, self._radius_height * 2,
                       self._fill, self._stroke)


class Rectangle(Shape):
    """Rectangle anchored at one edge point."""

    __slots__ = ('_edge', '_width', '_height')

    def __init__(
        self,
        edge: PointLike,
        width: float,
        height: float,
        fill: Optional[FillValue] = None,
        stroke: Optional[Stroke] = None
    ):
        """
        Initialize a rectangle.

        Args:
            edge: Anchor corner, emitted as the x/y attributes
            width: Width in caller units
            height: Height in caller units
            fill: Fill or color value
            stroke: Stroke or None
        """
        super().__init__(ShapeType.RECTANGLE, fill, stroke)
        self._edge = as_point(edge)
        self._width = width
        self._height = height

    @property
    def edge(self) -> Point:
        return self._edge

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    def to_svg_element(self, layout: Layout) -> ET.Element:
        attrs = {
            "x": layout.translate_x(self._edge.x),
            "y": layout.translate_y(self._edge.y),
            "width": layout.translate_scale(self._width),
            "height": layout.translate_scale(self._height),
        }
        attrs.update(self._style_attributes(layout))
        return build_element("rect", attrs)

    def translate(self, delta: PointLike) -> None:
        self._edge = self._edge.offset(as_point(delta))

    def clone(self) -> 'Rectangle':
        return Rectangle(self._edge, self._width, self._height, self._fill, self._stroke)


class Line(Shape):
    """Straight segment between two points; stroked only."""

    __slots__ = ('_start_point', '_end_point')

    def __init__(
        self,
        start_point: PointLike,
        end_point: PointLike,
        stroke: Optional[Stroke] = None
    ):
        """
        Initialize a line.

        Args:
            start_point: First endpoint
            end_point: Second endpoint
            stroke: Stroke or None
        """
        super().__init__(ShapeType.LINE, None, stroke)
        self._start_point = as_point(start_point)
        self._end_point = as_point(end_point)

    @property
    def start_point(self) -> Point:
        return self._start_point

    @property
    def end_point(self) -> Point:
        return self._end_point

    def to_svg_element(self, layout: Layout) -> ET.Element:
        attrs = {
            "x1": layout.translate_x(self._start_point.x),
            "y1": layout.translate_y(self._start_point.y),
            "x2": layout.translate_x(self._end_point.x),
            "y2": layout.translate_y(self._end_point.y),
        }
        # Lines have no interior, so only the stroke is emitted
        attrs.update(self._stroke.attributes(layout))
        return build_element("line", attrs)

    def translate(self, delta: PointLike) -> None:
        delta = as_point(delta)
        self._start_point = self._start_point.offset(delta)
        self._end_point = self._end_point.offset(delta)

    def clone(self) -> 'Line':
        return Line(self._start_point, self._end_point, self._stroke)


def _format_points(points: Iterable[Point], layout: Layout) -> str:
    return " ".join(
        f"{format_number(layout.translate_x(p.x))},{format_number(layout.translate_y(p.y))}"
        for p in points
    )


class _PointSequenceShape(Shape):
    """Shared storage for shapes built from an append-only point list."""

    __slots__ = ('_points',)

    _tag = None

    def __init__(
        self,
        shape_type: ShapeType,
        fill: Optional[FillValue] = None,
        stroke: Optional[Stroke] = None,
        points: Optional[Iterable[PointLike]] = None
    ):
        super().__init__(shape_type, fill, stroke)
        self._points: List[Point] = [as_point(p) for p in points or ()]

    @property
    def points(self) -> Tuple[Point, ...]:
        return tuple(self._points)

    def append(self, point: PointLike) -> Self:
        """
        Append one point.

        Args:
            point: Point to add

        Returns:
            Self for method chaining
        """
        self._points.append(as_point(point))
        return self

    def extend(self, points: Iterable[PointLike]) -> Self:
        """Append several points in order."""
        for point in points:
            self.append(point)
        return self

    def __lshift__(self, point: PointLike) -> Self:
        return self.append(point)

    def __len__(self) -> int:
        return len(self._points)

    def to_svg_element(self, layout: Layout) -> ET.Element:
        attrs = {"points": _format_points(self._points, layout)}
        attrs.update(self._style_attributes(layout))
        return build_element(self._tag, attrs)

    def translate(self, delta: PointLike) -> None:
        delta = as_point(delta)
        self._points = [p.offset(delta) for p in self._points]

    def clone(self) -> Self:
        return self.__class__(fill=self._fill, stroke=self._stroke, points=self._points)


class Polygon(_PointSequenceShape):
    """Closed shape through an ordered list of points."""

    __slots__ = ()

    _tag = "polygon"

    def __init__(
        self,
        fill: Optional[FillValue] = None,
        stroke: Optional[Stroke] = None,
        points: Optional[Iterable[PointLike]] = None
    ):
        super().__init__(ShapeType.POLYGON, fill, stroke, points)


class Polyline(_PointSequenceShape):
    """Open chain of segments through an ordered list of points."""

    __slots__ = ()

    _tag = "polyline"

    def __init__(
        self,
        fill: Optional[FillValue] = None,
        stroke: Optional[Stroke] = None,
        points: Optional[Iterable[PointLike]] = None
    ):
        super().__init__(ShapeType.POLYLINE, fill, stroke, points)


class Path(Shape):
    """
    Multi-segment path of straight, closed sub-paths.

    Points are always appended to the current sub-path. Rendering uses the
    even-odd fill rule, so nested sub-paths punch holes.
    """

    __slots__ = ('_sub_paths',)

    def __init__(
        self,
        fill: Optional[FillValue] = None,
        stroke: Optional[Stroke] = None,
        sub_paths: Optional[Iterable[Iterable[PointLike]]] = None
    ):
        """
        Initialize a path.

        Args:
            fill: Fill or color value
            stroke: Stroke or None
            sub_paths: Optional initial sub-paths, each a point sequence
        """
        super().__init__(ShapeType.PATH, fill, stroke)
        self._sub_paths: List[List[Point]] = [[]]
        for sub_path in sub_paths or ():
            self.start_new_sub_path()
            for point in sub_path:
                self.append(point)

    @property
    def sub_paths(self) -> Tuple[Tuple[Point, ...], ...]:
        return tuple(tuple(sub_path) for sub_path in self._sub_paths)

    def append(self, point: PointLike) -> Self:
        """
        Append a point to the current sub-path.

        Returns:
            Self for method chaining
        """
        self._sub_paths[-1].append(as_point(point))
        return self

    def __lshift__(self, point: PointLike) -> Self:
        return self.append(point)

    def start_new_sub_path(self) -> Self:
        """
        Open a fresh sub-path unless the current one is still empty.

        Returns:
            Self for method chaining
        """
        if self._sub_paths[-1]:
            self._sub_paths.append([])
        return self

    def path_data(self, layout: Layout) -> str:
        """
        Build the ``d`` attribute value in device coordinates.

        Args:
            layout: Coordinate transform to apply

        Returns:
            ``M x,y x,y z`` per non-empty sub-path, space separated
        """
        segments = [
            f"M{_format_points(sub_path, layout)} z"
            for sub_path in self._sub_paths
            if sub_path
        ]
        return " ".join(segments)

    def to_svg_element(self, layout: Layout) -> ET.Element:
        attrs = {
            "d": self.path_data(layout),
            "fill-rule": "evenodd",
        }
        attrs.update(self._style_attributes(layout))
        return build_element("path", attrs)

    def translate(self, delta: PointLike) -> None:
        delta = as_point(delta)
        self._sub_paths = [[p.offset(delta) for p in sub_path] for sub_path in self._sub_paths]

    def clone(self) -> 'Path':
        path = Path(self._fill, self._stroke)
        path._sub_paths = [list(sub_path) for sub_path in self._sub_paths]
        return path


class Text(Shape):
    """Text label anchored at a point."""

    __slots__ = ('_origin', '_content', '_font')

    def __init__(
        self,
        origin: PointLike,
        content: str,
        fill: Optional[FillValue] = None,
        font: Optional[Font] = None,
        stroke: Optional[Stroke] = None
    ):
        """
        Initialize a text label.

        Args:
            origin: Anchor point
            content: Literal text; escaped by the serializer
            fill: Fill or color value
            font: Font (defaults to the configured size and family)
            stroke: Stroke or None
        """
        super().__init__(ShapeType.TEXT, fill, stroke)
        self._origin = as_point(origin)
        self._content = str(content)
        self._font = font if font is not None else Font()

    @property
    def origin(self) -> Point:
        return self._origin

    @property
    def content(self) -> str:
        return self._content

    @property
    def font(self) -> Font:
        return self._font

    def to_svg_element(self, layout: Layout) -> ET.Element:
        attrs = {
            "x": layout.translate_x(self._origin.x),
            "y": layout.translate_y(self._origin.y),
        }
        attrs.update(self._style_attributes(layout))
        attrs.update(self._font.attributes(layout))
        element = build_element("text", attrs)
        element.text = self._content
        return element

    def translate(self, delta: PointLike) -> None:
        self._origin = self._origin.offset(as_point(delta))

    def clone(self) -> 'Text':
        return Text(self._origin, self._content, self._fill, self._font, self._stroke)
