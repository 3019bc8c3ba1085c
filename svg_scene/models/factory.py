"""
Builders that create shapes and layouts from plain dictionaries,
such as a scene description loaded from JSON.
"""

from typing import Any, Callable, Dict, Optional

from svg_scene.models.chart import LineChart
from svg_scene.models.color import ColorError
from svg_scene.models.container import Container
from svg_scene.models.geometry import Dimensions
from svg_scene.models.layout import Layout, Origin
from svg_scene.models.shape import (
    Circle, Ellipse, Line, Path, Polygon, Polyline, Rectangle, Shape,
    ShapeError, ShapeType, Text, as_point
)
from svg_scene.models.style import Font, Stroke
from svg_scene.models.transform import TransformError

# Short names accepted alongside the ShapeType names
_TYPE_ALIASES = {
    'RECT': ShapeType.RECTANGLE,
    'GROUP': ShapeType.CONTAINER,
    'G': ShapeType.CONTAINER,
    'CHART': ShapeType.LINE_CHART,
}

_MISSING = object()


def _parse_type(value: Any) -> ShapeType:
    if not value:
        raise ShapeError("Missing shape type in dictionary")

    key = str(value).strip().upper().replace('-', '_')
    if key in _TYPE_ALIASES:
        return _TYPE_ALIASES[key]
    try:
        return ShapeType[key]
    except KeyError:
        raise ShapeError(f"Unknown shape type: {value}") from None


def _number(data: Dict[str, Any], key: str, default: Any = _MISSING) -> float:
    """
    Read a numeric field, accepting numbers and numeric strings.

    Raises:
        ShapeError: If the field is missing (and has no default) or not numeric
    """
    value = data.get(key, default)
    if value is _MISSING:
        raise ShapeError(f"Missing required field: '{key}'")
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise ShapeError(f"Field '{key}' must be a number, got {value!r}")
    try:
        return float(value)
    except ValueError:
        raise ShapeError(f"Field '{key}' must be a number, got {value!r}") from None


def create_stroke_from_dict(stroke_dict: Optional[Dict[str, Any]]) -> Optional[Stroke]:
    """
    Create a stroke from ``{"width": .., "color": .., "non_scaling": ..}``.

    Args:
        stroke_dict: Stroke data or None

    Returns:
        Stroke, or None when no data is given
    """
    if stroke_dict is None:
        return None
    if not isinstance(stroke_dict, dict):
        raise ShapeError(f"Stroke must be an object, got {stroke_dict!r}")
    return Stroke(
        width=_number(stroke_dict, 'width', 1),
        color=stroke_dict.get('color'),
        non_scaling=bool(stroke_dict.get('non_scaling', False))
    )


def create_font_from_dict(font_dict: Optional[Dict[str, Any]]) -> Optional[Font]:
    if font_dict is None:
        return None
    if not isinstance(font_dict, dict):
        raise ShapeError(f"Font must be an object, got {font_dict!r}")
    size = _number(font_dict, 'size') if font_dict.get('size') is not None else None
    family = font_dict.get('family')
    return Font(size=size, family=str(family) if family is not None else None)


def _build_container(shape_dict: Dict[str, Any], fill, stroke) -> Container:
    container = Container(fill, stroke, transform=shape_dict.get('transform'))
    for child in shape_dict.get('shapes', []):
        container.append(create_shape_from_dict(child))
    return container


def _build_chart(shape_dict: Dict[str, Any], fill, stroke) -> LineChart:
    margin = shape_dict.get('margin')
    axis_stroke = create_stroke_from_dict(shape_dict.get('axis_stroke'))
    chart = LineChart(Dimensions(*as_point(margin)) if margin is not None else None, axis_stroke)

    for series in shape_dict.get('series', []):
        if isinstance(series, dict):
            polyline = create_shape_from_dict(dict(series, type='POLYLINE'))
        else:
            polyline = Polyline(points=series)
        chart.append(polyline)
    return chart


_BUILDERS: Dict[ShapeType, Callable[[Dict[str, Any], Any, Any], Shape]] = {
    ShapeType.CIRCLE: lambda d, fill, stroke: Circle(
        as_point(d['center']), _number(d, 'diameter'), fill, stroke),
    ShapeType.ELLIPSE: lambda d, fill, stroke: Ellipse(
        as_point(d['center']), _number(d, 'width'), _number(d, 'height'), fill, stroke),
    ShapeType.RECTANGLE: lambda d, fill, stroke: Rectangle(
        as_point(d['edge']), _number(d, 'width'), _number(d, 'height'), fill, stroke),
    ShapeType.LINE: lambda d, fill, stroke: Line(
        as_point(d['start']), as_point(d['end']), stroke),
    ShapeType.POLYGON: lambda d, fill, stroke: Polygon(
        fill, stroke, points=d.get('points', [])),
    ShapeType.POLYLINE: lambda d, fill, stroke: Polyline(
        fill, stroke, points=d.get('points', [])),
    ShapeType.PATH: lambda d, fill, stroke: Path(
        fill, stroke, sub_paths=d.get('sub_paths', [])),
    ShapeType.TEXT: lambda d, fill, stroke: Text(
        as_point(d['origin']), d['content'], fill,
        create_font_from_dict(d.get('font')), stroke),
    ShapeType.CONTAINER: _build_container,
    ShapeType.LINE_CHART: _build_chart,
}


def create_shape_from_dict(shape_dict: Dict[str, Any]) -> Shape:
    """
    Create a shape from a dictionary representation.

    Args:
        shape_dict: Dictionary with a ``type`` key plus the fields of that
            shape; containers list children under ``shapes``

    Returns:
        Created shape

    Raises:
        ShapeError: If shape type is unknown or data is invalid
    """
    if not isinstance(shape_dict, dict):
        raise ShapeError(f"Shape must be an object, got {shape_dict!r}")

    shape_type = _parse_type(shape_dict.get('type'))

    try:
        stroke = create_stroke_from_dict(shape_dict.get('stroke'))
        return _BUILDERS[shape_type](shape_dict, shape_dict.get('fill'), stroke)
    except ShapeError:
        raise
    except KeyError as e:
        raise ShapeError(f"Missing required field for {shape_type.name}: {e}") from e
    except (ColorError, TransformError, TypeError, ValueError) as e:
        raise ShapeError(f"Error creating {shape_type.name}: {e}") from e


def create_layout_from_dict(layout_dict: Optional[Dict[str, Any]]) -> Layout:
    """
    Create a layout from ``{"width", "height", "origin", "scale", "offset"}``.

    Args:
        layout_dict: Layout data; missing keys use the Layout defaults

    Returns:
        Layout instance

    Raises:
        ShapeError: If the layout is not an object or a field is invalid
    """
    if layout_dict is None:
        layout_dict = {}
    if not isinstance(layout_dict, dict):
        raise ShapeError(f"Layout must be an object, got {layout_dict!r}")

    dimensions = None
    if 'width' in layout_dict or 'height' in layout_dict:
        dimensions = Dimensions(_number(layout_dict, 'width', 0), _number(layout_dict, 'height', 0))

    offset = layout_dict.get('offset')
    try:
        return Layout(
            dimensions=dimensions,
            origin=Origin.parse(layout_dict.get('origin', Origin.BOTTOM_LEFT)),
            scale=_number(layout_dict, 'scale', 1),
            origin_offset=as_point(offset) if offset is not None else None
        )
    except ValueError as e:
        raise ShapeError(f"Invalid layout: {e}") from e
