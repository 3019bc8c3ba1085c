"""
SVG Scene Package
=================
This package builds in-memory scenes of 2-D vector shapes and serializes
them to standalone SVG documents.

Example::

    from svg_scene import Document, Layout, Dimensions, Origin, Circle, Point

    doc = Document("out.svg", Layout(Dimensions(100, 100), Origin.BOTTOM_LEFT))
    doc << Circle(Point(80, 80), 20, "red")
    doc.save()
"""

__version__ = "0.3.0"

from svg_scene.core import CONFIG, Profiler, configure
from svg_scene.models import (
    Point, Dimensions, min_point, max_point,
    NamedColor, ColorError, Color,
    Fill, Stroke, Font,
    Origin, Layout,
    TransformError, Transform,
    ShapeType, ShapeError, Shape,
    Circle, Ellipse, Rectangle, Line, Polygon, Polyline, Path, Text,
    Container, LineChart,
    create_shape_from_dict, create_layout_from_dict
)
from svg_scene.generation import Document, SVGRenderer, RenderError

__all__ = [
    'CONFIG', 'Profiler', 'configure',
    'Point', 'Dimensions', 'min_point', 'max_point',
    'NamedColor', 'ColorError', 'Color',
    'Fill', 'Stroke', 'Font',
    'Origin', 'Layout',
    'TransformError', 'Transform',
    'ShapeType', 'ShapeError', 'Shape',
    'Circle', 'Ellipse', 'Rectangle', 'Line', 'Polygon', 'Polyline', 'Path', 'Text',
    'Container', 'LineChart',
    'create_shape_from_dict', 'create_layout_from_dict',
    'Document', 'SVGRenderer', 'RenderError'
]
