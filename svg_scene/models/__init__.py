"""
SVG Scene - Data Models
=======================
This package contains the geometry, style, layout and shape models that make
up a scene.
"""

from svg_scene.models.geometry import Point, Dimensions, min_point, max_point
from svg_scene.models.color import NamedColor, ColorError, Color
from svg_scene.models.style import Fill, Stroke, Font
from svg_scene.models.layout import Origin, Layout
from svg_scene.models.transform import TransformError, Transform
from svg_scene.models.shape import (
    ShapeType, ShapeError, Shape,
    Circle, Ellipse, Rectangle, Line, Polygon, Polyline, Path, Text
)
from svg_scene.models.container import Container
from svg_scene.models.chart import LineChart
from svg_scene.models.factory import (
    create_shape_from_dict, create_layout_from_dict,
    create_stroke_from_dict, create_font_from_dict
)

__all__ = [
    'Point', 'Dimensions', 'min_point', 'max_point',
    'NamedColor', 'ColorError', 'Color',
    'Fill', 'Stroke', 'Font',
    'Origin', 'Layout',
    'TransformError', 'Transform',
    'ShapeType', 'ShapeError', 'Shape',
    'Circle', 'Ellipse', 'Rectangle', 'Line', 'Polygon', 'Polyline', 'Path', 'Text',
    'Container', 'LineChart',
    'create_shape_from_dict', 'create_layout_from_dict',
    'create_stroke_from_dict', 'create_font_from_dict'
]
