"""
Style descriptors: fill, stroke and font.

Each descriptor renders a self-contained attribute fragment. The only
contextual input is the layout's scale, applied to stroke widths and font
sizes.
"""

from typing import Any, Dict, Optional

from svg_scene.core import CONFIG
from svg_scene.models.color import Color, ColorValue
from svg_scene.utils.markup import attributes


def _scaled(length: float, layout) -> float:
    return layout.translate_scale(length) if layout is not None else length


class Fill:
    """Interior paint of a shape."""

    __slots__ = ('_color',)

    def __init__(self, color: ColorValue = None):
        """
        Args:
            color: Paint color; None means transparent
        """
        self._color = Color.parse(color)

    @property
    def color(self) -> Color:
        return self._color

    def attributes(self, layout=None) -> Dict[str, Any]:
        return {"fill": self._color.render(layout)}

    def render(self, layout=None) -> str:
        return attributes(self.attributes(layout))

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Fill) and self._color == other._color

    def __hash__(self) -> int:
        return hash(self._color)

    def __repr__(self) -> str:
        return f"Fill({self._color!r})"


class Stroke:
    """
    Outline paint and width.

    A negative width is the "no stroke" value: it renders no attributes.
    """

    __slots__ = ('_width', '_color', '_non_scaling')

    def __init__(self, width: float = -1, color: ColorValue = None, non_scaling: bool = False):
        """
        Args:
            width: Stroke width in caller units; negative disables the stroke
            color: Stroke color; None means transparent
            non_scaling: Emit ``vector-effect="non-scaling-stroke"``
        """
        self._width = width
        self._color = Color.parse(color)
        self._non_scaling = non_scaling

    @property
    def width(self) -> float:
        return self._width

    @property
    def color(self) -> Color:
        return self._color

    @property
    def non_scaling(self) -> bool:
        return self._non_scaling

    @property
    def is_visible(self) -> bool:
        return self._width >= 0

    def attributes(self, layout=None) -> Dict[str, Any]:
        if not self.is_visible:
            return {}

        attrs = {
            "stroke-width": _scaled(self._width, layout),
            "stroke": self._color.render(layout),
        }
        if self._non_scaling:
            attrs["vector-effect"] = "non-scaling-stroke"
        return attrs

    def render(self, layout=None) -> str:
        return attributes(self.attributes(layout))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Stroke):
            return False
        return (self._width, self._color, self._non_scaling) == (
            other._width, other._color, other._non_scaling)

    def __hash__(self) -> int:
        return hash((self._width, self._color, self._non_scaling))

    def __repr__(self) -> str:
        return f"Stroke({self._width}, {self._color!r}, non_scaling={self._non_scaling})"


class Font:
    """Text size and family; always rendered."""

    __slots__ = ('_size', '_family')

    def __init__(self, size: Optional[float] = None, family: Optional[str] = None):
        """
        Args:
            size: Font size in caller units (default from CONFIG)
            family: Font family name (default from CONFIG)
        """
        self._size = CONFIG["default_font_size"] if size is None else size
        self._family = CONFIG["default_font_family"] if family is None else family

    @property
    def size(self) -> float:
        return self._size

    @property
    def family(self) -> str:
        return self._family

    def attributes(self, layout=None) -> Dict[str, Any]:
        return {
            "font-size": _scaled(self._size, layout),
            "font-family": self._family,
        }

    def render(self, layout=None) -> str:
        return attributes(self.attributes(layout))

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Font) and (self._size, self._family) == (other._size, other._family)

    def __hash__(self) -> int:
        return hash((self._size, self._family))

    def __repr__(self) -> str:
        return f"Font({self._size}, {self._family!r})"
