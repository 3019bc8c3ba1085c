"""
Layout Module
=============
Coordinate-space configuration for a document: canvas dimensions, the corner
treated as the origin, a uniform scale and an origin offset.

Every shape asks the layout to convert each of its own coordinates when it
renders, so each datum passes through the transform exactly once.
"""

from enum import Enum
from typing import Optional, Union

from svg_scene.core import CONFIG
from svg_scene.models.geometry import Dimensions, Point


class Origin(Enum):
    """Canvas corner that caller-space (0, 0) maps to."""
    TOP_LEFT = "top_left"
    BOTTOM_LEFT = "bottom_left"
    TOP_RIGHT = "top_right"
    BOTTOM_RIGHT = "bottom_right"

    @classmethod
    def parse(cls, value: Union['Origin', str]) -> 'Origin':
        """
        Accept an Origin or a name such as ``"BottomLeft"`` / ``"bottom_left"``.

        Raises:
            ValueError: If the name is not one of the four corners
        """
        if isinstance(value, Origin):
            return value

        key = "".join(ch for ch in str(value).lower() if ch.isalpha())
        for origin in cls:
            if origin.value.replace("_", "") == key:
                return origin
        raise ValueError(f"Unknown origin: {value!r}")

    @property
    def mirrors_x(self) -> bool:
        return self in (Origin.TOP_RIGHT, Origin.BOTTOM_RIGHT)

    @property
    def mirrors_y(self) -> bool:
        return self in (Origin.BOTTOM_LEFT, Origin.BOTTOM_RIGHT)


class Layout:
    """
    Active coordinate transform from caller space to SVG device space.

    Given a point (x, y), canvas (W, H), scale s and offset (ox, oy)::

        device_x = W - (x + ox) * s   for right-hand origins, else (x + ox) * s
        device_y = H - (y + oy) * s   for bottom origins,     else (y + oy) * s

    Lengths (radii, widths, font sizes) are only multiplied by s.
    """

    __slots__ = ('_dimensions', '_origin', '_scale', '_origin_offset')

    def __init__(
        self,
        dimensions: Optional[Dimensions] = None,
        origin: Union[Origin, str] = Origin.BOTTOM_LEFT,
        scale: float = 1.0,
        origin_offset: Optional[Point] = None
    ):
        """
        Initialize a layout.

        Args:
            dimensions: Canvas size (defaults to the configured canvas)
            origin: Corner used as the caller-space origin
            scale: Uniform multiplier for coordinates and lengths
            origin_offset: Offset added to caller coordinates before scaling
        """
        if dimensions is None:
            dimensions = Dimensions(*CONFIG["default_canvas"])
        self._dimensions = Dimensions(*dimensions)
        self._origin = Origin.parse(origin)
        self._scale = scale
        self._origin_offset = Point(*origin_offset) if origin_offset is not None else Point(0, 0)

    @property
    def dimensions(self) -> Dimensions:
        return self._dimensions

    @property
    def origin(self) -> Origin:
        return self._origin

    @property
    def scale(self) -> float:
        return self._scale

    @property
    def origin_offset(self) -> Point:
        return self._origin_offset

    def translate_x(self, x: float) -> float:
        """Convert a caller-space x coordinate to device space."""
        shifted = (x + self._origin_offset.x) * self._scale
        if self._origin.mirrors_x:
            return self._dimensions.width - shifted
        return shifted

    def translate_y(self, y: float) -> float:
        """Convert a caller-space y coordinate to device space."""
        shifted = (y + self._origin_offset.y) * self._scale
        if self._origin.mirrors_y:
            return self._dimensions.height - shifted
        return shifted

    def translate_point(self, point: Point) -> Point:
        """Convert a caller-space point to device space."""
        return Point(self.translate_x(point.x), self.translate_y(point.y))

    def translate_scale(self, length: float) -> float:
        """Scale a length; lengths are never mirrored or offset."""
        return length * self._scale

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Layout):
            return False
        return (
            self._dimensions == other._dimensions and
            self._origin == other._origin and
            self._scale == other._scale and
            self._origin_offset == other._origin_offset
        )

    def __hash__(self) -> int:
        return hash((self._dimensions, self._origin, self._scale, self._origin_offset))

    def __repr__(self) -> str:
        return (
            f"Layout(dimensions={tuple(self._dimensions)}, origin={self._origin.name}, "
            f"scale={self._scale}, origin_offset={tuple(self._origin_offset)})"
        )
