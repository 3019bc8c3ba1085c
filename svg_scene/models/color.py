"""
Color model for SVG paint values.
Provides the fixed named palette, literal RGB colors and the "no paint" value.
"""

from enum import Enum
from typing import Dict, Optional, Sequence, Tuple, Union

# Type definitions
RGB = Tuple[int, int, int]


class NamedColor(Enum):
    """Symbolic palette entries plus the transparent sentinel."""
    TRANSPARENT = "transparent"
    AQUA = "aqua"
    BLACK = "black"
    BLUE = "blue"
    BROWN = "brown"
    CYAN = "cyan"
    FUCHSIA = "fuchsia"
    GREEN = "green"
    LIME = "lime"
    MAGENTA = "magenta"
    ORANGE = "orange"
    PURPLE = "purple"
    RED = "red"
    SILVER = "silver"
    WHITE = "white"
    YELLOW = "yellow"


# The palette is fixed; TRANSPARENT has no entry and renders as "none"
_PALETTE: Dict[NamedColor, RGB] = {
    NamedColor.AQUA: (0, 255, 255),
    NamedColor.BLACK: (0, 0, 0),
    NamedColor.BLUE: (0, 0, 255),
    NamedColor.BROWN: (165, 42, 42),
    NamedColor.CYAN: (0, 255, 255),
    NamedColor.FUCHSIA: (255, 0, 255),
    NamedColor.GREEN: (0, 128, 0),
    NamedColor.LIME: (0, 255, 0),
    NamedColor.MAGENTA: (255, 0, 255),
    NamedColor.ORANGE: (255, 165, 0),
    NamedColor.PURPLE: (128, 0, 128),
    NamedColor.RED: (255, 0, 0),
    NamedColor.SILVER: (192, 192, 192),
    NamedColor.WHITE: (255, 255, 255),
    NamedColor.YELLOW: (255, 255, 0),
}

ColorValue = Union['Color', NamedColor, str, Sequence[int], None]


class ColorError(Exception):
    """Custom exception for color-related errors."""
    pass


class Color:
    """
    Immutable paint color.

    A color is either transparent (rendered as ``none``) or a literal RGB
    triple. Components are not range-checked: whatever integers are given
    appear verbatim in the rendered ``rgb(r,g,b)`` string.
    """

    __slots__ = ('_r', '_g', '_b', '_transparent')

    def __init__(self, r: int = 0, g: int = 0, b: int = 0, transparent: bool = False):
        """
        Initialize a color.

        Args:
            r: Red component (0-255 expected, not enforced)
            g: Green component (0-255 expected, not enforced)
            b: Blue component (0-255 expected, not enforced)
            transparent: Whether this is the "no paint" color
        """
        self._r = r
        self._g = g
        self._b = b
        self._transparent = transparent

    @classmethod
    def named(cls, name: NamedColor) -> 'Color':
        """
        Create a color from the named palette.

        Args:
            name: Palette entry

        Returns:
            Color instance; any entry without an RGB value is transparent
        """
        rgb = _PALETTE.get(name)
        if rgb is None:
            return cls.transparent()
        return cls(*rgb)

    @classmethod
    def transparent(cls) -> 'Color':
        """Create the "no paint" color."""
        return cls(transparent=True)

    @classmethod
    def parse(cls, value: ColorValue) -> 'Color':
        """
        Convert common color inputs into a Color.

        Args:
            value: Color, NamedColor, palette name, "none", an (r, g, b)
                sequence, or None (transparent)

        Returns:
            Color instance

        Raises:
            ColorError: If the value cannot be interpreted as a color
        """
        if value is None:
            return cls.transparent()

        if isinstance(value, Color):
            return value

        if isinstance(value, NamedColor):
            return cls.named(value)

        if isinstance(value, str):
            key = value.strip().lower()
            if key in ("none", "transparent"):
                return cls.transparent()
            try:
                return cls.named(NamedColor(key))
            except ValueError:
                raise ColorError(f"Unknown color name: {value!r}") from None

        if isinstance(value, (tuple, list)) and len(value) == 3:
            if not all(isinstance(c, int) and not isinstance(c, bool) for c in value):
                raise ColorError(f"RGB components must be integers, got {value!r}")
            return cls(*value)

        raise ColorError(f"Unsupported color value: {value!r}")

    @property
    def is_transparent(self) -> bool:
        return self._transparent

    @property
    def rgb(self) -> Optional[RGB]:
        """RGB triple, or None for the transparent color."""
        if self._transparent:
            return None
        return (self._r, self._g, self._b)

    def render(self, layout=None) -> str:
        """
        Render the color as an SVG paint value.

        Args:
            layout: Unused; colors do not depend on the coordinate space

        Returns:
            ``none`` or ``rgb(r,g,b)``
        """
        if self._transparent:
            return "none"
        return f"rgb({self._r},{self._g},{self._b})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return False
        return self.rgb == other.rgb

    def __hash__(self) -> int:
        return hash(self.rgb)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        if self._transparent:
            return "Color.transparent()"
        return f"Color({self._r}, {self._g}, {self._b})"
