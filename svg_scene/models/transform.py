"""
Affine transformation matrix for explicit group transforms.

Represents a 2D transformation matrix in the form::

    [a c e]
    [b d f]
    [0 0 1]

Group transforms operate on device-space coordinates, after the layout has
already converted every shape coordinate.
"""

import re
import math
from typing import Optional, Tuple

from svg_scene.models.geometry import Point
from svg_scene.utils.markup import format_number

Matrix = Tuple[float, float, float, float, float, float]  # a, b, c, d, e, f

IDENTITY_MATRIX: Matrix = (1, 0, 0, 1, 0, 0)

_OPERATION_PATTERN = re.compile(r'(matrix|translate|scale|rotate)\s*\(([^)]*)\)')


class TransformError(ValueError):
    """Raised when a transform string cannot be parsed."""
    pass


class Transform:
    """Immutable SVG transformation matrix."""

    __slots__ = ('_matrix',)

    def __init__(self, matrix: Matrix = IDENTITY_MATRIX):
        """
        Initialize transformation matrix.

        Args:
            matrix: Transformation matrix (a, b, c, d, e, f)
        """
        if len(matrix) != 6:
            raise TransformError(f"Matrix needs six components, got {matrix!r}")
        self._matrix = tuple(matrix)

    @classmethod
    def identity(cls) -> 'Transform':
        """Create identity transformation."""
        return cls(IDENTITY_MATRIX)

    @classmethod
    def translate(cls, tx: float, ty: float = 0) -> 'Transform':
        """
        Create translation transformation.

        Args:
            tx: Translation in x direction
            ty: Translation in y direction
        """
        return cls((1, 0, 0, 1, tx, ty))

    @classmethod
    def scale(cls, sx: float, sy: Optional[float] = None) -> 'Transform':
        """
        Create scaling transformation.

        Args:
            sx: Scale factor in x direction
            sy: Scale factor in y direction (defaults to sx)
        """
        if sy is None:
            sy = sx
        return cls((sx, 0, 0, sy, 0, 0))

    @classmethod
    def rotate(cls, angle: float, cx: float = 0, cy: float = 0) -> 'Transform':
        """
        Create rotation transformation.

        Args:
            angle: Rotation angle in degrees
            cx: Center of rotation, x-coordinate
            cy: Center of rotation, y-coordinate
        """
        angle_rad = math.radians(angle)
        cos_a = math.cos(angle_rad)
        sin_a = math.sin(angle_rad)
        rotation = cls((cos_a, sin_a, -sin_a, cos_a, 0, 0))

        if cx == 0 and cy == 0:
            return rotation
        return (cls.translate(cx, cy)
                .multiply(rotation)
                .multiply(cls.translate(-cx, -cy)))

    @classmethod
    def from_string(cls, transform_str: str) -> 'Transform':
        """
        Parse an SVG transform list such as ``"translate(3,1.1) scale(1.2)"``.

        Args:
            transform_str: SVG transform string

        Returns:
            Combined transform (left-to-right composition, as in SVG)

        Raises:
            TransformError: If an operation has the wrong number of arguments
        """
        transform = cls.identity()

        if not transform_str or not transform_str.strip():
            return transform

        for op, raw_args in _OPERATION_PATTERN.findall(transform_str):
            try:
                args = [float(x) for x in re.split(r'[\s,]+', raw_args.strip()) if x]
            except ValueError:
                raise TransformError(f"Invalid arguments in {op}({raw_args})") from None

            if op == 'matrix' and len(args) == 6:
                step = cls(tuple(args))
            elif op == 'translate' and len(args) in (1, 2):
                step = cls.translate(*args)
            elif op == 'scale' and len(args) in (1, 2):
                step = cls.scale(*args)
            elif op == 'rotate' and len(args) in (1, 3):
                step = cls.rotate(*args)
            else:
                raise TransformError(f"Invalid transform operation: {op}({raw_args})")

            transform = transform.multiply(step)

        return transform

    @property
    def matrix(self) -> Matrix:
        """Get the transformation matrix."""
        return self._matrix

    @property
    def is_identity(self) -> bool:
        """Check if this is an identity transform."""
        return self._matrix == IDENTITY_MATRIX

    def multiply(self, other: 'Transform') -> 'Transform':
        """
        Multiply with another transformation (this * other).

        Args:
            other: Transform to multiply with

        Returns:
            Combined transform; ``other`` is applied to points first
        """
        a1, b1, c1, d1, e1, f1 = self._matrix
        a2, b2, c2, d2, e2, f2 = other._matrix

        a = a1 * a2 + c1 * b2
        b = b1 * a2 + d1 * b2
        c = a1 * c2 + c1 * d2
        d = b1 * c2 + d1 * d2
        e = a1 * e2 + c1 * f2 + e1
        f = b1 * e2 + d1 * f2 + f1

        return Transform((a, b, c, d, e, f))

    def transform_point(self, point: Point) -> Point:
        """
        Transform a point.

        Args:
            point: Point to transform

        Returns:
            Transformed point
        """
        x, y = point
        a, b, c, d, e, f = self._matrix
        return Point(a * x + c * y + e, b * x + d * y + f)

    def to_svg_string(self) -> str:
        """
        Convert to SVG transform attribute value.

        Returns:
            ``""`` for the identity, else ``matrix(a,b,c,d,e,f)``
        """
        if self.is_identity:
            return ""
        return "matrix({})".format(",".join(format_number(v) for v in self._matrix))

    def __eq__(self, other: object) -> bool:
        """Check if transforms are equal within floating point tolerance."""
        if not isinstance(other, Transform):
            return False
        return all(abs(a - b) <= 1e-10 for a, b in zip(self._matrix, other._matrix))

    def __hash__(self) -> int:
        return hash(tuple(round(v, 10) for v in self._matrix))

    def __str__(self) -> str:
        return self.to_svg_string()

    def __repr__(self) -> str:
        return f"Transform({self._matrix})"
