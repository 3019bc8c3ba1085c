"""
Container Module
================
Composite shape: a group element owning independent copies of its children.
"""

from typing import Iterator, List, Optional, Tuple, Union

from typing_extensions import Self

from svg_scene.models.layout import Layout
from svg_scene.models.shape import FillValue, PointLike, Shape, ShapeError, ShapeType
from svg_scene.models.style import Stroke
from svg_scene.models.transform import Transform
from svg_scene.utils.markup import attribute, attributes, element_end, element_start, indent


class Container(Shape):
    """
    Named group of owned shapes rendered as one ``<g>`` element.

    Appending stores ``shape.clone()``, so later changes to the caller's
    object never reach the stored copy. ``translate`` is a no-op: children
    hold absolute geometry and a container never re-targets them; offset
    each child individually before appending if that is wanted.
    """

    __slots__ = ('_children', '_transform')

    def __init__(
        self,
        fill: Optional[FillValue] = None,
        stroke: Optional[Stroke] = None,
        transform: Optional[Union[Transform, str]] = None
    ):
        """
        Initialize an empty container.

        Args:
            fill: Group fill inherited by children that do not set their own
            stroke: Group stroke
            transform: Optional explicit group transform in device space
        """
        super().__init__(ShapeType.CONTAINER, fill, stroke)
        self._children: List[Shape] = []
        if transform is None:
            self._transform = Transform.identity()
        elif isinstance(transform, Transform):
            self._transform = transform
        elif isinstance(transform, str):
            self._transform = Transform.from_string(transform)
        else:
            raise ShapeError(f"Invalid transform: {transform!r}")

    @property
    def children(self) -> Tuple[Shape, ...]:
        return tuple(self._children)

    @property
    def group_transform(self) -> Transform:
        return self._transform

    def append(self, shape: Shape) -> Self:
        """
        Store an independent copy of a shape.

        Args:
            shape: Shape to copy into the container

        Returns:
            Self for method chaining
        """
        if not isinstance(shape, Shape):
            raise ShapeError(f"Can only append shapes, got {type(shape).__name__}")
        self._children.append(shape.clone())
        return self

    def __lshift__(self, shape: Shape) -> Self:
        return self.append(shape)

    def transform(self, transform: Transform) -> Self:
        """
        Compose an additional group transform (existing * new).

        Args:
            transform: Transform applied to children before the existing one

        Returns:
            Self for method chaining
        """
        self._transform = self._transform.multiply(transform)
        return self

    def render(self, layout: Layout) -> str:
        if not self._children:
            return ""

        header = element_start("g") + attributes(self._style_attributes(layout))
        if not self._transform.is_identity:
            header += attribute("transform", self._transform.to_svg_string())

        body = "".join(indent(child.render(layout)) for child in self._children)
        return f"{header}>\n{body}{element_end('g')}"

    def translate(self, delta: PointLike) -> None:
        # Children are never re-targeted by their container.
        pass

    def clone(self) -> 'Container':
        container = Container(self._fill, self._stroke, self._transform)
        container._children = [child.clone() for child in self._children]
        return container

    def __len__(self) -> int:
        return len(self._children)

    def __iter__(self) -> Iterator[Shape]:
        return iter(self._children)
