"""
Document Module
===============
This module assembles owned shapes into a complete SVG document and writes
it to a file.
"""

import os
from pathlib import Path
from typing import Any, Dict, Iterator, Optional, Tuple, Union

from typing_extensions import Self

from svg_scene.core import Profiler
from svg_scene.generation.renderer import RenderError, SVGRenderer
from svg_scene.models.factory import create_layout_from_dict, create_shape_from_dict
from svg_scene.models.layout import Layout
from svg_scene.models.shape import Shape, ShapeError
from svg_scene.utils.io import write_text
from svg_scene.utils.logger import get_logger, log_function_call
from svg_scene.utils.markup import attribute, element_end, indent

# Configure logger
logger = get_logger(__name__)

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
XML_DECLARATION = '<?xml ' + attribute("version", "1.0") + attribute("standalone", "no") + '?>\n'
DOCTYPE = ('<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.1//EN" '
           '"http://www.w3.org/Graphics/SVG/1.1/DTD/svg11.dtd">\n')


class Document:
    """
    Top-level owner of a scene.

    Every appended shape is stored as an independent copy taken at append
    time. Rendering walks the owned shapes in order and never mutates them.
    """

    def __init__(self, file_name: Union[str, Path], layout: Optional[Layout] = None):
        """
        Initialize an empty document.

        Args:
            file_name: Output path used by save()
            layout: Coordinate space (defaults to a 400x300 bottom-left canvas)
        """
        self._file_name = str(file_name)
        self._layout = layout if layout is not None else Layout()
        self._shapes = []

    @classmethod
    def from_dict(cls, scene_dict: Dict[str, Any], file_name: Union[str, Path]) -> 'Document':
        """
        Create a document from ``{"layout": {...}, "shapes": [...]}``.

        Args:
            scene_dict: Scene description, e.g. loaded from JSON
            file_name: Output path used by save()

        Returns:
            Document holding copies of every described shape

        Raises:
            ShapeError: If any shape or the layout is invalid
        """
        shape_dicts = scene_dict.get('shapes', [])
        if not isinstance(shape_dicts, list):
            raise ShapeError(f"Scene shapes must be a list, got {shape_dicts!r}")

        document = cls(file_name, create_layout_from_dict(scene_dict.get('layout')))
        for shape_dict in shape_dicts:
            document.append(create_shape_from_dict(shape_dict))

        logger.debug(f"Built document with {len(document)} shapes for {file_name}")
        return document

    @property
    def file_name(self) -> str:
        return self._file_name

    @property
    def layout(self) -> Layout:
        return self._layout

    @property
    def shapes(self) -> Tuple[Shape, ...]:
        return tuple(self._shapes)

    def append(self, shape: Shape) -> Self:
        """
        Add a copy of a shape to the document.

        Args:
            shape: Shape to copy into the document

        Returns:
            Self for method chaining
        """
        if not isinstance(shape, Shape):
            raise ShapeError(f"Can only append shapes, got {type(shape).__name__}")
        self._shapes.append(shape.clone())
        return self

    def __lshift__(self, shape: Shape) -> Self:
        return self.append(shape)

    def __len__(self) -> int:
        return len(self._shapes)

    def __iter__(self) -> Iterator[Shape]:
        return iter(self._shapes)

    def _root_start(self) -> str:
        dimensions = self.layout.dimensions
        return (
            "<svg "
            + attribute("width", dimensions.width, "px")
            + attribute("height", dimensions.height, "px")
            + attribute("xmlns", SVG_NAMESPACE)
            + attribute("version", "1.1")
            + ">\n"
        )

    def render(self) -> str:
        """
        Generate the complete SVG document.

        Returns:
            Declaration, doctype, root element and the indented shape bodies
        """
        with Profiler("document_render"):
            body = "".join(indent(shape.render(self.layout)) for shape in self._shapes)
            return XML_DECLARATION + DOCTYPE + self._root_start() + body + element_end("svg")

    def to_string(self) -> str:
        return self.render()

    def __str__(self) -> str:
        return self.render()

    @log_function_call()
    def save(self) -> bool:
        """
        Write the rendered document to ``file_name``.

        Returns:
            True on success, False if the file could not be opened or written
        """
        try:
            write_text(self.render(), self.file_name)
        except OSError as e:
            logger.warning(f"Could not write SVG to {self.file_name}: {e}")
            return False

        logger.info(f"SVG saved to {self.file_name}")
        return True

    def save_png(
        self,
        output_path: Optional[Union[str, Path]] = None,
        size: Optional[Tuple[int, int]] = None,
        renderer: Optional[SVGRenderer] = None
    ) -> bool:
        """
        Rasterize the rendered document to a PNG file.

        Args:
            output_path: Destination (defaults to file_name with a .png suffix)
            size: Output size in pixels (defaults to the canvas dimensions)
            renderer: Renderer to use (a new SVGRenderer by default)

        Returns:
            True on success, False if rendering or writing failed
        """
        if output_path is None:
            output_path = os.path.splitext(self.file_name)[0] + ".png"
        if size is None:
            dimensions = self.layout.dimensions
            size = (max(1, round(dimensions.width)), max(1, round(dimensions.height)))
        renderer = renderer or SVGRenderer()

        try:
            renderer.render_to_png(self.render(), output_path, size)
        except (OSError, RenderError) as e:
            logger.warning(f"Could not write PNG to {output_path}: {e}")
            return False

        return True

    def __repr__(self) -> str:
        return f"Document({self.file_name!r}, {self.layout!r}, shapes={len(self._shapes)})"
