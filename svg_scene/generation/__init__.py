"""
SVG Scene - Generation Package
==============================
This package turns owned shape trees into SVG documents and raster images.
"""

from svg_scene.generation.renderer import RenderError, SVGRenderer
from svg_scene.generation.document import Document

__all__ = ['RenderError', 'SVGRenderer', 'Document']
