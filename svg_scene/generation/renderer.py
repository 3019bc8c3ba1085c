"""
SVG rendering utilities to convert SVG markup to raster images.
"""
import io
import logging
from pathlib import Path
from typing import Optional, Tuple, Union

from PIL import Image

from svg_scene.core import CONFIG, Profiler

logger = logging.getLogger(__name__)


class RenderError(Exception):
    """Raised when SVG markup cannot be rasterized."""
    pass


class SVGRenderer:
    """
    Renders SVG markup to PIL Images and PNG files through cairosvg.
    """

    def __init__(self, default_size: Optional[Tuple[int, int]] = None):
        """
        Initialize the SVG renderer.

        Args:
            default_size: Default size (width, height) for rendered images;
                falls back to CONFIG["raster_size"]
        """
        self.default_size = tuple(default_size or CONFIG["raster_size"])
        self._cairosvg = None

    def _load_backend(self):
        """Import cairosvg on first use."""
        if self._cairosvg is None:
            try:
                import cairosvg
            except (ImportError, OSError) as e:
                # OSError: the package is installed but the native cairo library is not
                raise RenderError(f"cairosvg is not available: {e}") from e
            self._cairosvg = cairosvg
        return self._cairosvg

    def svg_to_png_bytes(self, svg_code: str, size: Optional[Tuple[int, int]] = None) -> bytes:
        """
        Convert SVG markup to PNG bytes.

        Args:
            svg_code: SVG markup
            size: Optional (width, height) of the output

        Returns:
            PNG-encoded image data

        Raises:
            RenderError: If the backend is missing or conversion fails
        """
        backend = self._load_backend()
        width, height = size or self.default_size

        with Profiler("svg_to_png"):
            try:
                return backend.svg2png(
                    bytestring=svg_code.encode('utf-8'),
                    output_width=width,
                    output_height=height
                )
            except Exception as e:
                logger.debug(f"Problematic SVG code: {svg_code[:100]}...")
                raise RenderError(f"Error rendering SVG: {e}") from e

    def render_svg(
        self,
        svg_code: str,
        output_path: Optional[Union[str, Path]] = None,
        size: Optional[Tuple[int, int]] = None
    ) -> Image.Image:
        """
        Convert SVG markup to a PIL Image.

        Args:
            svg_code: SVG markup
            output_path: Optional path to save the rendered image
            size: Optional (width, height) tuple for rendered image

        Returns:
            PIL Image of the rendered SVG
        """
        png_data = self.svg_to_png_bytes(svg_code, size)
        image = Image.open(io.BytesIO(png_data))
        image.load()

        if output_path:
            output_path = Path(output_path)
            output_path.parent.mkdir(exist_ok=True, parents=True)
            image.save(output_path)
            logger.info(f"Rendered image saved to {output_path}")

        return image

    def render_to_png(
        self,
        svg_code: str,
        output_path: Union[str, Path],
        size: Optional[Tuple[int, int]] = None
    ) -> Path:
        """
        Rasterize SVG markup straight to a PNG file.

        Args:
            svg_code: SVG markup
            output_path: Destination file
            size: Optional (width, height) of the output

        Returns:
            Path of the written file
        """
        output_path = Path(output_path)
        png_data = self.svg_to_png_bytes(svg_code, size)

        with open(output_path, 'wb') as f:
            f.write(png_data)

        logger.info(f"PNG saved to {output_path}")
        return output_path
