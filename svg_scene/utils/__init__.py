"""
SVG Scene - Utilities Package
=============================
This package contains logging, markup and file helpers for svg_scene.
"""

from svg_scene.utils.logger import (
    JsonFormatter, setup_logger, get_logger, LogCapture,
    log_function_call, log_exception
)
from svg_scene.utils.io import load_json, write_text
from svg_scene.utils.markup import format_number, attribute, indent

__all__ = [
    'JsonFormatter', 'setup_logger', 'get_logger', 'LogCapture',
    'log_function_call', 'log_exception',
    'load_json', 'write_text',
    'format_number', 'attribute', 'indent'
]
