"""
Core module for shared configuration and profiling.
This module holds the runtime settings every renderer reads from.
"""

import os
import time
import logging
from typing import Dict, Any

logger = logging.getLogger(__name__)


def _env_int(name: str, default: int, minimum: int = None) -> int:
    """Read an integer setting from the environment."""
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        number = int(value)
    except ValueError:
        logger.warning(f"Ignoring non-integer value for {name}: {value!r}")
        return default
    if minimum is not None and number < minimum:
        logger.warning(f"Ignoring {name}={number}; it must be at least {minimum}")
        return default
    return number


# Global configuration settings with library defaults
CONFIG: Dict[str, Any] = {
    # Markup formatting
    "number_precision": _env_int("SVG_SCENE_PRECISION", 6, minimum=1),  # significant digits
    "indent_string": "\t",

    # Style defaults
    "default_font_size": 12,
    "default_font_family": "Verdana",

    # Canvas defaults
    "default_canvas": (400, 300),
    "raster_size": (512, 512),

    # Diagnostics
    "enable_profiling": os.environ.get("SVG_SCENE_PROFILE", "0") == "1",
}


class Profiler:
    """Simple context manager for timing a block of code."""

    def __init__(self, name: str, enabled: bool = None):
        self.name = name
        self.enabled = CONFIG["enable_profiling"] if enabled is None else enabled
        self.start_time = None
        self.duration = None

    def __enter__(self):
        if not self.enabled:
            return self

        self.start_time = time.perf_counter()
        logger.debug(f"Profiling started: {self.name}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if not self.enabled or self.start_time is None:
            return

        self.duration = time.perf_counter() - self.start_time
        logger.debug(f"Profiling completed: {self.name} - {self.duration:.6f}s")


def configure(settings: Dict[str, Any]) -> None:
    """
    Update the configuration with custom settings.

    Args:
        settings: Dictionary of configuration settings to update

    Raises:
        ValueError: If number_precision is not an integer of at least 1
    """
    if "number_precision" in settings:
        precision = settings["number_precision"]
        if isinstance(precision, bool) or not isinstance(precision, int) or precision < 1:
            raise ValueError(f"number_precision must be an integer >= 1, got {precision!r}")

    unknown = set(settings) - set(CONFIG)
    if unknown:
        logger.warning(f"Unknown configuration keys: {', '.join(sorted(unknown))}")

    CONFIG.update(settings)
    logger.info(f"Configuration updated: {', '.join(settings.keys())}")


__all__ = [
    "CONFIG",
    "Profiler",
    "configure",
]
