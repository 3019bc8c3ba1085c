"""
Input/output utilities for loading scene descriptions and writing markup.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

logger = logging.getLogger(__name__)


def load_json(file_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a JSON object from a file.

    Args:
        file_path: Path to the JSON file

    Returns:
        Parsed JSON object

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file does not hold a JSON object
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    with open(file_path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object in {file_path}, got {type(data).__name__}")

    logger.debug(f"Loaded JSON from {file_path}")
    return data


def write_text(text: str, output_path: Union[str, Path]) -> Path:
    """
    Write text to a file, replacing any existing content.

    Args:
        text: Text to write
        output_path: Destination path

    Returns:
        Path that was written

    Raises:
        OSError: If the file cannot be opened or written
    """
    output_path = Path(output_path)

    with open(output_path, 'w', encoding='utf-8') as f:
        f.write(text)

    logger.debug(f"Wrote {len(text)} characters to {output_path}")
    return output_path
