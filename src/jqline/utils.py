"""
Utility functions for jqline.
"""

import os
from pathlib import Path


def get_project_root() -> str:
    """
    Get the project root directory (parent of src/jqline).

    Returns:
        Absolute path to the project root directory
    """
    return os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def read_input_bytes(source: str) -> bytes:
    """
    Read the raw document bytes from a file.

    Args:
        source: Path to the input file

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    path = Path(source)
    if not path.is_file():
        raise FileNotFoundError(f"Input file not found: {path}")
    return path.read_bytes()
