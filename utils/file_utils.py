"""
File Utilities Module
Collects and reads stylesheets for batch conversion.
"""

import logging
import os
from pathlib import Path
from typing import List

logger = logging.getLogger(__name__)

CSS_EXTENSIONS = {'.css'}


def normalize_path(path: str | Path) -> Path:
    """Convert string path to normalized Path object."""
    return Path(path).resolve()


def is_hidden(path: Path) -> bool:
    return path.name.startswith('.')


def collect_css_files(path: str | Path) -> List[Path]:
    """
    Stylesheets to convert: the file itself, or every .css file under a
    directory (hidden files and directories skipped), sorted.

    Raises:
        FileNotFoundError: If the path doesn't exist
    """
    base_path = normalize_path(path)
    if not base_path.exists():
        raise FileNotFoundError(f"No such file or directory: {path}")
    if base_path.is_file():
        return [base_path]

    matching_files = []
    for root, dirs, files in os.walk(base_path):
        dirs[:] = [d for d in dirs if not is_hidden(Path(root) / d)]
        for file in files:
            file_path = Path(root) / file
            if is_hidden(file_path):
                continue
            if file_path.suffix.lower() in CSS_EXTENSIONS:
                matching_files.append(file_path)
    logger.info(f"Found {len(matching_files)} stylesheets under {base_path}")
    return sorted(matching_files)


def read_file_content(file_path: Path) -> str:
    """
    Read file content as UTF-8, falling back to the system encoding.

    Raises:
        FileNotFoundError: If file doesn't exist
        IOError: If file can't be read
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            return f.read()
    except UnicodeDecodeError:
        logger.warning(f"{file_path} is not valid UTF-8, retrying with the default encoding")
        with open(file_path, 'r') as f:
            return f.read()
