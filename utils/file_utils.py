"""
File Utilities Module
Reading stylesheets and config paths handed to the command line.
"""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

STYLESHEET_EXTENSIONS = {'.css', '.pcss', '.postcss'}


def normalize_path(path: str | Path) -> Path:
    """Convert string path to normalized Path object."""
    return Path(path).resolve()


def read_stylesheet(file_path: str | Path) -> str:
    """
    Read a stylesheet as text.

    Files that are not valid UTF-8 are read with the platform encoding.
    A byte order mark is dropped so it cannot end up in the first selector.

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    file_path = normalize_path(file_path)
    if not file_path.is_file():
        raise FileNotFoundError(f'Stylesheet not found: {file_path}')
    if file_path.suffix.lower() not in STYLESHEET_EXTENSIONS:
        logger.warning(f"{file_path.name} does not look like a stylesheet, parsing it as CSS anyway")
    try:
        content = file_path.read_text(encoding='utf-8-sig')
    except UnicodeDecodeError:
        logger.debug(f"{file_path} is not UTF-8, falling back to the default encoding")
        content = file_path.read_text()
    logger.debug(f"Read {len(content)} characters from {file_path}")
    return content
