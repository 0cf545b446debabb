"""Locate the project root by walking up from a start directory."""

import logging
from pathlib import Path

from .errors import ProjectNotFoundError

logger = logging.getLogger(__name__)

MANIFEST_NAME = "package.json"


def find_project_root(start: Path) -> Path | None:
    """
    Find the nearest directory containing package.json.

    The search starts at ``start`` itself and walks upward until the
    filesystem root.

    Args:
        start: Directory to start searching from

    Returns:
        Absolute path of the nearest ancestor containing package.json,
        or None if there is none
    """
    start = Path(start).resolve()

    for directory in (start, *start.parents):
        if (directory / MANIFEST_NAME).is_file():
            logger.debug(f"Found {MANIFEST_NAME} in {directory}")
            return directory

    logger.debug(f"No {MANIFEST_NAME} found above {start}")
    return None


def locate_project(start: Path) -> Path:
    """
    Like find_project_root(), but raise when nothing is found.

    Raises:
        ProjectNotFoundError: If no package.json exists up to the root
    """
    root = find_project_root(start)
    if root is None:
        raise ProjectNotFoundError()
    return root
