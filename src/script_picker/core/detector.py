"""Package manager detection from configuration and lock files."""

import logging
from pathlib import Path

from .models import PackageManager

logger = logging.getLogger(__name__)

AUTO = "auto"

# Checked in order; the first lock file present wins
LOCK_FILES = {
    "pnpm-lock.yaml": PackageManager.PNPM,
    "bun.lockb": PackageManager.BUN,
}


def detect_package_manager(
    project_root: Path, override: str | PackageManager | None = AUTO
) -> PackageManager:
    """
    Decide which package manager runs the project's scripts.

    Priority:
    1. An explicit override (anything other than "auto") is returned
       without touching the filesystem
    2. pnpm-lock.yaml in the project root selects pnpm
    3. bun.lockb in the project root selects bun
    4. Otherwise npm

    Unrecognized override values resolve to npm.

    Args:
        project_root: Directory containing package.json
        override: Configured package manager, or "auto"/None to detect

    Returns:
        The selected PackageManager
    """
    if isinstance(override, PackageManager):
        return override

    value = (override or AUTO).strip().lower()
    if value != AUTO:
        manager = PackageManager.from_value(value)
        if manager.value != value:
            logger.warning(f"Unknown package manager '{override}', falling back to npm")
        logger.debug(f"Using configured package manager: {manager.value}")
        return manager

    for lock_file, manager in LOCK_FILES.items():
        if (project_root / lock_file).is_file():
            logger.info(f"Detected {manager.value} from {lock_file}")
            return manager

    logger.info("No lock file found, defaulting to npm")
    return PackageManager.NPM
