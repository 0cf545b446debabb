"""Read the scripts section of a package.json file."""

import json
import logging
from pathlib import Path

from .errors import NoScriptsError
from .models import Script

logger = logging.getLogger(__name__)


def read_scripts(package_json: Path) -> list[Script]:
    """
    Parse package.json and extract its scripts.

    Scripts are returned in declaration order. A missing ``scripts`` key
    yields an empty list. Malformed JSON is not handled here: the
    json.JSONDecodeError propagates to the caller.

    Args:
        package_json: Path to the package.json file

    Returns:
        List of Script objects (may be empty)
    """
    # utf-8-sig strips a leading BOM, as npm does
    with open(package_json, encoding="utf-8-sig") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        logger.warning(f"{package_json} is not a JSON object, ignoring it")
        return []

    scripts = data.get("scripts", {})
    if not isinstance(scripts, dict):
        logger.warning(f"'scripts' in {package_json} is not an object, ignoring it")
        return []

    result = []
    for name, command in scripts.items():
        # Non-string commands are unusual but still selectable by name
        if not isinstance(command, str):
            command = json.dumps(command)
        result.append(Script(name=name, command=command))

    logger.info(f"Read {len(result)} script(s) from {package_json}")
    return result


def read_script_names(package_json: Path) -> list[str]:
    """Return only the script names from package.json, in declaration order."""
    return [script.name for script in read_scripts(package_json)]


def require_scripts(package_json: Path) -> list[Script]:
    """
    Read scripts and fail if there are none.

    Raises:
        NoScriptsError: If the scripts key is missing or empty
    """
    scripts = read_scripts(package_json)
    if not scripts:
        raise NoScriptsError()
    return scripts
