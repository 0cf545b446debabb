"""Composes locating, reading, picking, detecting and running a script."""

import logging
from pathlib import Path

from .config import Settings
from .detector import detect_package_manager
from .locator import MANIFEST_NAME, locate_project
from .models import ProjectInfo, RunRequest
from .picker import BasePicker
from .reporting import TextReporter
from .runner import BaseRunner, format_command
from .scripts import require_scripts

logger = logging.getLogger(__name__)


class ScriptWorkflow:
    """Runs one package.json script chosen by the user."""

    def __init__(
        self,
        picker: BasePicker,
        runner: BaseRunner,
        settings: Settings | None = None,
        reporter: TextReporter | None = None,
    ):
        """
        Initialize workflow with its collaborators.

        Args:
            picker: Selection prompt offering the script names
            runner: Execution service the formatted command is handed to
            settings: User settings (package manager override)
            reporter: Optional reporter announcing the command before it runs
        """
        self.picker = picker
        self.runner = runner
        self.settings = settings or Settings()
        self.reporter = reporter

    def describe(self, start: Path) -> ProjectInfo:
        """
        Resolve the project around ``start`` without running anything.

        Raises:
            ProjectNotFoundError: If no package.json is found
            NoScriptsError: If package.json declares no scripts
        """
        root = locate_project(start)
        manifest = root / MANIFEST_NAME
        scripts = require_scripts(manifest)
        manager = detect_package_manager(root, self.settings.package_manager)

        return ProjectInfo(
            root=root,
            manifest=manifest,
            package_manager=manager,
            scripts=scripts,
        )

    def run(self, start: Path) -> RunRequest | None:
        """
        Let the user pick a script and run it from the project root.

        Args:
            start: Directory to start looking for package.json from

        Returns:
            The RunRequest handed to the runner, or None if the user
            cancelled the selection

        Raises:
            ProjectNotFoundError: If no package.json is found
            NoScriptsError: If package.json declares no scripts
            json.JSONDecodeError: If package.json is not valid JSON
        """
        root = locate_project(start)
        scripts = require_scripts(root / MANIFEST_NAME)

        choice = self.picker.pick([script.name for script in scripts])
        if choice is None:
            logger.info("No script selected")
            return None

        manager = detect_package_manager(root, self.settings.package_manager)
        request = RunRequest(command=format_command(manager, choice), cwd=root)

        if self.reporter is not None:
            self.reporter.announce(request)
        self.runner.run(request.command, request.cwd)
        return request
