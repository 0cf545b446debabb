"""Command formatting and the execution services scripts are handed to."""

import logging
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from .models import PackageManager

logger = logging.getLogger(__name__)


def format_command(manager: "PackageManager | str", script: str) -> str:
    """
    Build the shell command that runs a script.

    Examples:
        (pnpm, "dev") -> "pnpm dev"
        (bun, "dev") -> "bun dev"
        (npm, "dev") -> "npm run dev"

    Any unrecognized manager is treated like npm.

    Args:
        manager: Package manager (enum member or name)
        script: Script name from package.json

    Returns:
        Shell command string
    """
    manager = PackageManager.from_value(manager)

    if manager is PackageManager.PNPM:
        return f"pnpm {script}"
    if manager is PackageManager.BUN:
        return f"bun {script}"
    return f"npm run {script}"


class BaseRunner(ABC):
    """
    Abstract execution service for formatted commands.

    Runners own everything that happens after the command string is built:
    output, exit status and so on are not interpreted by the caller.
    """

    @abstractmethod
    def run(self, command: str, cwd: Path) -> None:
        """
        Execute a shell command.

        Args:
            command: Shell command string (e.g. "pnpm start")
            cwd: Working directory to run it in
        """
        ...


class SubprocessRunner(BaseRunner):
    """Runs the command through the system shell, attached to the terminal."""

    def run(self, command: str, cwd: Path) -> None:
        logger.info(f"Executing '{command}' in {cwd}")
        completed = subprocess.run(command, shell=True, cwd=str(cwd))
        logger.debug(f"'{command}' exited with status {completed.returncode}")


class DryRunRunner(BaseRunner):
    """Prints the command instead of executing it."""

    def __init__(self, console: Console | None = None):
        """Initialize dry-run runner with optional console."""
        self.console = console or Console()

    def run(self, command: str, cwd: Path) -> None:
        self.console.print(f"Would run: {escape(command)}", style="bold")
        self.console.print(f"   in: {escape(str(cwd))}")
