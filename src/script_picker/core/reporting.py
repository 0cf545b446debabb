"""Output formatters for project information."""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .models import ProjectInfo, RunRequest


class TextReporter:
    """Human-readable output using rich library."""

    def __init__(self, console: Console | None = None):
        """Initialize text reporter with optional console."""
        self.console = console or Console()

    def report(self, info: ProjectInfo) -> None:
        """
        Print the project's scripts and the package manager they run through.

        Args:
            info: Resolved project information
        """
        self.console.print(f"Project: {info.root}", style="bold")
        self.console.print(f"Package manager: {info.package_manager.value}\n")

        table = Table(show_header=True, header_style="bold")
        table.add_column("Script")
        table.add_column("Command", overflow="fold")
        for script in info.scripts:
            table.add_row(escape(script.name), escape(script.command))

        self.console.print(table)

    def announce(self, request: RunRequest) -> None:
        """Print the command that is about to run."""
        self.console.print(f"Running: {escape(request.command)}", style="bold green")


class JsonReporter:
    """JSON output for programmatic consumption."""

    def report(self, info: ProjectInfo) -> str:
        """
        Generate JSON report.

        Args:
            info: Resolved project information

        Returns:
            JSON string
        """
        return info.model_dump_json(indent=2)
