"""Command-line interface for Script Picker."""

import logging
from pathlib import Path

import click

from .core.config import load_settings
from .core.errors import ScriptPickerError
from .core.picker import PromptPicker
from .core.reporting import JsonReporter, TextReporter
from .core.runner import DryRunRunner, SubprocessRunner
from .core.workflow import ScriptWorkflow


@click.command()
@click.option(
    "--package-manager",
    "-m",
    type=click.Choice(["auto", "pnpm", "bun", "npm"], case_sensitive=False),
    default=None,
    envvar="SCRIPT_PICKER_PACKAGE_MANAGER",
    help="Package manager to run scripts with (default: from config, else auto)",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Path to YAML config file (default: script-picker config.yaml in the user config dir)",
)
@click.option(
    "--dry-run", is_flag=True, help="Print the command instead of running it"
)
@click.option(
    "--list", "list_scripts", is_flag=True, help="List scripts and exit"
)
@click.option(
    "--format",
    "-f",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default="text",
    help="Output format for --list (default: text)",
)
@click.option(
    "--verbose", "-v", count=True, help="Increase verbosity (-v for INFO, -vv for DEBUG)"
)
def main(package_manager, config_path, dry_run, list_scripts, format, verbose):
    """
    Script Picker - Pick a package.json script and run it.

    Looks for the nearest package.json from the current directory upwards,
    offers its scripts, and runs the chosen one with pnpm, bun or npm
    depending on the lock files present.
    """
    # Setup logging
    if verbose == 1:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    elif verbose >= 2:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")

    try:
        settings = load_settings(config_path)
        if package_manager:
            settings = settings.model_copy(update={"package_manager": package_manager.lower()})

        reporter = TextReporter()
        runner = DryRunRunner() if dry_run else SubprocessRunner()
        workflow = ScriptWorkflow(
            picker=PromptPicker(),
            runner=runner,
            settings=settings,
            reporter=None if dry_run else reporter,
        )

        # List scripts and exit
        if list_scripts:
            info = workflow.describe(Path.cwd())
            if format == "json":
                click.echo(JsonReporter().report(info))
            else:
                reporter.report(info)
            return

        workflow.run(Path.cwd())
    except ScriptPickerError as e:
        raise click.ClickException(str(e)) from e


if __name__ == "__main__":
    main()
