"""Interactive script selection."""

import logging
from abc import ABC, abstractmethod

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

logger = logging.getLogger(__name__)


class BasePicker(ABC):
    """Abstract selection prompt over a list of script names."""

    @abstractmethod
    def pick(self, choices: list[str]) -> str | None:
        """
        Ask the user to choose one of ``choices``.

        Blocks until the user answers or cancels.

        Args:
            choices: Script names, in the order they should be offered

        Returns:
            The chosen name (always a member of ``choices``), or None if the
            user cancelled
        """
        ...


class PromptPicker(BasePicker):
    """Completion-style prompt that only accepts an exact script name."""

    def __init__(self, console: Console | None = None, prompt: str = "Run script"):
        """Initialize picker with optional console and prompt text."""
        self.console = console or Console()
        self.prompt = prompt

    def pick(self, choices: list[str]) -> str | None:
        if not choices:
            return None

        for name in choices:
            self.console.print(f"  • {escape(name)}")

        try:
            # rich re-asks until the answer is one of the choices
            answer = Prompt.ask(
                self.prompt,
                choices=choices,
                show_choices=False,
                console=self.console,
            )
        except (KeyboardInterrupt, EOFError):
            logger.debug("Selection cancelled")
            return None

        return answer
