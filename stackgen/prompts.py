"""Interactive prompts backed by ``rich.prompt``.

All user input goes through ``Prompter`` so the CLI and stack drivers can be
exercised with scripted answers.
"""

from __future__ import annotations

from rich.prompt import Confirm, Prompt

from .models import INVALID_NAME_MESSAGE, PROJECT_NAME_PATTERN
from .utils import console, print_error


def validate_project_name(name: str) -> bool:
    """Return ``True`` if *name* is usable as a project directory name."""
    return bool(PROJECT_NAME_PATTERN.fullmatch(name))


class Prompter:
    """Asks questions on the shared console."""

    def ask_project_name(self) -> str:
        """Ask for a project name until a valid one is entered."""
        while True:
            name = Prompt.ask("What is your project name?", console=console)
            if validate_project_name(name):
                return name
            print_error(INVALID_NAME_MESSAGE)

    def select(self, message: str, choices: dict[str, str]) -> str:
        """Single-select from *choices* (``value -> label``); returns the value."""
        for value, label in choices.items():
            console.print(f"  [cyan]{value}[/cyan]  {label}")
        values = list(choices)
        return Prompt.ask(message, choices=values, default=values[0], console=console)

    def confirm(self, message: str, default: bool = False) -> bool:
        return Confirm.ask(message, default=default, console=console)
