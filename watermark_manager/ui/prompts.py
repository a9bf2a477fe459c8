"""
Terminal Prompts
================
Thin wrapper over rich.prompt for the four kinds of question the
session asks: yes/no, free text, pick one from a list, and a number.

The controller only talks to a Prompter, so tests can swap in a
scripted object with the same four methods.
"""

from typing import Optional, Sequence

from rich.console import Console
from rich.prompt import Confirm, FloatPrompt, IntPrompt, Prompt
from rich.text import Text


class Prompter:
    """Interactive questions answered on the terminal."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(highlight=False)

    def confirm(self, message: str, default: bool = True) -> bool:
        """Ask a yes/no question."""
        return Confirm.ask(Text(message), console=self.console, default=default)

    def text(self, message: str, default: Optional[str] = None) -> str:
        """Ask for free text. An empty answer returns ``default`` when given."""
        if default is None:
            return Prompt.ask(Text(message), console=self.console)
        return Prompt.ask(Text(message), console=self.console, default=default)

    def choose(self, message: str, choices: Sequence[str]) -> str:
        """
        Show ``choices`` as a numbered list and return the picked label.

        Args:
            message: Question shown above the list.
            choices: Labels to choose from, in display order.

        Returns:
            The chosen label, exactly as given in ``choices``.
        """
        self.console.print(message, markup=False)
        for number, label in enumerate(choices, start=1):
            self.console.print(f"  {number}) {label}", markup=False)

        picked = IntPrompt.ask(
            Text("Choose"),
            console=self.console,
            choices=[str(n) for n in range(1, len(choices) + 1)],
            show_choices=False,
            default=1,
        )
        return choices[picked - 1]

    def number(self, message: str) -> float:
        """Ask for a number. Non-numeric answers are asked again."""
        return FloatPrompt.ask(Text(message), console=self.console)
