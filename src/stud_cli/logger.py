# SPDX-FileCopyrightText: 2025 Sequent Tech Inc <legal@sequentech.io>
#
# SPDX-License-Identifier: MIT

"""User-facing console output."""

from typing import List, Optional, Sequence, Union
import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

Message = Union[str, Sequence[str]]


class Logger:
    """
    Verbosity-aware wrapper around a rich Console.

    Every output method takes the minimum verbosity at which the message is
    shown, followed by a single line or a list of lines.
    """

    VERBOSITY_NORMAL = 0
    VERBOSITY_VERBOSE = 1
    VERBOSITY_VERY_VERBOSE = 2
    VERBOSITY_DEBUG = 3

    def __init__(self, console: Optional[Console] = None, verbosity: int = VERBOSITY_NORMAL):
        self.console = console or Console()
        self.verbosity = verbosity

    def _lines(self, message: Message) -> List[str]:
        if isinstance(message, str):
            return message.split("\n")
        return list(message)

    def _print(self, verbosity: int, message: Message, style: Optional[str] = None, prefix: str = "") -> None:
        if verbosity > self.verbosity:
            return
        for i, line in enumerate(self._lines(message)):
            text = escape(line)
            if i == 0 and prefix:
                text = f"{prefix}{text}"
            if style:
                text = f"[{style}]{text}[/{style}]"
            self.console.print(text)

    def text(self, verbosity: int, message: Message) -> None:
        self._print(verbosity, message)

    def note(self, verbosity: int, message: Message) -> None:
        self._print(verbosity, message, style="blue", prefix="! ")

    def success(self, verbosity: int, message: Message) -> None:
        self._print(verbosity, message, style="green", prefix="✓ ")

    def warning(self, verbosity: int, message: Message) -> None:
        self._print(verbosity, message, style="yellow", prefix="Warning: ")

    def error(self, verbosity: int, message: Message) -> None:
        self._print(verbosity, message, style="red", prefix="Error: ")

    def section(self, verbosity: int, message: str) -> None:
        if verbosity > self.verbosity:
            return
        self.console.print()
        self.console.print(f"[bold blue]{escape(message)}[/bold blue]")

    def table(self, verbosity: int, headers: Sequence[str], rows: Sequence[Sequence[str]], title: Optional[str] = None) -> None:
        if verbosity > self.verbosity:
            return
        table = Table(title=title)
        for header in headers:
            table.add_column(header)
        for row in rows:
            table.add_row(*[escape(str(cell)) for cell in row])
        self.console.print(table)

    def ask(self, prompt: str, default: Optional[str] = None) -> Optional[str]:
        """
        Ask the user for a value.

        Returns the answer, the default for an empty answer, or None when
        input is closed.
        """
        try:
            answer = click.prompt(prompt, default="", show_default=False)
        except click.exceptions.Abort:
            return None
        if answer == "" and default is not None:
            return default
        return answer
