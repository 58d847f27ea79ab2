"""
Terminal helpers: TTY detection and single choice prompts.
"""
import sys
from typing import List, Sequence

import click

from ..errors import PromptInterruptedError


class TerminalChecker:
    """
    Tells whether the process is attached to an interactive terminal.
    """

    def is_terminal(self) -> bool:
        return sys.stdin.isatty() and sys.stdout.isatty()


class PromptSelect:
    """
    Asks the user to pick one entry from a numbered list of options.
    """

    def ask(self, prompt: str, options: Sequence[str]) -> str:
        """
        Shows *options* and returns the selected one.

        :param prompt: Question shown above the options.
        :param options: Ordered options to choose from.
        :return: The chosen option.
        :raises PromptInterruptedError: If the user aborts with Ctrl+C or EOF.
        :raises ValueError: If there is nothing to choose from.
        """
        choices: List[str] = list(options)
        if not choices:
            raise ValueError(f"no options available for: {prompt}")

        click.echo(f"? {prompt}")
        for index, option in enumerate(choices, start=1):
            click.echo(f"  {index}) {option}")

        try:
            selected = click.prompt(
                "Choose",
                type=click.IntRange(1, len(choices)),
                default=1,
            )
        except (click.Abort, KeyboardInterrupt, EOFError):
            raise PromptInterruptedError()

        return choices[selected - 1]
