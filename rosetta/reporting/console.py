"""Numbered option lists and the selection prompt."""

from __future__ import annotations

from collections.abc import Callable, Sequence

import typer
from rich.console import Console
from rich.text import Text

from rosetta.errors import InvalidSelection, NoMatches

REJECTION_MESSAGE = "You cannot choose a number which is not in the list"


class OptionSelector:
    """Prints options and reads a selection index until it is valid.

    ``prompt`` defaults to typer's integer prompt; tests swap in a stub.
    """

    def __init__(
        self,
        console: Console | None = None,
        prompt: Callable[[], int] | None = None,
    ) -> None:
        self._console = console if console is not None else Console(highlight=False, soft_wrap=True)
        self._prompt = prompt if prompt is not None else _typer_prompt

    def print_options(self, matches: Sequence[str]) -> None:
        if not matches:
            self._console.print("Try again!", markup=False)
            raise NoMatches("No task matched the search term")
        for i, name in enumerate(matches):
            self._console.print(Text.assemble((f"{i})", "bold cyan"), " ", name))

    def prompt_selection(self) -> int:
        return self._prompt()

    def choose(self, matches: Sequence[str]) -> str:
        """Prompt until the index is valid and return the chosen entry."""
        while True:
            index = self.prompt_selection()
            try:
                return matches[check_index(index, matches)]
            except InvalidSelection:
                self._console.print(REJECTION_MESSAGE, markup=False)


def _typer_prompt() -> int:
    return typer.prompt("Enter selection number", type=int)


def validate_index(index: int, options: Sequence[str]) -> bool:
    """True iff ``abs(index)`` is a position in ``options``.

    Negative indices inside that range are accepted and count from the end.
    """
    return abs(index) <= len(options) - 1


def check_index(index: int, options: Sequence[str]) -> int:
    if not validate_index(index, options):
        raise InvalidSelection(f"{index} is not between 0 and {len(options) - 1}")
    return index
