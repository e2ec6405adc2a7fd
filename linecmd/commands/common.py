from __future__ import annotations
from typing import Callable, List, Optional, Sequence, Tuple

from tabulate import tabulate

from ..registry import Command, ControlSignal

DEFAULT_HELP = "Type a command followed by its arguments. 'quit' leaves the shell."

_HEADERS = ["command", "aliases", "description"]


def _help_text(rows: Sequence[Tuple[str, str, str]]) -> str:
    if not rows:
        return "No commands registered."
    return "Commands:\n" + tabulate(rows, headers=_HEADERS, tablefmt="simple")


class Help(Command):
    """
    Prints a help listing and keeps the loop going.

    With `describe` (a zero-argument callable returning (name, aliases, help)
    rows, e.g. CommandRegistry.describe) the listing is rebuilt on every call,
    so commands registered later still show up. Otherwise `text` is printed.
    """

    name = 'help'
    aliases = ['?']
    help = 'Show this help'

    def __init__(self, text: Optional[str] = None,
                 describe: Optional[Callable[[], Sequence[Tuple[str, str, str]]]] = None) -> None:
        self.text = text
        self.describe = describe

    def execute(self, output, args: List[str]) -> ControlSignal:
        if self.describe is not None:
            output.writeln(_help_text(self.describe()))
        else:
            output.writeln(self.text or DEFAULT_HELP)
        return ControlSignal.CONTINUE


class Quit(Command):
    name = 'quit'
    aliases = ['exit']
    help = 'Exit the shell'

    def __init__(self, farewell: Optional[str] = None) -> None:
        self.farewell = farewell

    def execute(self, output, args: List[str]) -> ControlSignal:
        if self.farewell:
            output.writeln(self.farewell)
        return ControlSignal.STOP
