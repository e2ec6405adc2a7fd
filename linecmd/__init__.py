"""
linecmd: build small line-oriented command interpreters.

Usage:
    from linecmd import Shell, ControlSignal
    from linecmd.commands import Touch

    shell = Shell()                      # stdin/stdout by default
    shell.add_default_handlers()         # help, quit
    shell.add_command(Touch())

    def greet(output, args):
        output.writeln(f"Hello, {' '.join(args) or 'there'}!")
        return ControlSignal.CONTINUE

    shell.add_handler_fn("greet", greet)
    shell.run()

Any object with readline() (or any iterable of lines) works as input and any
object with write() as output, so the same shell runs on a terminal, on
io.StringIO in tests, or on socket.makefile() streams.
"""

from .config import ShellConfig
from .errors import DuplicateNameError, InvalidNameError, LinecmdError, RegistrationError, StreamError
from .loader import discover_commands
from .registry import Command, CommandHandler, CommandRegistry, CommandSpec, ControlSignal, FunctionHandler
from .shell import Shell, run
from .streams import Output
from .tokenizer import tokenize

__version__ = "0.3.0"

__all__ = [
    "Command",
    "CommandHandler",
    "CommandRegistry",
    "CommandSpec",
    "ControlSignal",
    "DuplicateNameError",
    "FunctionHandler",
    "InvalidNameError",
    "LinecmdError",
    "Output",
    "RegistrationError",
    "Shell",
    "ShellConfig",
    "StreamError",
    "discover_commands",
    "run",
    "tokenize",
]
