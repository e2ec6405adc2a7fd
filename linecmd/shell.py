from __future__ import annotations
import logging
import sys
from typing import Callable, List, Optional, Sequence

from .commands.common import Help, Quit
from .config import ShellConfig
from .errors import StreamError
from .registry import Command, CommandHandler, CommandRegistry, CommandSpec, ControlSignal
from .streams import Output, as_line_source, read_line
from .tokenizer import tokenize

logger = logging.getLogger(__name__)


class Shell:
    """
    Line-oriented command interpreter.

    Reads one line at a time from `stdin` (any object with readline(), or an
    iterable of lines), dispatches the first token to the registered handler
    and hands it the remaining tokens together with the shared Output wrapping
    `stdout`. Runs until a handler returns ControlSignal.STOP or the input is
    exhausted.
    """

    def __init__(self, stdin=None, stdout=None,
                 registry: Optional[CommandRegistry] = None,
                 config: Optional[ShellConfig] = None) -> None:
        self.stdin = as_line_source(sys.stdin if stdin is None else stdin)
        self.output = Output(sys.stdout if stdout is None else stdout)
        self.registry = CommandRegistry() if registry is None else registry
        self.config = config or ShellConfig()
        self.dispatched = 0

    # ---- registration ----

    def add_handler(self, name: str, handler: CommandHandler,
                    aliases: Sequence[str] = (), help: Optional[str] = None) -> CommandSpec:
        return self.registry.register(name, handler, aliases=aliases, help=help)

    def add_handler_fn(self, name: str, fn: Callable[[Output, List[str]], Optional[ControlSignal]],
                       aliases: Sequence[str] = (), help: Optional[str] = None) -> CommandSpec:
        return self.registry.register_fn(name, fn, aliases=aliases, help=help)

    def add_command(self, command: Command) -> CommandSpec:
        return self.registry.register_command(command)

    def add_default_handlers(self, farewell: Optional[str] = None) -> None:
        """Register 'help' (listing this shell's commands) and 'quit'."""
        self.add_command(Help(describe=self.registry.describe))
        self.add_command(Quit(farewell=farewell))

    # ---- loop ----

    def dispatch(self, line: str) -> ControlSignal:
        name, args = tokenize(line)
        if name is None:
            return ControlSignal.CONTINUE

        handler = self.registry.lookup(name)
        if handler is None:
            logger.debug("no command %r", name)
            self.output.writeln(self.config.unknown_message(name))
            return ControlSignal.CONTINUE

        self.dispatched += 1
        logger.debug("dispatching %r args=%r", name, args)
        try:
            result = handler.execute(self.output, args)
        except StreamError:
            raise
        except Exception as e:
            # handlers are expected to report their own failures; this one leaked
            logger.exception("command %r raised", name)
            self.output.writeln(self.config.error_message(name, e))
            return ControlSignal.CONTINUE

        if result is None:
            return ControlSignal.CONTINUE
        if not isinstance(result, ControlSignal):
            err = TypeError(f"expected ControlSignal, got {type(result).__name__}")
            logger.error("command %r: %s", name, err)
            self.output.writeln(self.config.error_message(name, err))
            return ControlSignal.CONTINUE
        return result

    def run(self) -> None:
        """
        Block until a handler returns STOP or the input runs out.

        Both endings are successful. Only StreamError (the input or output
        stream itself failing) escapes.
        """
        if self.config.intro:
            self.output.writeln(self.config.intro)

        while True:
            prompt = self.config.prompt_prefix()
            if prompt:
                # flush so the user types on the same line as the prompt
                self.output.write(prompt)
                self.output.flush()

            line = read_line(self.stdin)
            if line is None:
                logger.debug("end of input after %d command(s)", self.dispatched)
                break

            if self.dispatch(line) is ControlSignal.STOP:
                logger.debug("stop requested after %d command(s)", self.dispatched)
                break

        self.output.flush()


def run(stdin=None, stdout=None,
        registry: Optional[CommandRegistry] = None,
        config: Optional[ShellConfig] = None) -> Shell:
    """Build a Shell (with help/quit when no registry is given) and run it."""
    shell = Shell(stdin, stdout, registry=registry, config=config)
    if registry is None:
        shell.add_default_handlers()
    shell.run()
    return shell
