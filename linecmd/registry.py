from __future__ import annotations
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Iterator, List, Optional, Protocol, Sequence, Tuple

from .errors import DuplicateNameError, InvalidNameError

logger = logging.getLogger(__name__)


class ControlSignal(Enum):
    CONTINUE = "continue"
    STOP = "stop"


class CommandHandler(Protocol):
    """
    Anything that can run a command.

    `output` is the shell's Output (write/writeln/flush); `args` holds the
    tokens after the command name and is only valid for the duration of the
    call. Returning ControlSignal.STOP is the only way to end the loop, so any
    teardown must be done before returning it.
    """

    def execute(self, output, args: List[str]) -> Optional[ControlSignal]: ...


class Command:
    """Convenience base for class-based handlers; subclasses set name/aliases/help."""

    name: str = ''
    aliases: List[str] = []
    help: str = ''

    def execute(self, output, args: List[str]) -> Optional[ControlSignal]:
        raise NotImplementedError('Command.execute must be implemented')


class FunctionHandler:
    """Adapts a plain callable fn(output, args) to the handler interface."""

    def __init__(self, fn: Callable[[Any, List[str]], Optional[ControlSignal]]) -> None:
        if not callable(fn):
            raise TypeError(f"handler function must be callable, got {type(fn).__name__}")
        self.fn = fn

    def execute(self, output, args: List[str]) -> Optional[ControlSignal]:
        return self.fn(output, args)

    def __repr__(self) -> str:
        return f"FunctionHandler({getattr(self.fn, '__qualname__', self.fn)!r})"


@dataclass
class CommandSpec:
    name: str
    handler: CommandHandler
    aliases: List[str] = field(default_factory=list)
    help: str = ''


def _check_name(name: str) -> None:
    if not isinstance(name, str) or name.split() != [name]:
        raise InvalidNameError(str(name))


def _summary(text: Optional[str]) -> str:
    if not text:
        return ''
    lines = text.strip().splitlines()
    return lines[0].strip() if lines else ''


class CommandRegistry:
    """
    Name -> handler mapping owned by a Shell.

    Names are case-sensitive. Registering a name (or alias) that is already
    taken raises DuplicateNameError and leaves the registry untouched; there is
    no silent overwrite, so built-ins such as 'quit' cannot be shadowed by
    accident. Use unregister() first to replace a command on purpose.
    """

    def __init__(self) -> None:
        self._by_name: Dict[str, CommandSpec] = {}
        self._lookup: Dict[str, CommandSpec] = {}

    def register(self, name: str, handler: CommandHandler,
                 aliases: Sequence[str] = (), help: Optional[str] = None) -> CommandSpec:
        if isinstance(handler, type):
            raise TypeError(f"handler for {name!r} is the class {handler.__name__}; "
                            f"register an instance, e.g. {handler.__name__}()")
        if not callable(getattr(handler, 'execute', None)):
            raise TypeError(f"handler for {name!r} has no execute() method; use register_fn() for functions")
        keys = [name, *aliases]
        for key in keys:
            _check_name(key)
        seen = set()
        for key in keys:
            if key in self._lookup or key in seen:
                raise DuplicateNameError(key)
            seen.add(key)

        if help is None:
            help = getattr(handler, 'help', '') or ''
        spec = CommandSpec(name=name, handler=handler, aliases=list(aliases), help=help)
        self._by_name[name] = spec
        for key in keys:
            self._lookup[key] = spec
        logger.debug("registered command %r (aliases=%r)", name, spec.aliases)
        return spec

    def register_fn(self, name: str, fn: Callable[[Any, List[str]], Optional[ControlSignal]],
                    aliases: Sequence[str] = (), help: Optional[str] = None) -> CommandSpec:
        if help is None:
            help = _summary(getattr(fn, '__doc__', None))
        return self.register(name, FunctionHandler(fn), aliases=aliases, help=help)

    def register_command(self, command: Command) -> CommandSpec:
        return self.register(command.name, command,
                             aliases=getattr(command, 'aliases', []),
                             help=getattr(command, 'help', None))

    def unregister(self, name: str) -> CommandSpec:
        spec = self._by_name.pop(name)
        for key in [spec.name, *spec.aliases]:
            self._lookup.pop(key, None)
        logger.debug("unregistered command %r", name)
        return spec

    def lookup(self, name: str) -> Optional[CommandHandler]:
        spec = self._lookup.get(name)
        return spec.handler if spec else None

    def get_spec(self, name: str) -> Optional[CommandSpec]:
        return self._lookup.get(name)

    def names(self) -> List[str]:
        return sorted(self._by_name.keys())

    def describe(self) -> List[Tuple[str, str, str]]:
        """Rows of (name, aliases, help) for every command, sorted by name."""
        return [(s.name, ', '.join(s.aliases), s.help)
                for s in sorted(self._by_name.values(), key=lambda s: s.name)]

    def __contains__(self, name: object) -> bool:
        return name in self._lookup

    def __len__(self) -> int:
        return len(self._by_name)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())
