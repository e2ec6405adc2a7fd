from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

@dataclass
class ShellConfig:
    # written (and flushed) before every read; "" disables it
    prompt: str = "(cmd) "

    # written once before the first prompt, when set
    intro: Optional[str] = None

    # one line per dispatch miss; {name} is the unrecognized command
    unknown_command: str = "No command {name}"

    # one line when a handler leaks an exception; {name}, {error}
    handler_error: str = "[error] {name}: {error}"

    def __post_init__(self) -> None:
        # a bad template must fail here, not in the middle of a session
        for field_name, sample in (("unknown_command", {"name": "x"}),
                                   ("handler_error", {"name": "x", "error": RuntimeError("e")})):
            template = getattr(self, field_name)
            try:
                template.format(**sample)
            except (IndexError, KeyError, ValueError, AttributeError) as e:
                raise ValueError(f"Invalid {field_name} template {template!r}: "
                                 f"only {', '.join('{' + k + '}' for k in sample)} may be used") from e

    def prompt_prefix(self) -> str:
        return self.prompt or ""

    def unknown_message(self, name: str) -> str:
        return self.unknown_command.format(name=name)

    def error_message(self, name: str, error: BaseException) -> str:
        return self.handler_error.format(name=name, error=error)
