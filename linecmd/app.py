# linecmd/app.py
"""
Demo host: a terminal shell with help, touch, greet and quit.

Settings come from the environment, or from a .env file in the working
directory (existing environment variables win):

    LINECMD_PROMPT     prompt shown before each line      (default "(cmd) ")
    LINECMD_INTRO      banner printed once at start       (default: none)
    LINECMD_FAREWELL   line printed by quit/exit          (default: none)
    LINECMD_LOG_LEVEL  logging level for linecmd.*        (default WARNING)
"""

from __future__ import annotations
import logging
import os
import sys
from pathlib import Path
from typing import List, Mapping, Optional

from dotenv import load_dotenv

from .commands import Touch
from .config import ShellConfig
from .registry import ControlSignal
from .shell import Shell

ENV_PREFIX = "LINECMD_"


def config_from_env(environ: Mapping[str, str]) -> ShellConfig:
    config = ShellConfig()
    if f"{ENV_PREFIX}PROMPT" in environ:
        config.prompt = environ[f"{ENV_PREFIX}PROMPT"]
    config.intro = environ.get(f"{ENV_PREFIX}INTRO") or None
    return config


def greet(output, args: List[str]) -> ControlSignal:
    """Say hello. Usage: greet [NAME...]"""
    output.writeln(f"Hello, {' '.join(args)}!" if args else "Hello!")
    return ControlSignal.CONTINUE


def build_shell(stdin=None, stdout=None, environ: Optional[Mapping[str, str]] = None) -> Shell:
    environ = os.environ if environ is None else environ
    shell = Shell(stdin, stdout, config=config_from_env(environ))
    shell.add_default_handlers(farewell=environ.get(f"{ENV_PREFIX}FAREWELL") or None)
    shell.add_command(Touch())
    shell.add_handler_fn("greet", greet)
    return shell


def main() -> int:
    load_dotenv(Path.cwd() / ".env", override=False)
    level = getattr(logging, os.getenv(f"{ENV_PREFIX}LOG_LEVEL", "WARNING").upper(), None)
    logging.basicConfig(
        level=level if isinstance(level, int) else logging.WARNING,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    shell = build_shell()
    try:
        shell.run()
    except KeyboardInterrupt:
        print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
