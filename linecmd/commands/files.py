from __future__ import annotations
from pathlib import Path
from typing import List, Optional, Union

from ..registry import Command, ControlSignal


class Touch(Command):
    """
    Create an empty file, like the shell's touch(1).

    Relative names resolve against `base_dir` when one is given, otherwise
    against the process working directory. An existing file is left as is.
    Filesystem errors are reported on the output; the loop always continues.
    """

    name = 'touch'
    help = 'Create an empty file. Usage: touch FILE'

    def __init__(self, base_dir: Optional[Union[str, Path]] = None) -> None:
        self.base_dir = Path(base_dir) if base_dir is not None else None

    def _resolve(self, filename: str) -> Path:
        path = Path(filename)
        if self.base_dir is not None and not path.is_absolute():
            path = self.base_dir / path
        return path

    def execute(self, output, args: List[str]) -> ControlSignal:
        if not args:
            output.writeln("Need to specify a filename")
            return ControlSignal.CONTINUE

        filename = args[0]
        try:
            self._resolve(filename).touch(exist_ok=True)
        except (OSError, ValueError) as e:
            output.writeln(f"Could not create file: {filename} ({getattr(e, 'strerror', None) or e})")
            return ControlSignal.CONTINUE

        output.writeln(f"Created file: {filename}")
        return ControlSignal.CONTINUE
