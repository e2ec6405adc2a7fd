import io

import pytest

from linecmd import Shell, ShellConfig

from helpers import CountingSource


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
def make_shell(out):
    """Shell over a list of input lines, no prompt, writing to `out`."""
    def _make(lines, **config):
        config.setdefault('prompt', '')
        source = CountingSource(lines)
        return Shell(source, out, config=ShellConfig(**config))
    return _make
