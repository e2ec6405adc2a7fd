import io
import warnings

import pytest

from linecmd import CommandRegistry, DuplicateNameError, Output, discover_commands
from linecmd.commands import Quit


class TestDiscovery():
    def test_registers_named_commands(self):
        reg = CommandRegistry()

        names = discover_commands(reg, 'fixture_commands')

        assert sorted(names) == ['bye', 'hello']
        assert reg.names() == ['bye', 'hello']
        assert 'hi' in reg

    def test_accepts_module_object(self):
        import fixture_commands

        reg = CommandRegistry()
        discover_commands(reg, fixture_commands)
        assert 'hello' in reg

    def test_discovered_commands_run(self):
        reg = CommandRegistry()
        discover_commands(reg, 'fixture_commands')
        buf = io.StringIO()

        reg.lookup('hi').execute(Output(buf), ['Ada'])

        assert buf.getvalue() == "Hello, Ada!\n"

    def test_imported_classes_are_skipped(self):
        """ Quit is imported by one of the modules but only defined in linecmd. """
        reg = CommandRegistry()
        reg.register_command(Quit())

        with warnings.catch_warnings():
            warnings.simplefilter('error')
            discover_commands(reg, 'fixture_commands')

        assert len(reg) == 3

    def test_name_clash_propagates(self):
        reg = CommandRegistry()
        reg.register_fn('hello', lambda output, args: None)

        with pytest.raises(DuplicateNameError):
            discover_commands(reg, 'fixture_commands')

    def test_broken_module_is_skipped(self):
        reg = CommandRegistry()

        with pytest.warns(UserWarning, match='fixture_broken_commands.bad'):
            names = discover_commands(reg, 'fixture_broken_commands')

        assert names == ['ping']

    def test_plain_module_rejected(self):
        with pytest.raises(ValueError):
            discover_commands(CommandRegistry(), 'linecmd.tokenizer')
