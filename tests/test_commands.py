"""Tests for the command table and supported-methods mask."""

from functools import reduce

import pytest

from telldus_api.commands import (
    SUPPORTED_METHODS,
    Command,
    command_table,
    resolve_command,
    supported_methods,
)
from telldus_api.exceptions import InvalidCommandError


class TestCommandTable:
    """Test the command flag values."""

    def test_known_values(self):
        assert command_table() == {
            "on": 1,
            "off": 2,
            "bell": 4,
            "toggle": 8,
            "dim": 16,
            "learn": 32,
            "execute": 64,
            "up": 128,
            "down": 256,
            "stop": 512,
        }

    def test_values_are_unique_powers_of_two(self):
        values = list(command_table().values())
        assert len(set(values)) == len(values)
        for value in values:
            assert value > 0
            assert value & (value - 1) == 0


class TestSupportedMethods:
    """Test the derived supported-methods mask."""

    def test_mask_is_or_of_all_commands(self):
        expected = reduce(lambda a, b: a | b, command_table().values())
        assert supported_methods() == expected

    def test_mask_value(self):
        assert SUPPORTED_METHODS == 1023

    def test_mask_follows_command_table(self, monkeypatch):
        table = dict(command_table(), extra=1024)
        monkeypatch.setattr("telldus_api.commands.command_table", lambda: table)
        assert supported_methods() == 2047


class TestResolveCommand:
    """Test command name validation."""

    def test_accepts_name(self):
        assert resolve_command("dim") == "dim"

    def test_accepts_enum_member(self):
        assert resolve_command(Command.TOGGLE) == "toggle"

    @pytest.mark.parametrize("command", ["DIM", "blink", "", "toString", None, 16])
    def test_rejects_unknown(self, command):
        with pytest.raises(InvalidCommandError, match="Invalid command supplied"):
            resolve_command(command)

    def test_rejects_combined_flags(self):
        with pytest.raises(InvalidCommandError):
            resolve_command(Command.ON | Command.OFF)

    def test_invalid_command_is_value_error(self):
        with pytest.raises(ValueError):
            resolve_command("blink")
