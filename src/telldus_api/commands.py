"""Device commands understood by Telldus and the supported-methods mask."""

import enum
from functools import reduce
from typing import Dict, Union

from .exceptions import InvalidCommandError


class Command(enum.IntFlag):
    """Device actions, each a unique bit flag."""

    ON = 0x0001
    OFF = 0x0002
    BELL = 0x0004
    TOGGLE = 0x0008
    DIM = 0x0010
    LEARN = 0x0020
    EXECUTE = 0x0040
    UP = 0x0080
    DOWN = 0x0100
    STOP = 0x0200


def command_table() -> Dict[str, int]:
    """Map lowercase command names to their flag values."""
    return {member.name.lower(): member.value for member in Command}


def supported_methods() -> int:
    """
    Bitwise OR of every known command flag.

    Sent as ``supportedMethods`` so the server reports which of these
    commands each device accepts.
    """
    return reduce(lambda mask, flag: mask | flag, command_table().values(), 0)


def resolve_command(command: Union[str, Command]) -> str:
    """
    Return the wire name for a command.

    Args:
        command: Command name such as ``"dim"`` or a Command member

    Returns:
        Lowercase command name as sent in the ``method`` query parameter

    Raises:
        InvalidCommandError: If the command is not in the command table
    """
    if isinstance(command, Command):
        name = command.name.lower() if command.name else None
    elif isinstance(command, str):
        name = command
    else:
        name = None

    if name not in command_table():
        raise InvalidCommandError(command)
    return name


SUPPORTED_METHODS = supported_methods()
