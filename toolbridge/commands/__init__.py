"""
Command interpreters for the bridge.

The caller names the interpreter explicitly through the command type:
``slash`` (structured ``/`` commands), ``at`` (``@`` path references) and
``shell`` (``!`` passthrough).
"""

from typing import Awaitable, Callable, Dict

from toolbridge.commands.at import process_at_command
from toolbridge.commands.models import (
    CommandResult,
    DirectoryEntry,
    DirectoryListing,
    FileContents,
    PathError,
    ShellCommandResult,
    SlashCommandPayload,
    SlashCommandResult,
)
from toolbridge.commands.shell import process_shell_command
from toolbridge.commands.slash import (
    get_slash_command_names,
    process_slash_command,
    register_slash_command,
)
from toolbridge.exceptions import UnknownCommandTypeError

COMMAND_PROCESSORS: Dict[str, Callable[[str], Awaitable[CommandResult]]] = {
    "slash": process_slash_command,
    "at": process_at_command,
    "shell": process_shell_command,
}


async def process_command(command: str, command_type: str) -> CommandResult:
    """
    Dispatch a command to the interpreter registered for its type.

    Raises:
        UnknownCommandTypeError: If no interpreter handles ``command_type``
    """
    processor = COMMAND_PROCESSORS.get(command_type)
    if processor is None:
        raise UnknownCommandTypeError(command_type)
    return await processor(command)


__all__ = [
    "COMMAND_PROCESSORS",
    "CommandResult",
    "DirectoryEntry",
    "DirectoryListing",
    "FileContents",
    "PathError",
    "ShellCommandResult",
    "SlashCommandPayload",
    "SlashCommandResult",
    "get_slash_command_names",
    "process_at_command",
    "process_command",
    "process_shell_command",
    "process_slash_command",
    "register_slash_command",
]
