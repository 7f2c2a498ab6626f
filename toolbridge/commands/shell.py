"""
Shell passthrough command interpreter.

Runs ``!command`` through the system shell with the host's environment and
working directory. There is no timeout: a command that never exits holds its
request open.
"""

import asyncio
import logging

from toolbridge.commands.models import ShellCommandResult

logger = logging.getLogger("toolbridge.commands")


def _decode(data: bytes) -> str:
    return data.decode("utf-8", errors="replace") if data else ""


async def process_shell_command(command: str) -> ShellCommandResult:
    """
    Process a shell command.

    Args:
        command: Raw command text, with or without the leading ``!``

    Returns:
        ShellCommandResult with captured output; ``success`` is False on a
        nonzero exit or when the process could not be spawned
    """
    clean_command = command[1:] if command.startswith("!") else command

    logger.info(f"Executing shell command: {clean_command}")
    try:
        process = await asyncio.create_subprocess_shell(
            clean_command,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
        stdout, stderr = await process.communicate()
    except (OSError, ValueError) as e:
        # ValueError covers arguments the OS cannot accept, such as embedded NUL bytes
        logger.warning(f"Failed to spawn shell command {clean_command!r}: {e}")
        return ShellCommandResult(
            command=clean_command,
            error=str(e),
            success=False,
        )

    if process.returncode != 0:
        return ShellCommandResult(
            command=clean_command,
            stdout=_decode(stdout),
            stderr=_decode(stderr),
            error=f"Command failed with exit code {process.returncode}: {clean_command}",
            exit_code=process.returncode,
            success=False,
        )

    return ShellCommandResult(
        command=clean_command,
        stdout=_decode(stdout),
        stderr=_decode(stderr),
        success=True,
    )
