"""
Path reference (at) command interpreter.

``@path`` resolves to a one-level directory listing or the full text of a
file. Resolution failures come back as a PathError result, not an exception.
"""

import asyncio
import logging
import os

from toolbridge.commands.models import (
    AtCommandResult,
    DirectoryEntry,
    DirectoryListing,
    FileContents,
    PathError,
)

logger = logging.getLogger("toolbridge.commands")


def _list_directory(target_path: str) -> DirectoryListing:
    with os.scandir(target_path) as entries:
        files = [
            DirectoryEntry(name=entry.name, is_directory=entry.is_dir())
            for entry in entries
        ]
    files.sort(key=lambda entry: entry.name)
    return DirectoryListing(path=target_path, files=files)


def _read_file(target_path: str) -> FileContents:
    # Bytes first so line endings survive decoding untouched
    with open(target_path, "rb") as handle:
        data = handle.read()
    return FileContents(
        path=target_path,
        extension=os.path.splitext(target_path)[1].lower(),
        content=data.decode("utf-8", errors="replace"),
        size=len(data),
    )


def _resolve(target_path: str) -> AtCommandResult:
    if not target_path:
        return PathError(path=target_path, error="No file or directory path given")

    try:
        if os.path.isdir(target_path):
            return _list_directory(target_path)
        if os.path.isfile(target_path):
            return _read_file(target_path)
        if os.path.lexists(target_path):
            return PathError(path=target_path, error=f"Not a regular file or directory: {target_path}")
        return PathError(path=target_path, error=f"File or directory not found: {target_path}")
    except FileNotFoundError:
        return PathError(path=target_path, error=f"File or directory not found: {target_path}")
    except PermissionError:
        return PathError(path=target_path, error=f"Permission denied: {target_path}")
    except OSError as e:
        logger.debug(f"Failed to resolve {target_path!r}: {e}")
        return PathError(path=target_path, error=f"Unable to read {target_path}: {e.strerror or e}")


async def process_at_command(command: str) -> AtCommandResult:
    """
    Process an at command.

    Args:
        command: Raw command text, with or without the leading ``@``

    Returns:
        DirectoryListing, FileContents, or PathError when the path cannot be resolved
    """
    clean_command = command[1:] if command.startswith("@") else command
    target_path = clean_command.strip()

    return await asyncio.to_thread(_resolve, target_path)
