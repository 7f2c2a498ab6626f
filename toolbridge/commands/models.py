"""
Result types produced by the command interpreters.

Each interpreter outcome has its own model so callers can match on the class.
Field aliases carry the camelCase names used on the wire.
"""

from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class CommandModel(BaseModel):
    """Base model for interpreter results."""

    model_config = ConfigDict(populate_by_name=True)

    def to_payload(self) -> dict:
        """Serialize to the wire shape (aliases applied, unset optionals dropped)."""
        return self.model_dump(by_alias=True, exclude_none=True)


# Structured (slash) commands

class SlashCommandPayload(CommandModel):
    message: str
    sub_command: Optional[str] = Field(None, alias="subCommand")
    unknown: bool = False


class SlashCommandResult(CommandModel):
    command: str
    args: List[str] = Field(default_factory=list)
    result: SlashCommandPayload


# Path references (at commands)

class DirectoryEntry(CommandModel):
    name: str
    is_directory: bool = Field(..., alias="isDirectory")


class DirectoryListing(CommandModel):
    type: Literal["directory"] = "directory"
    path: str
    files: List[DirectoryEntry] = Field(default_factory=list)


class FileContents(CommandModel):
    type: Literal["file"] = "file"
    path: str
    extension: str
    content: str
    size: int


class PathError(CommandModel):
    type: Literal["error"] = "error"
    path: str
    error: str


# Shell passthrough

class ShellCommandResult(CommandModel):
    command: str
    stdout: str = ""
    stderr: str = ""
    error: Optional[str] = None
    exit_code: Optional[int] = Field(None, alias="exitCode")
    success: bool


AtCommandResult = Union[DirectoryListing, FileContents, PathError]

CommandResult = Union[SlashCommandResult, DirectoryListing, FileContents, PathError, ShellCommandResult]
