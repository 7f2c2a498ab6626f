"""
File tools exposed through the bridge.

Read-only operations on the host filesystem: listing a directory and reading
a text file.
"""

import os
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from toolbridge.tools.base import BridgeTool, ToolCategory


class ListDirectoryInput(BaseModel):
    """Input schema for listing a directory."""
    path: str = Field(".", description="Directory path to list (default: current directory)")
    include_hidden: bool = Field(False, description="Include hidden files (starting with '.')")


class ReadFileInput(BaseModel):
    """Input schema for reading a file."""
    path: str = Field(..., description="Path to the file to read")
    encoding: str = Field("utf-8", description="File encoding (default: utf-8)")
    max_lines: Optional[int] = Field(None, ge=1, description="Maximum lines to read (optional)")


class ListDirectoryTool(BridgeTool):
    """
    Directory listing tool.

    Returns the immediate entries of a directory, directories first.
    """

    name: str = "ls"
    description: str = "Lists the files and subdirectories directly inside a directory."
    category: ToolCategory = ToolCategory.FILESYSTEM
    args_schema: type[BaseModel] = ListDirectoryInput

    def _run(self, path: str = ".", include_hidden: bool = False) -> Dict[str, Any]:
        entries = []
        with os.scandir(path) as it:
            for entry in it:
                if not include_hidden and entry.name.startswith("."):
                    continue
                is_directory = entry.is_dir()
                entries.append({
                    "name": entry.name,
                    "isDirectory": is_directory,
                    "size": 0 if is_directory else entry.stat().st_size,
                })

        entries.sort(key=lambda item: (not item["isDirectory"], item["name"]))
        return {"path": path, "entries": entries}


class ReadFileTool(BridgeTool):
    """
    File reading tool.

    Reads a text file, optionally limited to its first ``max_lines`` lines.
    """

    name: str = "read_file"
    description: str = "Reads the contents of a text file."
    category: ToolCategory = ToolCategory.FILESYSTEM
    args_schema: type[BaseModel] = ReadFileInput

    def _run(self, path: str, encoding: str = "utf-8", max_lines: Optional[int] = None) -> Dict[str, Any]:
        with open(path, "r", encoding=encoding, errors="replace", newline="") as handle:
            if max_lines is None:
                content = handle.read()
                truncated = False
            else:
                lines = []
                truncated = False
                for line in handle:
                    if len(lines) == max_lines:
                        truncated = True
                        break
                    lines.append(line)
                content = "".join(lines)

        return {
            "path": path,
            "content": content,
            "size": os.path.getsize(path),
            "truncated": truncated,
        }
