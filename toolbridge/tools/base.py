"""
Base tool class for tools exposed through the bridge.

Tools executed by the caller runtime should inherit from this class so the
bridge can invoke them with a plain argument mapping.
"""

from abc import ABC
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from langchain_core.tools import BaseTool


class ToolCategory(str, Enum):
    """Categories for organizing tools."""
    FILESYSTEM = "filesystem"   # Reading and listing files
    SYSTEM = "system"           # Process and host operations


class BridgeTool(BaseTool, ABC):
    """
    Base class for all bridge tools.

    Subclasses define ``name``, ``description`` and ``args_schema`` and
    implement ``_run``. The bridge calls :meth:`execute` with the ``args``
    mapping from the request body.

    Example:
        ```python
        class EchoTool(BridgeTool):
            name: str = "echo"
            description: str = "Echoes its input"
            args_schema: type[BaseModel] = EchoInput

            def _run(self, text: str) -> dict:
                return {"text": text}
        ```
    """

    category: ToolCategory = ToolCategory.SYSTEM

    async def execute(self, args: Optional[Mapping[str, Any]] = None) -> Any:
        """
        Execute the tool with arguments from a bridge request.

        Arguments are validated against ``args_schema``; validation errors and
        failures inside the tool propagate to the caller.

        Args:
            args: Tool arguments keyed by parameter name

        Returns:
            Whatever the tool produces, unchanged
        """
        return await self.ainvoke(dict(args or {}))

    @classmethod
    def get_metadata(cls) -> Dict[str, Any]:
        """
        Get tool metadata for registration.

        Returns:
            Dictionary with tool metadata
        """
        fields = cls.model_fields
        return {
            "name": fields["name"].default if "name" in fields else cls.__name__,
            "description": fields["description"].default if "description" in fields else "",
            "category": fields["category"].default.value,
            "module": cls.__module__,
            "class": cls.__name__,
        }
