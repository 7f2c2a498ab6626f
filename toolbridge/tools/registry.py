"""
Tool registry for the bridge.

Maps tool names to tool instances; this is the tool lookup the gateway
consults for ``/api/tools/execute``.
"""

import logging
from typing import Dict, List, Optional, Type

from toolbridge.tools.base import BridgeTool
from toolbridge.tools.file_ops import ListDirectoryTool, ReadFileTool

logger = logging.getLogger("toolbridge.tools")

BUILTIN_TOOLS: List[Type[BridgeTool]] = [ListDirectoryTool, ReadFileTool]


class ToolRegistry:
    """
    Named tools the gateway can execute on behalf of the second runtime.

    One instance is kept per tool class; ``/api/tools/execute`` calls
    ``execute`` on the instance returned by :meth:`get_tool`.
    """

    def __init__(self):
        self._tools: Dict[str, Type[BridgeTool]] = {}
        self._tool_instances: Dict[str, BridgeTool] = {}

    def register_tool(self, tool_class: Type[BridgeTool]) -> None:
        """
        Instantiate ``tool_class`` and expose it under its declared name.

        A tool registered under a name already in use replaces the earlier one.
        """
        name = tool_class.get_metadata()["name"]
        if name in self._tools:
            logger.warning(f"Replacing registered tool '{name}'")

        self._tools[name] = tool_class
        self._tool_instances[name] = tool_class()

    def register_tools(self, tool_classes: List[Type[BridgeTool]]) -> None:
        for tool_class in tool_classes:
            self.register_tool(tool_class)

    def get_tool(self, tool_name: str) -> Optional[BridgeTool]:
        """Tool instance for ``tool_name``, or None so the gateway can answer 404."""
        return self._tool_instances.get(tool_name)

    def get_tool_names(self) -> List[str]:
        """Get all registered tool names."""
        return list(self._tools.keys())

    def tool_exists(self, tool_name: str) -> bool:
        """Check if a tool is registered."""
        return tool_name in self._tools


# Singleton registry instance
_global_registry: Optional[ToolRegistry] = None


def get_tool_registry() -> ToolRegistry:
    """
    Get the singleton tool registry instance.

    Creates the registry with the built-in tools on first call.

    Returns:
        ToolRegistry instance
    """
    global _global_registry

    if _global_registry is None:
        _global_registry = ToolRegistry()
        _global_registry.register_tools(BUILTIN_TOOLS)

    return _global_registry


def reset_registry() -> ToolRegistry:
    """
    Discard the process-wide registry and build a fresh one with the built-in tools.
    """
    global _global_registry
    _global_registry = None
    return get_tool_registry()
