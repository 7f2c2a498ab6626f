"""
Tools module for the bridge.

Provides the tool registry and the built-in tool implementations.
"""

from toolbridge.tools.base import BridgeTool, ToolCategory
from toolbridge.tools.registry import ToolRegistry, get_tool_registry, reset_registry

__all__ = [
    "BridgeTool",
    "ToolCategory",
    "ToolRegistry",
    "get_tool_registry",
    "reset_registry",
]
