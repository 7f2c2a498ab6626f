"""
Tool Bridge.

HTTP bridge exposing a host runtime's tools, system prompt and command
interpreters to a second runtime during a staged migration.
"""

from toolbridge.commands import process_at_command, process_shell_command, process_slash_command
from toolbridge.config import DEFAULT_BRIDGE_CONFIG, BridgeConfig, get_bridge_config
from toolbridge.exceptions import AlreadyListeningError, BridgeError, NotInitializedError
from toolbridge.integration import (
    HostBridge,
    get_bridge_server,
    get_current_bridge_config,
    initialize_bridge_for_host,
    is_bridge_server_running,
    shutdown_bridge_server,
)
from toolbridge.lifecycle import BridgeLifecycle, LifecycleState
from toolbridge.prompts import SystemPromptBuilder
from toolbridge.server import BridgeServer

__version__ = "0.1.0"

__all__ = [
    "AlreadyListeningError",
    "BridgeConfig",
    "BridgeError",
    "BridgeLifecycle",
    "BridgeServer",
    "DEFAULT_BRIDGE_CONFIG",
    "HostBridge",
    "LifecycleState",
    "NotInitializedError",
    "SystemPromptBuilder",
    "get_bridge_config",
    "get_bridge_server",
    "get_current_bridge_config",
    "initialize_bridge_for_host",
    "is_bridge_server_running",
    "process_at_command",
    "process_shell_command",
    "process_slash_command",
    "shutdown_bridge_server",
]
