"""
Host integration for the bridge.

The host calls :func:`initialize_bridge_for_host` at startup and
:func:`shutdown_bridge_server` at shutdown. Initialization also hooks
shutdown into SIGINT, SIGTERM and interpreter exit so the listening socket
never outlives the host.
"""

import atexit
import logging
import signal
import sys
import threading
from typing import Any, Dict, Mapping, Optional

from toolbridge.api.dependencies import Environment, PromptBuilder, ToolLookup
from toolbridge.config import BridgeConfig, get_bridge_config
from toolbridge.lifecycle import BridgeLifecycle
from toolbridge.server import BridgeServer

logger = logging.getLogger("toolbridge.integration")

TERMINATION_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class HostBridge:
    """
    Integration facade between a host process and the bridge lifecycle.

    Args:
        lifecycle: Lifecycle controller to drive (a new one by default)
        install_signal_handlers: Hook ``shutdown`` into termination signals and
            interpreter exit on initialization
    """

    def __init__(
        self,
        lifecycle: Optional[BridgeLifecycle] = None,
        install_signal_handlers: bool = True
    ):
        self.lifecycle = lifecycle or BridgeLifecycle()
        self.install_signal_handlers = install_signal_handlers
        self._server: Optional[BridgeServer] = None
        self._previous_handlers: Dict[int, Any] = {}
        self._atexit_registered = False

    @property
    def server(self) -> Optional[BridgeServer]:
        return self._server

    def is_running(self) -> bool:
        """Check whether the bridge server is listening."""
        return self._server is not None and self._server.is_listening

    def initialize_for_host(
        self,
        config: Optional[Mapping[str, Any]],
        tool_registry: ToolLookup,
        prompt_builder: Optional[PromptBuilder] = None,
        environment: Optional[Environment] = None
    ) -> Optional[BridgeServer]:
        """
        Initialize the bridge server for the host.

        Args:
            config: Host configuration; the ``bridge`` section is used
            tool_registry: The host's tool registry
            prompt_builder: Prompt builder (defaults to SystemPromptBuilder)
            environment: Ambient environment (defaults to the process environment)

        Returns:
            The bridge server, or None if the bridge is disabled

        Raises:
            BridgeError: If the server could not be started
        """
        bridge_config = get_bridge_config(config)
        self._server = None

        if not bridge_config.enabled:
            logger.info("Bridge server disabled")
            self.lifecycle.initialize(bridge_config, tool_registry)
            return None

        logger.info(f"Bridge server enabled on port {bridge_config.port}")

        if self.install_signal_handlers:
            self._register_shutdown_hooks()

        self._server = self.lifecycle.initialize(
            bridge_config,
            tool_registry,
            prompt_builder=prompt_builder,
            environment=environment,
        )
        logger.info("Bridge server initialized successfully")
        return self._server

    def start(self) -> None:
        """Start a bridge server initialized with ``autoStart`` off."""
        self.lifecycle.start()

    def shutdown(self) -> None:
        """
        Shut down the bridge server.

        Idempotent and safe to call from signal handlers or other threads.
        """
        self.lifecycle.stop()
        self._server = None

    def _register_shutdown_hooks(self) -> None:
        if not self._atexit_registered:
            atexit.register(self.shutdown)
            self._atexit_registered = True

        if threading.current_thread() is not threading.main_thread():
            logger.warning("Not on the main thread; bridge shutdown will not be tied to signals")
            return

        for signum in TERMINATION_SIGNALS:
            if signum in self._previous_handlers:
                continue
            self._previous_handlers[signum] = signal.signal(signum, self._handle_signal)

    def _handle_signal(self, signum: int, frame) -> None:
        logger.info(f"Received {signal.Signals(signum).name}, shutting down bridge server")
        self.shutdown()

        previous = self._previous_handlers.get(signum)
        if callable(previous):
            previous(signum, frame)
        elif previous != signal.SIG_IGN:
            sys.exit(0)

    def restore_signal_handlers(self) -> None:
        """Reinstate the handlers that were active before initialization and drop the exit hook."""
        if self._atexit_registered:
            atexit.unregister(self.shutdown)
            self._atexit_registered = False

        if threading.current_thread() is not threading.main_thread():
            return
        for signum, previous in self._previous_handlers.items():
            signal.signal(signum, previous if previous is not None else signal.SIG_DFL)
        self._previous_handlers.clear()


# Process-wide facade used by the module-level helpers
_host_bridge: Optional[HostBridge] = None


def get_host_bridge() -> HostBridge:
    """Get the process-wide HostBridge, creating it on first use."""
    global _host_bridge

    if _host_bridge is None:
        _host_bridge = HostBridge()

    return _host_bridge


def initialize_bridge_for_host(
    config: Optional[Mapping[str, Any]],
    tool_registry: ToolLookup,
    prompt_builder: Optional[PromptBuilder] = None
) -> Optional[BridgeServer]:
    """Initialize the process-wide bridge server. See HostBridge.initialize_for_host."""
    return get_host_bridge().initialize_for_host(config, tool_registry, prompt_builder)


def shutdown_bridge_server() -> None:
    """Shut down the process-wide bridge server and forget the facade."""
    global _host_bridge

    if _host_bridge is None:
        return

    _host_bridge.shutdown()
    _host_bridge.restore_signal_handlers()
    _host_bridge = None


def get_bridge_server() -> Optional[BridgeServer]:
    """Get the process-wide bridge server, or None if not initialized."""
    return _host_bridge.server if _host_bridge is not None else None


def is_bridge_server_running() -> bool:
    """Check if the process-wide bridge server is listening."""
    return _host_bridge is not None and _host_bridge.is_running()


def get_current_bridge_config(config: Optional[Mapping[str, Any]]) -> BridgeConfig:
    """Get the bridge configuration the host would run with."""
    return get_bridge_config(config)
