"""
Lifecycle controller for the bridge server.

Owns the single BridgeServer instance and decides, from configuration, when
it exists and when it listens:

    UNINITIALIZED -> DISABLED
    UNINITIALIZED -> CONSTRUCTED -> STARTED -> STOPPED

After STOPPED a new ``initialize`` may construct a fresh instance.
"""

import logging
import threading
from enum import Enum
from typing import Optional

from toolbridge.api.dependencies import Environment, PromptBuilder, ToolLookup
from toolbridge.config import BridgeConfig
from toolbridge.exceptions import NotInitializedError
from toolbridge.server import BridgeServer

logger = logging.getLogger("toolbridge.lifecycle")


class LifecycleState(str, Enum):
    UNINITIALIZED = "uninitialized"
    DISABLED = "disabled"
    CONSTRUCTED = "constructed"
    STARTED = "started"
    STOPPED = "stopped"


class BridgeLifecycle:
    """
    Creates, starts and stops the bridge server.

    All transitions are serialized by a re-entrant lock: concurrent ``stop``
    calls from different threads run one after the other, and a ``stop`` from
    a signal handler that interrupts ``start`` on the same thread does not
    deadlock.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._server: Optional[BridgeServer] = None
        self._state = LifecycleState.UNINITIALIZED

    @property
    def state(self) -> LifecycleState:
        return self._state

    @property
    def server(self) -> Optional[BridgeServer]:
        return self._server

    def initialize(
        self,
        config: BridgeConfig,
        tool_registry: ToolLookup,
        prompt_builder: Optional[PromptBuilder] = None,
        environment: Optional[Environment] = None
    ) -> Optional[BridgeServer]:
        """
        Initialize the bridge server from configuration.

        Args:
            config: Resolved bridge configuration
            tool_registry: Tool lookup the gateway will use
            prompt_builder: Prompt builder the gateway will use
            environment: Ambient environment the gateway will read

        Returns:
            The bridge server, or None if the bridge is disabled
        """
        with self._lock:
            if self._server is not None:
                logger.info("Replacing existing bridge server")
                self.stop()

            if not config.enabled:
                self._state = LifecycleState.DISABLED
                return None

            self._server = BridgeServer(
                tool_registry,
                port=config.port,
                host=config.host,
                prompt_builder=prompt_builder,
                environment=environment,
            )
            self._state = LifecycleState.CONSTRUCTED

            if config.auto_start:
                self.start()

            return self._server

    def start(self) -> None:
        """
        Start the bridge server.

        Raises:
            NotInitializedError: If no server has been initialized
            AlreadyListeningError: If the server is already listening
        """
        with self._lock:
            if self._server is None:
                raise NotInitializedError()

            self._server.start()
            self._state = LifecycleState.STARTED
            logger.info(f"Bridge server started on port {self._server.port}")

    def stop(self) -> None:
        """
        Stop the bridge server and release it.

        Always safe to call; a no-op when nothing is running.
        """
        with self._lock:
            server = self._server
            if server is None:
                return

            self._server = None
            server.stop()
            self._state = LifecycleState.STOPPED
