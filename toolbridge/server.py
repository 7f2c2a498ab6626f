"""
Bridge server: the live gateway instance.

Binds the listening socket itself, so the port is taken by the time
:meth:`BridgeServer.start` returns, then serves the FastAPI app with uvicorn
on a dedicated thread. Only the lifecycle controller should create, start or
stop instances of this class.
"""

import errno
import logging
import socket
import threading
import time
from enum import Enum
from typing import Optional

import uvicorn

from toolbridge.api import create_bridge_app
from toolbridge.api.dependencies import Environment, PromptBuilder, ToolLookup
from toolbridge.config import settings
from toolbridge.exceptions import AlreadyListeningError, BridgeError, BridgeStartupError

logger = logging.getLogger("toolbridge.server")

STARTUP_POLL_INTERVAL = 0.01


class ServerState(str, Enum):
    """Lifecycle of a single BridgeServer instance."""
    CONSTRUCTED = "constructed"
    STARTED = "started"
    STOPPED = "stopped"


class BridgeServer:
    """
    HTTP server for the bridge.

    Args:
        tool_registry: Tool lookup borrowed from the host
        port: Port to listen on (0 picks a free port)
        host: Interface to bind
        prompt_builder: Prompt builder borrowed from the host
        environment: Ambient environment read per request
    """

    def __init__(
        self,
        tool_registry: ToolLookup,
        port: int = 3000,
        host: str = "127.0.0.1",
        prompt_builder: Optional[PromptBuilder] = None,
        environment: Optional[Environment] = None
    ):
        self.host = host
        self._port = port
        self.app = create_bridge_app(tool_registry, prompt_builder, environment)

        self._state = ServerState.CONSTRUCTED
        self._socket: Optional[socket.socket] = None
        self._server: Optional[uvicorn.Server] = None
        self._thread: Optional[threading.Thread] = None

    @property
    def port(self) -> int:
        """Bound port once listening, configured port before that."""
        if self._socket is not None:
            return self._socket.getsockname()[1]
        return self._port

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}"

    @property
    def state(self) -> ServerState:
        return self._state

    @property
    def is_listening(self) -> bool:
        return self._state == ServerState.STARTED

    def _bind(self) -> socket.socket:
        family = socket.AF_INET6 if ":" in self.host else socket.AF_INET
        sock = socket.socket(family, socket.SOCK_STREAM)
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            sock.bind((self.host, self._port))
            sock.listen(socket.SOMAXCONN)
        except OSError as e:
            sock.close()
            if e.errno == errno.EADDRINUSE:
                raise AlreadyListeningError(self._port, "address already in use") from e
            raise BridgeStartupError(f"Failed to bind {self.host}:{self._port}: {e}") from e
        sock.setblocking(False)
        return sock

    def start(self) -> None:
        """
        Bind the socket and start serving.

        Raises:
            AlreadyListeningError: If this server is already listening or the port is taken
            BridgeStartupError: If uvicorn fails to start
            BridgeError: If the server was already stopped
        """
        if self._state == ServerState.STOPPED:
            raise BridgeError("Bridge server has been stopped; create a new instance")
        if self._state == ServerState.STARTED:
            # A second bind on a listening server cannot succeed
            raise AlreadyListeningError(self.port)

        self._socket = self._bind()

        config = uvicorn.Config(
            self.app,
            host=self.host,
            port=self.port,
            log_level="debug" if settings.DEBUG else "warning",
            lifespan="off",
        )
        server = self._server = uvicorn.Server(config)
        thread = self._thread = threading.Thread(
            target=server.run,
            kwargs={"sockets": [self._socket]},
            name=f"toolbridge-{self.port}",
            daemon=True,
        )
        thread.start()

        while not server.started:
            if self._state == ServerState.STOPPED:
                raise BridgeError("Bridge server was stopped while starting")
            if not thread.is_alive():
                self._release()
                raise BridgeStartupError(f"Bridge server failed to start on port {self._port}")
            time.sleep(STARTUP_POLL_INTERVAL)

        if self._state == ServerState.STOPPED:
            raise BridgeError("Bridge server was stopped while starting")
        self._state = ServerState.STARTED
        logger.info(f"Bridge server listening on {self.url}")

    def stop(self) -> None:
        """
        Stop serving and close the socket.

        Safe to call in any state. In-flight requests are drained by uvicorn
        before the serving thread exits.
        """
        if self._state == ServerState.STOPPED:
            return

        was_listening = self._state == ServerState.STARTED
        self._state = ServerState.STOPPED
        self._release()

        if was_listening:
            logger.info("Bridge server stopped")

    def _release(self) -> None:
        if self._server is not None:
            self._server.should_exit = True
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join()
        if self._socket is not None:
            self._socket.close()

        self._server = None
        self._thread = None
        self._socket = None
