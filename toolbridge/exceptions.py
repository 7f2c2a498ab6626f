"""
Exceptions raised by the bridge.

Lifecycle failures are raised to the host; request-level failures never
leave the gateway and are rendered as HTTP error envelopes instead.
"""

from typing import Optional


class BridgeError(Exception):
    """Base class for all bridge errors."""


class NotInitializedError(BridgeError):
    """Raised when the bridge is started before it was initialized."""

    def __init__(self, message: str = "Bridge server not initialized"):
        super().__init__(message)


class AlreadyListeningError(BridgeError):
    """Raised when a bind is attempted on a port that is already listening."""

    def __init__(self, port: int, reason: Optional[str] = None):
        self.port = port
        message = f"Bridge server already listening on port {port}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class BridgeStartupError(BridgeError):
    """Raised when the HTTP server fails to come up after binding."""


class UnknownCommandTypeError(BridgeError):
    """Raised for a command type that maps to no interpreter."""

    def __init__(self, command_type: str):
        self.command_type = command_type
        super().__init__(f"Invalid command type: {command_type}")


class BridgeClientError(BridgeError):
    """Raised by the client when the bridge answers with an error envelope."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        super().__init__(message)


class BridgeConnectionError(BridgeError):
    """Raised by the client when the bridge cannot be reached."""
