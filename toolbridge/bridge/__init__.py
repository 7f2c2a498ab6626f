"""
Caller-side access to the bridge.

The second runtime (or any Python process) talks to a running bridge server
through :class:`BridgeClient`.
"""

from toolbridge.bridge.client import BridgeClient
from toolbridge.bridge.schemas import BuiltContext

__all__ = ["BridgeClient", "BuiltContext"]
