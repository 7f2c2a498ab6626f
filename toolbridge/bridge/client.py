import httpx
import logging
from typing import Any, Dict, Optional

from toolbridge.bridge.schemas import BuiltContext, CommandPayload, CommandType, ToolExecutionPayload
from toolbridge.exceptions import BridgeClientError, BridgeConnectionError

logger = logging.getLogger("toolbridge.bridge")

class BridgeClient:
    """Client used by the second runtime to call into the bridge server."""

    def __init__(self, base_url: str = "http://127.0.0.1:3000", transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url.rstrip("/")
        # No timeout: tool execution and shell commands may legitimately run long
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=None,
            transport=transport
        )

    async def __aenter__(self) -> "BridgeClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self):
        """Close the underlying HTTP client."""
        await self.client.aclose()

    async def _request(self, method: str, path: str, json: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        try:
            response = await self.client.request(method, path, json=json)
        except httpx.RequestError as e:
            logger.error(f"Bridge Request Error: {e}")
            raise BridgeConnectionError(f"Failed to connect to bridge at {self.base_url}: {e}") from e

        try:
            data = response.json()
        except ValueError:
            data = {}

        if response.is_error:
            message = data.get("error") if isinstance(data, dict) else None
            logger.error(f"Bridge HTTP Error: {response.status_code} - {message or response.text}")
            raise BridgeClientError(response.status_code, message or response.text)

        return data

    async def health(self) -> bool:
        """Check that the bridge is up."""
        data = await self._request("GET", "/api/health")
        return data.get("status") == "ok"

    async def execute_tool(self, name: str, args: Optional[Dict[str, Any]] = None) -> Any:
        """
        Execute a host tool via the bridge and return its result.
        """
        payload = ToolExecutionPayload(name=name, args=args or {})
        logger.info(f"Executing tool via bridge: {name}")
        data = await self._request("POST", "/api/tools/execute", json=payload.model_dump())
        return data.get("result")

    async def build_context(self) -> BuiltContext:
        """Fetch the system prompt and the git/sandbox context it was built from."""
        data = await self._request("GET", "/api/context/build")
        return BuiltContext.model_validate(data)

    async def process_command(self, command: str, command_type: CommandType) -> Dict[str, Any]:
        """
        Run a slash, at or shell command on the host.

        Returns the interpreter result; application-level failures are
        reported inside it, not raised.
        """
        payload = CommandPayload(command=command, type=command_type)
        logger.info(f"Processing {command_type} command via bridge: {command}")
        data = await self._request("POST", "/api/commands/process", json=payload.model_dump())
        return data.get("result")
