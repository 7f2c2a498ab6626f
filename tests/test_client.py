"""Tests for the caller-side BridgeClient."""

import sys

import httpx
import pytest

from toolbridge.api import create_bridge_app
from toolbridge.bridge import BridgeClient
from toolbridge.exceptions import BridgeClientError, BridgeConnectionError
from toolbridge.server import BridgeServer


@pytest.fixture
def asgi_client(tool_registry, prompt_builder, environment):
    app = create_bridge_app(tool_registry, prompt_builder, environment)
    return BridgeClient("http://testserver", transport=httpx.ASGITransport(app=app))


class TestBridgeClient:
    @pytest.mark.asyncio
    async def test_health(self, asgi_client):
        async with asgi_client as client:
            assert await client.health() is True

    @pytest.mark.asyncio
    async def test_execute_tool_returns_result(self, asgi_client, ls_tool):
        async with asgi_client as client:
            result = await client.execute_tool("ls", {"path": "."})

        assert result == {"files": ["file1.txt", "file2.txt"]}
        assert ls_tool.calls == [{"path": "."}]

    @pytest.mark.asyncio
    async def test_missing_tool_raises_with_status(self, asgi_client):
        async with asgi_client as client:
            with pytest.raises(BridgeClientError) as excinfo:
                await client.execute_tool("nope")

        assert excinfo.value.status_code == 404
        assert str(excinfo.value) == "Tool 'nope' not found"

    @pytest.mark.asyncio
    async def test_tool_failure_raises_500(self, asgi_client):
        async with asgi_client as client:
            with pytest.raises(BridgeClientError) as excinfo:
                await client.execute_tool("broken")

        assert excinfo.value.status_code == 500
        assert "tool exploded" in str(excinfo.value)

    @pytest.mark.asyncio
    async def test_build_context(self, asgi_client):
        async with asgi_client as client:
            context = await client.build_context()

        assert context.system_prompt == "You are a test assistant."
        assert context.context.git_info.branch == "main"
        assert context.context.git_info.status == "clean"
        assert context.context.sandbox is False

    @pytest.mark.asyncio
    async def test_process_command(self, asgi_client):
        async with asgi_client as client:
            result = await client.process_command("/chat save", "slash")

        assert result["command"] == "chat"
        assert result["result"]["subCommand"] == "save"

    @pytest.mark.asyncio
    async def test_invalid_command_type_rejected_before_sending(self, asgi_client):
        async with asgi_client as client:
            with pytest.raises(ValueError):
                await client.process_command("/help", "macro")

    @pytest.mark.asyncio
    async def test_connection_refused(self, free_port):
        async with BridgeClient(f"http://127.0.0.1:{free_port}") as client:
            with pytest.raises(BridgeConnectionError):
                await client.health()


@pytest.mark.skipif(sys.platform == "win32", reason="uses POSIX shell syntax")
class TestAgainstRunningServer:
    @pytest.mark.asyncio
    async def test_round_trip_over_socket(self, tool_registry):
        server = BridgeServer(tool_registry, port=0)
        server.start()
        try:
            async with BridgeClient(server.url) as client:
                assert await client.health()
                shell = await client.process_command("!echo hello", "shell")
                tool = await client.execute_tool("async_echo")
        finally:
            server.stop()

        assert shell["success"] is True
        assert "hello" in shell["stdout"]
        assert tool == {"echo": True}
