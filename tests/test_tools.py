"""Tests for the tool registry and built-in tools."""

import pytest
from fastapi.testclient import TestClient
from pydantic import BaseModel, ValidationError

from toolbridge.api import create_bridge_app
from toolbridge.tools import BridgeTool, ToolRegistry, get_tool_registry, reset_registry
from toolbridge.tools.file_ops import ListDirectoryTool, ReadFileTool


class EchoInput(BaseModel):
    text: str


class EchoTool(BridgeTool):
    name: str = "echo"
    description: str = "Echoes its input"
    args_schema: type[BaseModel] = EchoInput

    def _run(self, text: str) -> dict:
        return {"text": text}


class TestToolRegistry:
    def test_register_and_get(self):
        registry = ToolRegistry()
        registry.register_tool(EchoTool)

        assert registry.tool_exists("echo")
        assert isinstance(registry.get_tool("echo"), EchoTool)
        assert registry.get_tool_names() == ["echo"]

    def test_missing_tool_is_none(self):
        assert ToolRegistry().get_tool("missing") is None

    def test_singleton_has_builtin_tools(self):
        registry = reset_registry()

        assert registry is get_tool_registry()
        assert set(registry.get_tool_names()) == {"ls", "read_file"}

    def test_metadata(self):
        metadata = ReadFileTool.get_metadata()

        assert metadata["name"] == "read_file"
        assert metadata["category"] == "filesystem"
        assert metadata["class"] == "ReadFileTool"


class TestBridgeTool:
    @pytest.mark.asyncio
    async def test_execute_returns_tool_output(self):
        assert await EchoTool().execute({"text": "hi"}) == {"text": "hi"}

    @pytest.mark.asyncio
    async def test_execute_validates_arguments(self):
        with pytest.raises(ValidationError):
            await EchoTool().execute({})


class TestFileTools:
    @pytest.mark.asyncio
    async def test_ls_lists_directories_first(self, tmp_path):
        (tmp_path / "b.txt").write_text("bb")
        (tmp_path / "a_dir").mkdir()
        (tmp_path / ".hidden").write_text("")

        result = await ListDirectoryTool().execute({"path": str(tmp_path)})

        assert result["path"] == str(tmp_path)
        assert result["entries"] == [
            {"name": "a_dir", "isDirectory": True, "size": 0},
            {"name": "b.txt", "isDirectory": False, "size": 2},
        ]

    @pytest.mark.asyncio
    async def test_ls_include_hidden(self, tmp_path):
        (tmp_path / ".hidden").write_text("")

        result = await ListDirectoryTool().execute({"path": str(tmp_path), "include_hidden": True})

        assert [entry["name"] for entry in result["entries"]] == [".hidden"]

    @pytest.mark.asyncio
    async def test_read_file(self, tmp_path):
        target = tmp_path / "notes.txt"
        target.write_text("one\ntwo\nthree\n")

        result = await ReadFileTool().execute({"path": str(target)})

        assert result["content"] == "one\ntwo\nthree\n"
        assert result["size"] == 14
        assert result["truncated"] is False

    @pytest.mark.asyncio
    async def test_read_file_max_lines(self, tmp_path):
        target = tmp_path / "notes.txt"
        target.write_text("one\ntwo\nthree\n")

        result = await ReadFileTool().execute({"path": str(target), "max_lines": 2})

        assert result["content"] == "one\ntwo\n"
        assert result["truncated"] is True

    @pytest.mark.asyncio
    async def test_read_file_exactly_max_lines_is_not_truncated(self, tmp_path):
        target = tmp_path / "notes.txt"
        target.write_text("one\ntwo\n")

        result = await ReadFileTool().execute({"path": str(target), "max_lines": 2})

        assert result["content"] == "one\ntwo\n"
        assert result["truncated"] is False

    @pytest.mark.asyncio
    async def test_read_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            await ReadFileTool().execute({"path": str(tmp_path / "missing.txt")})


class TestRegistryThroughGateway:
    def test_builtin_tool_over_http(self, tmp_path, prompt_builder, environment):
        (tmp_path / "file.txt").write_text("x")
        app = create_bridge_app(reset_registry(), prompt_builder, environment)

        with TestClient(app) as client:
            response = client.post("/api/tools/execute", json={"name": "ls", "args": {"path": str(tmp_path)}})

        assert response.status_code == 200
        assert response.json()["result"]["entries"] == [{"name": "file.txt", "isDirectory": False, "size": 1}]

    def test_missing_file_is_500(self, tmp_path, prompt_builder, environment):
        app = create_bridge_app(reset_registry(), prompt_builder, environment)

        with TestClient(app) as client:
            response = client.post(
                "/api/tools/execute",
                json={"name": "read_file", "args": {"path": str(tmp_path / "missing.txt")}},
            )

        assert response.status_code == 500
        assert response.json()["success"] is False
