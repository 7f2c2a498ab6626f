"""
Pytest fixtures for bridge tests.
"""

import socket
import sys
from pathlib import Path
from typing import Any, Dict, Generator, Optional

import pytest
from fastapi.testclient import TestClient

# Add project root to path for toolbridge imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from toolbridge.api import create_bridge_app
from toolbridge.environment import EnvironmentSnapshot


class FakeTool:
    """Synchronous tool returning a fixed result and recording its calls."""

    def __init__(self, result: Any = None):
        self.result = result
        self.calls = []

    def execute(self, args: Dict[str, Any]) -> Any:
        self.calls.append(args)
        return self.result


class AsyncFakeTool(FakeTool):
    async def execute(self, args: Dict[str, Any]) -> Any:
        self.calls.append(args)
        return self.result


class FailingTool:
    def __init__(self, message: str = "tool exploded"):
        self.message = message

    def execute(self, args: Dict[str, Any]) -> Any:
        raise RuntimeError(self.message)


class FakeToolRegistry:
    def __init__(self, tools: Optional[Dict[str, Any]] = None):
        self.tools = tools or {}

    def get_tool(self, name: str) -> Optional[Any]:
        return self.tools.get(name)


class FakePromptBuilder:
    def __init__(self, prompt: str = "You are a test assistant."):
        self.prompt = prompt
        self.calls = []

    async def build(self, include_git_info: bool = True, include_sandbox_status: bool = True) -> str:
        self.calls.append({
            "include_git_info": include_git_info,
            "include_sandbox_status": include_sandbox_status,
        })
        return self.prompt


class StaticEnvironment:
    def __init__(self, branch: str = "main", status: str = "clean", sandbox: bool = False):
        self.value = EnvironmentSnapshot(branch=branch, status=status, sandbox=sandbox)

    def snapshot(self) -> EnvironmentSnapshot:
        return self.value


@pytest.fixture
def ls_tool() -> FakeTool:
    return FakeTool({"files": ["file1.txt", "file2.txt"]})


@pytest.fixture
def tool_registry(ls_tool: FakeTool) -> FakeToolRegistry:
    return FakeToolRegistry({
        "ls": ls_tool,
        "async_echo": AsyncFakeTool({"echo": True}),
        "broken": FailingTool(),
    })


@pytest.fixture
def prompt_builder() -> FakePromptBuilder:
    return FakePromptBuilder()


@pytest.fixture
def environment() -> StaticEnvironment:
    return StaticEnvironment()


@pytest.fixture
def client(tool_registry, prompt_builder, environment) -> Generator[TestClient, None, None]:
    """TestClient for a bridge app wired to fake collaborators."""
    app = create_bridge_app(tool_registry, prompt_builder, environment)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def free_port() -> int:
    """A port that was free at the time of the call."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


def port_is_listening(port: int, host: str = "127.0.0.1") -> bool:
    try:
        with socket.create_connection((host, port), timeout=1):
            return True
    except OSError:
        return False
