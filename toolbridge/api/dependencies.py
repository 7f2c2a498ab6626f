"""
FastAPI dependencies resolving the collaborators attached to the app.

The gateway borrows these objects from the host; they are stored on
``app.state`` by :func:`toolbridge.api.create_bridge_app`.
"""

import inspect
from typing import Any, Callable, Optional, Protocol

from fastapi import Request
from starlette.concurrency import run_in_threadpool

from toolbridge.environment import EnvironmentSnapshot


class Tool(Protocol):
    def execute(self, args: Any) -> Any: ...


class ToolLookup(Protocol):
    def get_tool(self, name: str) -> Optional[Tool]: ...


class PromptBuilder(Protocol):
    def build(self, include_git_info: bool, include_sandbox_status: bool) -> Any: ...


class Environment(Protocol):
    def snapshot(self) -> EnvironmentSnapshot: ...


async def call_collaborator(fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
    """
    Call a host collaborator without blocking the event loop.

    Coroutine functions are awaited directly; anything else runs in the
    threadpool, and an awaitable it hands back is awaited on the loop.
    """
    if inspect.iscoroutinefunction(fn):
        return await fn(*args, **kwargs)

    result = await run_in_threadpool(fn, *args, **kwargs)
    if inspect.isawaitable(result):
        return await result
    return result


def get_tool_lookup(request: Request) -> ToolLookup:
    return request.app.state.tool_registry


def get_prompt_builder(request: Request) -> PromptBuilder:
    return request.app.state.prompt_builder


def get_environment(request: Request) -> Environment:
    return request.app.state.environment
