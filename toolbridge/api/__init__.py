"""
HTTP surface of the bridge gateway.

:func:`create_bridge_app` builds a FastAPI application around the host's
collaborators. Every error leaves the app as ``{"success": false, "error": ...}``.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from toolbridge.api.dependencies import Environment, PromptBuilder, ToolLookup
from toolbridge.api.router import api_router
from toolbridge.environment import AmbientEnvironment
from toolbridge.prompts import SystemPromptBuilder

logger = logging.getLogger("toolbridge.api")


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
    else:
        message = "Invalid request"
    logger.debug(f"Rejected request to {request.url.path}: {message}")
    return JSONResponse(status_code=400, content={"success": False, "error": message})


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.url.path}", exc_info=exc)
    return JSONResponse(status_code=500, content={"success": False, "error": str(exc) or "Unknown error"})


def create_bridge_app(
    tool_registry: ToolLookup,
    prompt_builder: Optional[PromptBuilder] = None,
    environment: Optional[Environment] = None
) -> FastAPI:
    """
    Create the bridge FastAPI application.

    Args:
        tool_registry: Tool lookup used by ``/api/tools/execute`` (borrowed)
        prompt_builder: Prompt builder used by ``/api/context/build``
        environment: Ambient environment read at request time

    Returns:
        FastAPI application with all bridge routes under ``/api``
    """
    environment = environment or AmbientEnvironment()

    app = FastAPI(
        title="Tool Bridge",
        description="HTTP bridge exposing host tools, prompts and commands to a second runtime",
        version="0.1.0",
    )

    app.state.tool_registry = tool_registry
    app.state.prompt_builder = prompt_builder or SystemPromptBuilder(environment=environment)
    app.state.environment = environment

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(api_router, prefix="/api")

    return app


__all__ = ["create_bridge_app"]
