import logging

from fastapi import APIRouter, Depends, HTTPException

from toolbridge.api.dependencies import ToolLookup, call_collaborator, get_tool_lookup
from toolbridge.api.schemas import ToolExecuteRequest

logger = logging.getLogger("toolbridge.api")

router = APIRouter()


@router.post("/execute")
async def execute_tool(
    request: ToolExecuteRequest,
    tool_registry: ToolLookup = Depends(get_tool_lookup)
):
    """
    Execute a tool from the host's tool registry.

    The tool's return value is passed through untouched in ``result``.
    """
    if not request.name:
        raise HTTPException(status_code=400, detail="Tool name is required")

    try:
        tool = await call_collaborator(tool_registry.get_tool, request.name)
    except Exception as e:
        logger.exception(f"Error looking up tool '{request.name}'")
        raise HTTPException(status_code=500, detail=str(e) or "Unknown error") from e

    if tool is None:
        raise HTTPException(status_code=404, detail=f"Tool '{request.name}' not found")

    try:
        logger.info(f"Executing tool '{request.name}'")
        result = await call_collaborator(tool.execute, request.args or {})
    except Exception as e:
        logger.exception(f"Error executing tool '{request.name}'")
        raise HTTPException(status_code=500, detail=str(e) or "Unknown error") from e

    return {"success": True, "result": result}
