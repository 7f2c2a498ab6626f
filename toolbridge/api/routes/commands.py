import logging

from fastapi import APIRouter, HTTPException

from toolbridge.api.schemas import CommandProcessRequest
from toolbridge.commands import COMMAND_PROCESSORS, process_command

logger = logging.getLogger("toolbridge.api")

router = APIRouter()


@router.post("/process")
async def process(request: CommandProcessRequest):
    """
    Run a slash, at or shell command.

    Negative outcomes (unknown command, missing path, failing shell command)
    are still successful responses; the failure is described in ``result``.
    """
    if not request.command:
        raise HTTPException(status_code=400, detail="Command is required")

    if not request.type:
        raise HTTPException(status_code=400, detail="Command type is required")

    if request.type not in COMMAND_PROCESSORS:
        raise HTTPException(status_code=400, detail=f"Invalid command type: {request.type}")

    try:
        result = await process_command(request.command, request.type)
    except Exception as e:
        logger.exception(f"Error processing {request.type} command")
        raise HTTPException(status_code=500, detail=str(e) or "Unknown error") from e

    return {"success": True, "result": result.to_payload()}
