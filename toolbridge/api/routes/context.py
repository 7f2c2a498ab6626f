import logging

from fastapi import APIRouter, Depends, HTTPException

from toolbridge.api.dependencies import (
    Environment,
    PromptBuilder,
    call_collaborator,
    get_environment,
    get_prompt_builder,
)
from toolbridge.api.schemas import BuildContext, ContextResponse, GitInfo

logger = logging.getLogger("toolbridge.api")

router = APIRouter()


@router.get("/build", response_model=ContextResponse)
async def build_context(
    prompt_builder: PromptBuilder = Depends(get_prompt_builder),
    environment: Environment = Depends(get_environment)
):
    """
    Build the system prompt together with the git and sandbox context it was built from.
    """
    try:
        system_prompt = await call_collaborator(
            prompt_builder.build,
            include_git_info=True,
            include_sandbox_status=True
        )
        snapshot = await call_collaborator(environment.snapshot)
    except Exception as e:
        logger.exception("Error building context")
        raise HTTPException(status_code=500, detail=str(e) or "Unknown error") from e

    return ContextResponse(
        system_prompt=system_prompt,
        context=BuildContext(
            git_info=GitInfo(branch=snapshot.branch, status=snapshot.status),
            sandbox=snapshot.sandbox
        )
    )
