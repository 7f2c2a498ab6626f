from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, Optional


class ToolExecuteRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    args: Optional[Dict[str, Any]] = None


class CommandProcessRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    command: Optional[str] = None
    type: Optional[str] = None


class HealthResponse(BaseModel):
    status: str = "ok"


class GitInfo(BaseModel):
    branch: str
    status: str


class BuildContext(BaseModel):
    git_info: GitInfo = Field(..., alias="gitInfo")
    sandbox: bool

    model_config = ConfigDict(populate_by_name=True)


class ContextResponse(BaseModel):
    system_prompt: str = Field(..., alias="systemPrompt")
    context: BuildContext

    model_config = ConfigDict(populate_by_name=True)
