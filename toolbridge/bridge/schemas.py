from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, Literal

CommandType = Literal["slash", "at", "shell"]


class ToolExecutionPayload(BaseModel):
    name: str
    args: Dict[str, Any] = {}


class CommandPayload(BaseModel):
    command: str
    type: CommandType


class GitContext(BaseModel):
    branch: str = ""
    status: str = ""


class PromptContext(BaseModel):
    git_info: GitContext = Field(default_factory=GitContext, alias="gitInfo")
    sandbox: bool = False

    model_config = ConfigDict(populate_by_name=True)


class BuiltContext(BaseModel):
    system_prompt: str = Field(..., alias="systemPrompt")
    context: PromptContext

    model_config = ConfigDict(populate_by_name=True)
