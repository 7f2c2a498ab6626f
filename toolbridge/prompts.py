"""
System prompt construction for the caller runtime.

The prompt is assembled from independent sections so callers can ask for
git information and sandbox status separately.
"""

from typing import List, Optional

from langchain_core.prompts import PromptTemplate

from toolbridge.config import settings
from toolbridge.environment import AmbientEnvironment

IDENTITY_TEMPLATE = PromptTemplate.from_template(
    "You are {assistant_name}, a helpful AI assistant."
)

GIT_BRANCH_TEMPLATE = PromptTemplate.from_template("Current git branch: {branch}")

GIT_STATUS_TEMPLATE = PromptTemplate.from_template("Git status: {status}")

SANDBOX_TEMPLATE = PromptTemplate.from_template("Sandbox mode: {sandbox_mode}")


class SystemPromptBuilder:
    """
    Builds the system prompt from the ambient environment.

    Args:
        environment: Source of git and sandbox information (read at build time)
        assistant_name: Name the assistant introduces itself with
    """

    def __init__(
        self,
        environment: Optional[AmbientEnvironment] = None,
        assistant_name: Optional[str] = None
    ):
        self.environment = environment or AmbientEnvironment()
        self.assistant_name = assistant_name or settings.ASSISTANT_NAME

    async def build(
        self,
        include_git_info: bool = True,
        include_sandbox_status: bool = True
    ) -> str:
        """
        Build the system prompt.

        Args:
            include_git_info: Add the current branch and, when known, the git status
            include_sandbox_status: Add whether sandbox mode is enabled

        Returns:
            The rendered system prompt
        """
        snapshot = self.environment.snapshot()
        sections: List[str] = [
            await IDENTITY_TEMPLATE.aformat(assistant_name=self.assistant_name)
        ]

        if include_git_info:
            git_lines = [
                await GIT_BRANCH_TEMPLATE.aformat(branch=snapshot.branch or "unknown")
            ]
            if snapshot.status:
                git_lines.append(await GIT_STATUS_TEMPLATE.aformat(status=snapshot.status))
            sections.append("\n".join(git_lines))

        if include_sandbox_status:
            sections.append(await SANDBOX_TEMPLATE.aformat(
                sandbox_mode="enabled" if snapshot.sandbox else "disabled"
            ))

        return "\n\n".join(sections)
