"""
Ambient execution environment of the host process.

Git information and sandbox status are exported by the host as environment
variables. They are read on every snapshot, never cached.
"""

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class EnvironmentSnapshot(BaseModel):
    """Point-in-time view of the ambient environment."""
    branch: str = ""
    status: str = ""
    sandbox: bool = False


class _AmbientVariables(BaseSettings):
    GIT_BRANCH: str = ""
    GIT_STATUS: str = ""
    SANDBOX_ENABLED: str = ""

    model_config = SettingsConfigDict(extra="ignore")


class AmbientEnvironment:
    """Reads branch name, git status and the sandbox flag from the process environment."""

    def snapshot(self) -> EnvironmentSnapshot:
        variables = _AmbientVariables()
        return EnvironmentSnapshot(
            branch=variables.GIT_BRANCH,
            status=variables.GIT_STATUS,
            sandbox=variables.SANDBOX_ENABLED == "true",
        )
