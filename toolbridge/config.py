from numbers import Real
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Bridge Settings (unset values fall back to DEFAULT_BRIDGE_CONFIG)
    BRIDGE_ENABLED: Optional[bool] = None
    BRIDGE_PORT: Optional[int] = None
    BRIDGE_AUTO_START: Optional[bool] = None
    BRIDGE_HOST: Optional[str] = None

    # Prompt Settings
    ASSISTANT_NAME: str = "Gemini"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()


class BridgeConfig(BaseModel):
    """Resolved bridge configuration. Immutable once read."""

    model_config = ConfigDict(frozen=True)

    enabled: bool = False
    port: int = 3000
    auto_start: bool = False
    host: str = "127.0.0.1"

    @model_validator(mode="after")
    def _check_port(self) -> "BridgeConfig":
        # 0 asks the OS for an ephemeral port
        if self.enabled and self.port != 0 and not 1024 <= self.port <= 65535:
            raise ValueError(
                f"Bridge port must be 0 or an unprivileged port (1024-65535), got {self.port}"
            )
        return self


DEFAULT_BRIDGE_CONFIG = BridgeConfig()


def _as_port(value: Any) -> Optional[int]:
    if isinstance(value, bool) or not isinstance(value, Real):
        return None
    if int(value) != value or not 0 <= value <= 65535:
        return None
    return int(value)


def get_bridge_config(config: Optional[Mapping[str, Any]]) -> BridgeConfig:
    """
    Get the bridge configuration from the host configuration.

    Values under ``config["bridge"]`` override the defaults. Unknown keys and
    values of the wrong type are ignored rather than treated as errors.

    Args:
        config: Host configuration mapping, e.g. ``{"bridge": {"enabled": True}}``

    Returns:
        BridgeConfig merged over DEFAULT_BRIDGE_CONFIG
    """
    overrides: Dict[str, Any] = {}
    bridge = (config or {}).get("bridge")

    if isinstance(bridge, Mapping):
        if isinstance(bridge.get("enabled"), bool):
            overrides["enabled"] = bridge["enabled"]

        port = _as_port(bridge.get("port"))
        if port is not None:
            overrides["port"] = port

        if isinstance(bridge.get("autoStart"), bool):
            overrides["auto_start"] = bridge["autoStart"]

        host = bridge.get("host")
        if isinstance(host, str) and host.strip():
            overrides["host"] = host.strip()

    return BridgeConfig(**{**DEFAULT_BRIDGE_CONFIG.model_dump(), **overrides})


def load_host_config(source: Optional[Settings] = None) -> Dict[str, Any]:
    """
    Build the host configuration mapping from environment settings.

    Only the bridge values that are actually set end up in the mapping, so
    the defaults still apply to everything else.
    """
    source = source or settings
    bridge: Dict[str, Any] = {}

    if source.BRIDGE_ENABLED is not None:
        bridge["enabled"] = source.BRIDGE_ENABLED
    if source.BRIDGE_PORT is not None:
        bridge["port"] = source.BRIDGE_PORT
    if source.BRIDGE_AUTO_START is not None:
        bridge["autoStart"] = source.BRIDGE_AUTO_START
    if source.BRIDGE_HOST is not None:
        bridge["host"] = source.BRIDGE_HOST

    return {"bridge": bridge}
