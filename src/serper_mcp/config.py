from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Any, Literal, Optional

from .errors import ConfigurationError

DEFAULT_SERPER_API_URL = "https://google.serper.dev"
LOG_LEVELS = ("debug", "info", "warning", "error", "critical")

class Settings(BaseSettings):
    # Serper API
    SERPER_API_KEY: str
    SERPER_API_URL: str = DEFAULT_SERPER_API_URL

    # MCP transport config
    SERPER_MCP_TRANSPORT: Literal["stdio", "http"] = "stdio"
    SERPER_MCP_HOST: str = "0.0.0.0"
    SERPER_MCP_PORT: int = 8080

    SERPER_MCP_LOG_LEVEL: str = "info"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        frozen=True,
    )

    @field_validator("SERPER_API_KEY")
    @classmethod
    def _api_key_not_blank(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("SERPER_API_KEY must not be empty")
        return value.strip()

    @field_validator("SERPER_MCP_TRANSPORT", mode="before")
    @classmethod
    def _normalize_transport(cls, value: Any) -> Any:
        return value.strip().lower() if isinstance(value, str) else value

    @field_validator("SERPER_MCP_PORT")
    @classmethod
    def _port_in_range(cls, value: int) -> int:
        if not 0 < value < 65536:
            raise ValueError(f"port must be between 1 and 65535, got {value}")
        return value

    @field_validator("SERPER_MCP_LOG_LEVEL")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().lower()
        if level not in LOG_LEVELS:
            raise ValueError(f"log level must be one of {', '.join(LOG_LEVELS)}, got {value!r}")
        return level


# CLI flag name -> settings field
CLI_OVERRIDES = {
    "api_key": "SERPER_API_KEY",
    "transport": "SERPER_MCP_TRANSPORT",
    "host": "SERPER_MCP_HOST",
    "port": "SERPER_MCP_PORT",
    "log_level": "SERPER_MCP_LOG_LEVEL",
}

def load_settings(overrides: Optional[dict] = None, env_file: Optional[str] = ".env") -> Settings:
    """
    Resolve settings from CLI overrides, then environment variables, then the
    env file, then the field defaults. Overrides set to None are ignored.

    Raises:
        ConfigurationError: if the API key is missing or any value is invalid
    """
    kwargs = {
        CLI_OVERRIDES.get(key, key): value
        for key, value in (overrides or {}).items()
        if value is not None
    }
    try:
        return Settings(_env_file=env_file, **kwargs)
    except ValidationError as e:
        missing_key = any(
            err["loc"] == ("SERPER_API_KEY",) for err in e.errors()
        )
        if missing_key:
            raise ConfigurationError("SERPER_API_KEY environment variable is required") from e
        details = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ConfigurationError(f"Invalid configuration: {details}") from e
