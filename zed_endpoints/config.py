from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .paths import normalize_prefix

_ALLOWED_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class Settings(BaseSettings):
    # Runtime environment
    environment: str = "development"
    app_title: str = "zed-endpoints"

    # Endpoint group discovery
    application_module: Optional[str] = None
    global_prefix: Optional[str] = None

    # Logging
    log_level: str = "INFO"
    structured_logging: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("application_module")
    @classmethod
    def validate_application_module(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        normalized = value.strip()
        if not normalized:
            return None
        if not all(part.isidentifier() for part in normalized.split(".")):
            raise ValueError("APPLICATION_MODULE must be a dotted module path")
        return normalized

    @field_validator("global_prefix")
    @classmethod
    def validate_global_prefix(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return normalize_prefix(value) or None

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in _ALLOWED_LOG_LEVELS:
            allowed = ", ".join(sorted(_ALLOWED_LOG_LEVELS))
            raise ValueError(f"LOG_LEVEL must be one of: {allowed}")
        return normalized


settings = Settings()
