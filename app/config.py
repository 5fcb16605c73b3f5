"""Service configuration.

Settings come from environment variables (or a local `.env` file during
development) via pydantic-settings. `get_settings()` caches the parsed
instance so the environment is read once per process.
"""

import json
from functools import lru_cache
from typing import Annotated, Any, List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    # Server
    port: int = Field(8081, alias="PORT")
    environment: str = Field("development", alias="ENVIRONMENT")

    # Logging
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(True, alias="LOG_JSON")

    # Service identity, reported by the health endpoints
    service_name: str = Field("validation-service", alias="SERVICE_NAME")
    service_version: str = Field("1.0.0-SNAPSHOT", alias="SERVICE_VERSION")

    # Validation
    rules_file: Optional[str] = Field(None, alias="RULES_FILE")
    max_stored_results: int = Field(10_000, alias="MAX_STORED_RESULTS", gt=0)

    # CORS; the env var takes a comma-separated list or a JSON array
    cors_allowed_origins: Annotated[List[str], NoDecode] = Field(
        default=[
            "http://localhost:3000",
            "http://localhost:3001",
            "http://localhost:8080",
            "https://localhost:3000",
        ],
        alias="CORS_ALLOWED_ORIGINS",
    )

    @field_validator("cors_allowed_origins", mode="before")
    @classmethod
    def split_origins(cls, value: Any) -> Any:
        if not isinstance(value, str):
            return value
        value = value.strip()
        if value.startswith("["):
            return json.loads(value)
        return [origin.strip() for origin in value.split(",") if origin.strip()]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "get_settings"]
