"""Application settings loaded from environment variables."""

import json
from functools import lru_cache
from typing import Annotated, Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Strongly typed application configuration."""

    llm_api_url: str | None = Field(default=None, alias="MY_LLM_API_URL")
    llm_api_key: str | None = Field(default=None, alias="MY_LLM_API_KEY")
    llm_response_format: Literal["completion", "chat"] = Field(
        default="completion",
        alias="LLM_RESPONSE_FORMAT",
        description="Shape of the upstream response the answer is read from",
    )
    environment: str = Field(default="development", alias="ENVIRONMENT")
    log_level: Literal["debug", "info", "warning", "error", "critical"] = Field(
        default="info", alias="LOG_LEVEL"
    )
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=3000, alias="PORT")
    cors_allow_origins: Annotated[list[str], NoDecode] = Field(
        default=["*"],
        alias="CORS_ALLOW_ORIGINS",
        description="Comma-separated origins or a JSON list",
    )
    static_dir: str = Field(default="public", alias="STATIC_DIR")

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, populate_by_name=True
    )

    @field_validator("cors_allow_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: Any) -> Any:
        if not isinstance(value, str):
            return value
        if value.strip().startswith("["):
            return json.loads(value)
        return [origin.strip() for origin in value.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Return a cached instance of settings."""

    return Settings()
