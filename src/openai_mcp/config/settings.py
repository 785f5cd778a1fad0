"""Application settings."""

from functools import lru_cache
import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).resolve().parents[3]


class Settings(BaseSettings):
    """Runtime settings loaded from environment variables."""

    server_name: str = "openai"
    server_version: str = "0.1.0"
    openai_api_key: str = ""
    openai_base_url: str = "https://api.openai.com/v1"
    request_timeout_s: float = Field(default=60.0, ge=0.5)
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="OPENAI_MCP_",
        extra="ignore",
        env_file=(PROJECT_ROOT / ".env", PROJECT_ROOT / ".env.local"),
        env_file_encoding="utf-8",
    )

    def resolved_openai_api_key(self) -> str:
        return self.openai_api_key or os.getenv("OPENAI_API_KEY", "")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
