"""Application settings loaded from environment variables."""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Centralized runtime configuration."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "Ledger Balances"
    debug: bool = False
    api_v1_prefix: str = "/api/v1"

    rippled_url: str = Field(
        default="https://s1.ripple.com:51234/",
        description="JSON-RPC endpoint of a rippled server",
    )
    request_timeout: float = Field(default=20.0, gt=0)

    native_currency_code: str = "XRP"

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_file: Optional[str] = None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance for dependency injection."""

    return Settings()
