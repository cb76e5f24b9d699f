"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache): single instance per process
    - Upstream base URL and timeout come from the environment, never hardcoded in the client call sites

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support (ADR: developer UX)
    - Defaults provided for every setting: works out-of-the-box against the public HP API
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Upstream character API
    hp_api_base_url: str = "https://hp-api.onrender.com"
    hp_api_timeout_seconds: float = 30.0

    @field_validator("hp_api_base_url", mode="before")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """httpx joins base_url + path; a trailing slash would double up."""
        if isinstance(v, str):
            return v.rstrip("/")
        return v

    # API
    cors_origins: list[str] = ["http://localhost:8080"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
