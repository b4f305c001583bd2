"""Pydantic Settings: loads configuration from environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "extra": "ignore"}

    # Empty disables API key checks on /analyze.
    api_key: str = ""

    fetch_timeout_seconds: float = 15.0
    fetch_max_redirects: int = 10
    weak_content_threshold: int = 500
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()
