"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    env: str = "development"
    log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Canvas used when a request omits width/height
    default_width: int = 500
    default_height: int = 500

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "STARSETS_"}


settings = Settings()
