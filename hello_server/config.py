from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Server settings loaded from environment.

    Environment variables are prefixed with ``HELLO_SERVER_``. Example:
        export HELLO_SERVER_PORT=8080
    """

    HOST: str = "0.0.0.0"
    PORT: int = Field(default=4000, ge=1, le=65535)
    DEBUG: bool = False
    # Explicit level name (e.g. "WARNING"); unset falls back to ENV
    LOG_LEVEL: str | None = None
    ENV: str = "production"
    # Gunicorn worker processes
    WORKERS: int = Field(default=2, ge=1)

    model_config = SettingsConfigDict(env_prefix="HELLO_SERVER_", case_sensitive=False)

    @property
    def is_dev(self) -> bool:
        return self.ENV.lower() == "dev"

    @property
    def log_level(self) -> str:
        if self.LOG_LEVEL:
            return self.LOG_LEVEL.upper()
        return "DEBUG" if self.is_dev else "INFO"


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
