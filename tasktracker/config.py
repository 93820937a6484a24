from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TASKTRACKER_",
        env_file=".env",
        extra="ignore",
    )

    app_title: str = "Task Tracker API"
    app_version: str = "1.0.0"

    # Frontend origins allowed to call the API
    cors_origins: list[str] = Field(default_factory=lambda: ["http://localhost:3000"])

    log_level: str = "INFO"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
