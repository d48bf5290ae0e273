from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Local dev: load from .env automatically.
    # In production: you typically inject real env vars instead.
    model_config = SettingsConfigDict(
        env_prefix="", extra="ignore", env_file=".env", env_file_encoding="utf-8", populate_by_name=True
    )

    # Env vars:
    # - APP_TITLE (optional, shown in the OpenAPI docs)
    # - LOG_LEVEL (optional, DEBUG/INFO/WARNING/...)
    # - SEED_DEMO_USERS (optional; pre-populates two users on startup)
    app_title: str = Field(default="User Registry API", validation_alias="APP_TITLE")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    seed_demo_users: bool = Field(default=False, validation_alias="SEED_DEMO_USERS")

    def model_post_init(self, __context):  # type: ignore[override]
        # logging accepts upper-case level names only.
        self.log_level = (self.log_level or "INFO").upper().strip() or "INFO"


def get_settings() -> Settings:
    """Load settings from environment.

    Keep this as the single canonical constructor for Settings(). FastAPI
    dependencies and tests can override/monkeypatch this function.
    """
    return Settings()
