from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="", extra="ignore", env_file=".env", env_file_encoding="utf-8")

    # Env vars:
    # - USER_MANAGER_LOG_LEVEL (optional, default WARNING)
    # - USER_MANAGER_INDENT (optional, prefix for every console line)
    log_level: str = Field(default="WARNING", validation_alias="USER_MANAGER_LOG_LEVEL")

    # Two tabs matches the classic layout of the menu.
    indent: str = Field(default="\t\t", validation_alias="USER_MANAGER_INDENT")

    def model_post_init(self, __context):  # type: ignore[override]
        level = (self.log_level or "").upper().strip()
        self.log_level = level if level in _LOG_LEVELS else "WARNING"


def get_settings() -> Settings:
    """Load settings from environment.

    Keep this as the single canonical constructor for Settings(). The entry
    point and tests can override/monkeypatch this function.
    """
    return Settings()
