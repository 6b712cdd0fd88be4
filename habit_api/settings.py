from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    timezone: str = Field("Asia/Jerusalem", alias="ANALYTICS_TIMEZONE")
    default_target_time: str = Field("06:00", alias="ANALYTICS_DEFAULT_TARGET_TIME")

    max_lookback: int = Field(365, alias="ANALYTICS_MAX_LOOKBACK")
    max_recovery_window: int = Field(30, alias="ANALYTICS_MAX_RECOVERY_WINDOW")
    falls_limit: int = Field(10, alias="ANALYTICS_FALLS_LIMIT")
    duplicate_policy: Literal["reject", "last"] = Field("reject", alias="ANALYTICS_DUPLICATE_POLICY")
    week_start: int = Field(6, ge=0, le=6, alias="ANALYTICS_WEEK_START")

    log_level: str = Field("INFO", alias="ANALYTICS_LOG_LEVEL")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    global _settings
    _settings = None
