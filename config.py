"""
Client configuration via pydantic-settings.

All settings are loaded from environment variables (and .env file).
ClientSettings uses the JSON_CLIENT_ prefix so it can live alongside the
host application's own settings without collisions.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="JSON_CLIENT_", extra="ignore"
    )

    # httpx has no "wait forever" default, so the connection timeout is explicit
    timeout_seconds: float = Field(default=30.0, gt=0)

    # Connection reuse; False sends "Connection: close" on every request
    keep_alive: bool = True

    # Redirects are followed unless turned off
    follow_redirects: bool = True

    user_agent: str = "simple-json-client"


class LoggingSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    env: str = "development"
    log_level: str = ""
    log_format: str = ""

    @model_validator(mode="after")
    def _apply_env_defaults(self) -> "LoggingSettings":
        if not self.log_level:
            self.log_level = "INFO" if self.is_production else "DEBUG"
        if not self.log_format:
            self.log_format = "json" if self.is_production else "console"
        self.log_level = self.log_level.upper()
        return self

    @property
    def is_production(self) -> bool:
        return self.env == "production"


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    client: Optional[ClientSettings] = None
    logging: Optional[LoggingSettings] = None

    @model_validator(mode="after")
    def _populate_sub_configs(self) -> "AppSettings":
        # Populate sub-configs from the same env/dotenv source
        if self.client is None:
            self.client = ClientSettings()
        if self.logging is None:
            self.logging = LoggingSettings()
        return self
