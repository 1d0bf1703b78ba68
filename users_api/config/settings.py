# config/settings.py
import logging

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    # Server
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=5000)
    debug: bool = Field(default=False)
    environment: str = Field(default="development")

    # Security
    # Placeholder credential check, not a real token scheme
    auth_token: SecretStr = Field(
        default=SecretStr("valid_token"),
        description="Bearer token accepted by the authentication middleware"
    )

    # Logging
    log_level: str = Field(default="INFO")
    log_to_console: bool = Field(default=True)
    log_dir: str = Field(default="logs")
    log_file: str = Field(default="app.log")
    log_backup_count: int = Field(default=7, ge=0)

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {value}")
        return level


settings = Settings()
