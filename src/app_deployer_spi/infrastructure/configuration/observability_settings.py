import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PRODUCTION_ENVIRONMENTS = frozenset({"qa", "staging", "prod", "production"})
LOG_FORMATS = frozenset({"", "json", "console"})


class ObservabilitySettings(BaseSettings):
    """Settings for structured logging of deployer operations."""

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: str = Field(default="", alias="LOG_FORMAT")
    app_env: str = Field(default="local", alias="APP_ENV")
    service_name: str = Field(default="app-deployer-spi", alias="SERVICE_NAME")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_level(cls, value: object) -> str:
        """Accept any case and reject names the stdlib does not know."""
        level = str(value).strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level '{value}'")
        return level

    @field_validator("log_format", mode="before")
    @classmethod
    def parse_format(cls, value: object) -> str:
        """Empty string lets APP_ENV pick the renderer."""
        log_format = str(value or "").strip().lower()
        if log_format not in LOG_FORMATS:
            raise ValueError(f"LOG_FORMAT must be one of 'json' or 'console', got '{value}'")
        return log_format

    @field_validator("app_env", mode="before")
    @classmethod
    def lower_case(cls, value: object) -> str:
        return str(value or "").strip().lower()

    @property
    def is_production(self) -> bool:
        return self.app_env in PRODUCTION_ENVIRONMENTS

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)
