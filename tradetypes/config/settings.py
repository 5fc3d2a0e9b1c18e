# Library settings, loaded from environment variables / .env
from enum import Enum
from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class LoggingSettings(BaseModel):
    level: str = "INFO"
    json_format: bool = True  # ConsoleRenderer when False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v):
        level = str(v).upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unsupported log level: {v}")
        return level


class ErrorPolicySettings(BaseModel):
    """Handling of failures that carry no status code"""
    default_status_code: int = Field(
        default=500,
        description="Status code applied to uncoded failures",
    )

    @field_validator("default_status_code")
    @classmethod
    def validate_status_code(cls, v):
        if not 100 <= v <= 599:
            raise ValueError("default_status_code must be an HTTP-style status (100-599)")
        return v


class ValidationSettings(BaseModel):
    """Adapter-boundary checks"""
    strict: bool = False  # raise ModelValidationError instead of only logging
    max_strike: Optional[float] = None  # sanity cap for strikes, None disables


class Settings(BaseSettings):
    """Main settings, loaded from environment variables"""
    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="TRADETYPES_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore"
    )

    environment: Environment = Environment.DEVELOPMENT

    logging: LoggingSettings = LoggingSettings()
    errors: ErrorPolicySettings = ErrorPolicySettings()
    validation: ValidationSettings = ValidationSettings()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Process-wide settings; call ``get_settings.cache_clear()`` after env changes."""
    return Settings()
