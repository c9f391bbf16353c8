# src/aws_io/settings.py
from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """
    Single source of truth for the AWS client settings.

    Configuration precedence:
    1. Environment variables (highest priority)
    2. .env file (if exists)
    3. Default values in this class (lowest priority)

    Transport tuning (keep-alive, pool size) is intentionally not here, it is
    fixed in aws_io.clients when the process starts.

    Usage:
        from aws_io.settings import get_settings
        settings = get_settings()
        region = settings.aws_region
    """

    # AWS Core Settings
    aws_region: str = Field(
        default="us-east-1",
        alias="AWS_DEFAULT_REGION"
    )

    aws_access_key_id: Optional[str] = Field(
        default=None,
        alias="AWS_ACCESS_KEY_ID"
    )

    aws_secret_access_key: Optional[str] = Field(
        default=None,
        alias="AWS_SECRET_ACCESS_KEY"
    )

    aws_endpoint_url: Optional[str] = Field(
        default=None,
        alias="AWS_ENDPOINT_URL",
        description="Custom endpoint, e.g. moto server or localstack"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )

    # Metrics
    metrics_namespace: str = Field(
        default="aws_io",
        description="Prefix for the prometheus metric names"
    )

    @field_validator('log_level')
    @classmethod
    def normalize_log_level(cls, v):
        """Accept any casing and reject unknown level names."""
        level = v.upper()
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if level not in valid_levels:
            raise ValueError(f"Invalid log_level: {v}. Must be one of {valid_levels}")
        return level

    @field_validator('aws_endpoint_url')
    @classmethod
    def empty_endpoint_is_none(cls, v):
        """Treat AWS_ENDPOINT_URL="" the same as unset."""
        return v or None

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    This ensures we only create one Settings instance per process.
    """
    return Settings()
