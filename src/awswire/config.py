"""Configuration management for awswire."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

TimestampFormat = Literal["iso8601", "unixtimestamp", "rfc822"]


class Settings(BaseSettings):
    """Library settings."""

    model_config = SettingsConfigDict(
        env_prefix="AWSWIRE_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Wire Configuration
    json_timestamp_format: TimestampFormat = Field(
        default="iso8601", description="Timestamp format for JSON bodies when a field does not name one"
    )
    default_content_type: str = Field(
        default="application/x-amz-json-1.1", description="Content-Type for JSON 1.1 requests whose binding has none"
    )
    rest_json_content_type: str = Field(
        default="application/json", description="Content-Type for rest-json requests whose binding has none"
    )
    query_content_type: str = Field(
        default="application/x-www-form-urlencoded; charset=utf-8",
        description="Content-Type for query protocol requests",
    )

    # Logging Configuration
    log_level: str = Field(default="WARNING", description="Log level")
    log_format: Literal["text", "json"] = Field(default="text", description="Log format")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get library settings.

    Returns:
        Settings instance, loaded from the environment once per process
    """
    return Settings()
