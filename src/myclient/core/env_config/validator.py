"""
Pydantic settings for environment configuration.
"""

from typing import Optional, Literal
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..config import DEFAULT_BASE_URL


class MyclientSettings(BaseSettings):
    """
    myclient configuration from environment variables.

    Reads from:
    1. Environment variables (MYCLIENT_*)
    2. .env file
    3. Defaults

    Example .env file:
        MYCLIENT_BASE_URL=http://localhost:4000
        MYCLIENT_TIMEOUT_READ=10
        MYCLIENT_LOG_ENABLED=true
        MYCLIENT_LOG_LEVEL=DEBUG
        MYCLIENT_LOG_FORMAT=json
    """

    model_config = SettingsConfigDict(
        env_prefix='MYCLIENT_',
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore',
    )

    base_url: str = Field(default=DEFAULT_BASE_URL, description="Service base URL")

    # None keeps the transport default (no timeout)
    timeout_connect: Optional[float] = Field(default=None, gt=0)
    timeout_read: Optional[float] = Field(default=None, gt=0)

    verify_ssl: bool = Field(default=True)
    allow_redirects: bool = Field(default=True)

    # Logging stays off unless MYCLIENT_LOG_ENABLED is set
    log_enabled: bool = Field(default=False)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")
    log_format: Literal["json", "text"] = Field(default="text")
    log_enable_console: bool = Field(default=True)
    log_file_path: Optional[str] = None
    log_max_bytes: int = Field(default=10 * 1024 * 1024, gt=0)
    log_backup_count: int = Field(default=5, ge=0)
    log_enable_correlation_id: bool = Field(default=True)

    @field_validator('log_level', mode='before')
    @classmethod
    def upper_level(cls, v):
        return v.upper() if isinstance(v, str) else v

    @field_validator('log_format', mode='before')
    @classmethod
    def lower_format(cls, v):
        return v.lower() if isinstance(v, str) else v

    @field_validator('base_url')
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return v.rstrip("/")
