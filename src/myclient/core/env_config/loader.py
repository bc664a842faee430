"""
Configuration loader from environment variables and .env files.
"""

from typing import Optional

from ..config import ClientConfig, TimeoutConfig
from ..logging.config import LoggingConfig
from .validator import MyclientSettings


def load_from_env(env_file: Optional[str] = None, **overrides) -> ClientConfig:
    """
    Load ClientConfig from environment variables.

    Priority (highest to lowest):
    1. **overrides - explicit parameters (same names as MyclientSettings fields)
    2. Environment variables (MYCLIENT_*)
    3. .env file
    4. Defaults

    Args:
        env_file: .env file path (default: ".env" in the working directory)
        **overrides: Explicit overrides, e.g. base_url="http://api:4000"

    Returns:
        ClientConfig instance

    Example:
        >>> config = load_from_env(base_url="http://localhost:4001")
    """
    settings = MyclientSettings(_env_file=env_file or '.env')
    values = settings.model_dump()
    values.update(overrides)

    timeout = None
    if values['timeout_connect'] is not None or values['timeout_read'] is not None:
        read = values['timeout_read'] or TimeoutConfig.read
        timeout = TimeoutConfig(
            connect=values['timeout_connect'] or read,
            read=read,
        )

    logging_config = None
    if values['log_enabled']:
        logging_config = LoggingConfig.create(
            level=values['log_level'],
            format=values['log_format'],
            enable_console=values['log_enable_console'],
            enable_file=bool(values['log_file_path']),
            file_path=values['log_file_path'],
            max_bytes=values['log_max_bytes'],
            backup_count=values['log_backup_count'],
            enable_correlation_id=values['log_enable_correlation_id'],
        )

    return ClientConfig(
        base_url=values['base_url'],
        timeout=timeout,
        verify_ssl=values['verify_ssl'],
        allow_redirects=values['allow_redirects'],
        logging=logging_config,
    )
