"""
Load ClientConfig from the environment, .env files, or YAML/JSON files.

Example:
    >>> from myclient.core.env_config import load_from_env, ConfigFileLoader
    >>>
    >>> config = load_from_env()
    >>> config = ConfigFileLoader.from_file("myclient.yaml")
"""

from .loader import load_from_env
from .validator import MyclientSettings
from .file_loader import ConfigFileLoader, CONFIG_FILE_ENV

__all__ = [
    "load_from_env",
    "MyclientSettings",
    "ConfigFileLoader",
    "CONFIG_FILE_ENV",
]
