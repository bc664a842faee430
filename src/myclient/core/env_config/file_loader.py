"""
Configuration file loader for YAML and JSON files.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from ..config import ClientConfig, TimeoutConfig, DEFAULT_BASE_URL
from ..exceptions import ConfigValidationError
from ..logging import LoggingConfig

CONFIG_FILE_ENV = "MYCLIENT_CONFIG_FILE"


class ConfigFileLoader:
    """
    Загрузчик конфигурации из файлов.

    Пример YAML:

        myclient:
          base_url: http://localhost:4000
          timeout:
            connect: 3
            read: 10
          verify_ssl: true
          logging:
            level: DEBUG
            format: json

    Examples:
        >>> config = ConfigFileLoader.from_file("myclient.yaml")
        >>> config = ConfigFileLoader.from_env_path()  # MYCLIENT_CONFIG_FILE
    """

    @staticmethod
    def from_yaml(path: Union[str, Path]) -> ClientConfig:
        """
        Загрузить конфиг из YAML файла.

        Raises:
            FileNotFoundError: Если файл не найден
            ConfigValidationError: Если конфиг невалидный
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigValidationError(f"Invalid YAML syntax in {path}: {e}")

        return ConfigFileLoader._build_config(data, str(path))

    @staticmethod
    def from_json(path: Union[str, Path]) -> ClientConfig:
        """
        Загрузить конфиг из JSON файла.

        Raises:
            FileNotFoundError: Если файл не найден
            ConfigValidationError: Если конфиг невалидный
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigValidationError(f"Invalid JSON syntax in {path}: {e}")

        return ConfigFileLoader._build_config(data, str(path))

    @staticmethod
    def from_file(path: Union[str, Path]) -> ClientConfig:
        """
        Автоопределение формата по расширению (.yaml, .yml, .json).

        Raises:
            ValueError: Если формат не поддерживается
        """
        path = Path(path)
        suffix = path.suffix.lower()

        if suffix in (".yaml", ".yml"):
            return ConfigFileLoader.from_yaml(path)
        elif suffix == ".json":
            return ConfigFileLoader.from_json(path)
        else:
            raise ValueError(
                f"Unsupported config file format: {suffix}. "
                f"Supported formats: .yaml, .yml, .json"
            )

    @staticmethod
    def from_env_path() -> Optional[ClientConfig]:
        """Загрузить из пути в MYCLIENT_CONFIG_FILE; None если переменная не задана."""
        config_path = os.environ.get(CONFIG_FILE_ENV)
        if not config_path:
            return None

        return ConfigFileLoader.from_file(config_path)

    @staticmethod
    def _section(config_data: Dict[str, Any], name: str, source: str) -> Optional[Dict[str, Any]]:
        section = config_data.get(name)
        if section is not None and not isinstance(section, dict):
            raise ConfigValidationError(f"{name} must be a dictionary in {source}")
        return section

    @staticmethod
    def _build_config(data: Any, source: str) -> ClientConfig:
        if not data:
            raise ConfigValidationError(f"Empty config file: {source}")

        if not isinstance(data, dict):
            raise ConfigValidationError(
                f"Config must be a dictionary, got {type(data).__name__} in {source}"
            )

        # Секция myclient опциональна
        config_data = data.get("myclient", data)
        if not isinstance(config_data, dict):
            raise ConfigValidationError(
                f"Config must be a dictionary, got {type(config_data).__name__} in {source}"
            )

        try:
            timeout_cfg = None
            timeout_data = ConfigFileLoader._section(config_data, "timeout", source)
            if timeout_data is not None:
                timeout_cfg = TimeoutConfig(
                    connect=timeout_data.get("connect", 5),
                    read=timeout_data.get("read", 30),
                )

            logging_cfg = None
            logging_data = ConfigFileLoader._section(config_data, "logging", source)
            if logging_data is not None:
                logging_cfg = LoggingConfig.create(
                    level=logging_data.get("level", "INFO"),
                    format=logging_data.get("format", "text"),
                    enable_console=logging_data.get("enable_console", True),
                    enable_file=logging_data.get("enable_file", False),
                    file_path=logging_data.get("file_path"),
                    enable_correlation_id=logging_data.get("enable_correlation_id", True),
                )

            return ClientConfig(
                base_url=str(config_data.get("base_url", DEFAULT_BASE_URL)).rstrip("/"),
                timeout=timeout_cfg,
                verify_ssl=bool(config_data.get("verify_ssl", True)),
                allow_redirects=bool(config_data.get("allow_redirects", True)),
                logging=logging_cfg,
            )

        except (ValueError, TypeError) as e:
            raise ConfigValidationError(f"Invalid config in {source}: {e}")
