"""
Tests for configuration loader.
"""

import os

import pytest

from myclient.core.config import ClientConfig, TimeoutConfig
from myclient.core.env_config.loader import load_from_env


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate from MYCLIENT_* variables and any .env in the working directory."""
    for name in list(os.environ):
        if name.upper().startswith("MYCLIENT_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


class TestLoadFromEnv:
    """Test load_from_env function."""

    def test_load_with_defaults(self):
        """Test loading with default values."""
        config = load_from_env()
        assert isinstance(config, ClientConfig)
        assert config.base_url == "http://localhost:4000"
        assert config.timeout is None
        assert config.verify_ssl is True
        assert config.logging is None

    def test_load_from_environment(self, monkeypatch):
        monkeypatch.setenv("MYCLIENT_BASE_URL", "https://versions.example.com/")
        monkeypatch.setenv("MYCLIENT_TIMEOUT_READ", "10")
        monkeypatch.setenv("MYCLIENT_VERIFY_SSL", "false")

        config = load_from_env()

        assert config.base_url == "https://versions.example.com"
        assert config.timeout == TimeoutConfig(connect=10, read=10)
        assert config.verify_ssl is False

    def test_load_from_env_file(self, tmp_path):
        """Test loading from .env file."""
        env_file = tmp_path / "custom.env"
        env_file.write_text(
            "MYCLIENT_BASE_URL=https://test.example.com\n"
            "MYCLIENT_TIMEOUT_CONNECT=15.0\n"
        )

        config = load_from_env(env_file=str(env_file))

        assert config.base_url == "https://test.example.com"
        assert config.timeout.connect == 15
        assert config.timeout.read == 30

    def test_default_env_file_in_working_directory(self, tmp_path):
        (tmp_path / ".env").write_text("MYCLIENT_BASE_URL=http://from-dotenv:4000\n")

        assert load_from_env().base_url == "http://from-dotenv:4000"

    def test_environment_beats_env_file(self, tmp_path, monkeypatch):
        env_file = tmp_path / "custom.env"
        env_file.write_text("MYCLIENT_BASE_URL=https://file.example.com\n")
        monkeypatch.setenv("MYCLIENT_BASE_URL", "https://env.example.com")

        assert load_from_env(env_file=str(env_file)).base_url == "https://env.example.com"

    def test_load_with_overrides(self, monkeypatch):
        """Test that overrides take priority."""
        monkeypatch.setenv("MYCLIENT_BASE_URL", "https://env.example.com")

        config = load_from_env(base_url="https://override.com", timeout_connect=20.0)

        assert config.base_url == "https://override.com"
        assert config.timeout.connect == 20

    def test_logging_disabled_by_default(self, monkeypatch):
        monkeypatch.setenv("MYCLIENT_LOG_LEVEL", "DEBUG")

        assert load_from_env().logging is None

    def test_logging_enabled(self, monkeypatch, tmp_path):
        monkeypatch.setenv("MYCLIENT_LOG_ENABLED", "true")
        monkeypatch.setenv("MYCLIENT_LOG_LEVEL", "debug")
        monkeypatch.setenv("MYCLIENT_LOG_FORMAT", "JSON")
        monkeypatch.setenv("MYCLIENT_LOG_FILE_PATH", str(tmp_path / "myclient.log"))

        logging_config = load_from_env().logging

        assert logging_config.level.value == "DEBUG"
        assert logging_config.format.value == "json"
        assert logging_config.enable_file is True
        assert logging_config.file_path == str(tmp_path / "myclient.log")

    def test_invalid_base_url(self, monkeypatch):
        monkeypatch.setenv("MYCLIENT_BASE_URL", "localhost:4000")

        with pytest.raises(ValueError, match="base_url must start with http"):
            load_from_env()

    def test_invalid_timeout(self, monkeypatch):
        monkeypatch.setenv("MYCLIENT_TIMEOUT_READ", "-1")

        with pytest.raises(ValueError):
            load_from_env()
