"""
Pytest configuration and fixtures for myclient tests.
"""

import logging

import pytest
import responses as responses_lib

from myclient.core.logging import configure_logging, clear_correlation_id, LOGGER_NAME


class StubTransport:
    """Transport double: returns a fixed result and records every request."""

    def __init__(self, result):
        self.result = result
        self.calls = []

    def request(self, method, url, body=None, headers=None, params=None):
        self.calls.append({
            "method": method,
            "url": url,
            "body": body,
            "headers": headers,
            "params": params,
        })
        return self.result


@pytest.fixture
def base_url():
    """Base URL of the version service used in examples."""
    return "http://localhost:4000"


@pytest.fixture
def mock_responses():
    """Mock HTTP responses using responses library."""
    with responses_lib.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


@pytest.fixture
def stub_transport():
    """Factory for StubTransport instances."""
    return StubTransport


@pytest.fixture(autouse=True)
def reset_logging():
    """Restore the library logging defaults after every test."""
    yield
    configure_logging(None)
    clear_correlation_id()
    logging.getLogger(LOGGER_NAME).setLevel(logging.NOTSET)


@pytest.fixture
def logging_config_with_file(tmp_path):
    """JSON file logging into a temporary directory."""
    from myclient.core.logging import LoggingConfig

    return LoggingConfig.create(
        level="DEBUG",
        format="json",
        enable_console=False,
        enable_file=True,
        file_path=str(tmp_path / "logs" / "myclient.log"),
    )
