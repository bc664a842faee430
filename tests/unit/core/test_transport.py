"""
Tests for RequestsTransport.
"""

from unittest.mock import Mock

import pytest
import requests
import responses

from myclient.core.config import ClientConfig, TimeoutConfig
from myclient.core.outcome import Reason
from myclient.core.transport import (
    RequestsTransport,
    TransportFailure,
    TransportResponse,
    header_list,
    response_headers,
)


class TestRequestsTransport:
    """Test one-shot request execution."""

    @responses.activate
    def test_success(self):
        responses.add(responses.GET, "http://localhost:4000/", json={"version": "0.1.0"}, status=200)

        result = RequestsTransport().request("get", "http://localhost:4000/")

        assert isinstance(result, TransportResponse)
        assert result.status_code == 200
        assert result.body == b'{"version": "0.1.0"}'
        assert ("Content-Type", "application/json") in result.headers

    @responses.activate
    def test_method_is_upper_cased(self):
        responses.add(responses.POST, "http://localhost:4000/", body="", status=201)

        RequestsTransport().request("post", "http://localhost:4000/", body='{"a":1}')

        assert responses.calls[0].request.method == "POST"

    @responses.activate
    def test_headers_from_pair_list(self):
        responses.add(responses.GET, "http://localhost:4000/", body="", status=200)

        RequestsTransport().request("GET", "http://localhost:4000/", headers=[("X-One", "1"), ("X-Two", "2")])

        sent = responses.calls[0].request.headers
        assert sent["X-One"] == "1"
        assert sent["X-Two"] == "2"

    @responses.activate
    def test_duplicate_request_headers_last_wins(self):
        responses.add(responses.GET, "http://localhost:4000/", body="", status=200)

        RequestsTransport().request("GET", "http://localhost:4000/", headers=[("X-One", "1"), ("X-One", "2")])

        assert responses.calls[0].request.headers["X-One"] == "2"

    @responses.activate
    def test_params(self):
        responses.add(responses.GET, "http://localhost:4000/", body="", status=200)

        RequestsTransport().request("GET", "http://localhost:4000/", params={"user": "andrew"})

        assert responses.calls[0].request.url == "http://localhost:4000/?user=andrew"

    @responses.activate
    def test_non_2xx_is_a_response(self):
        responses.add(responses.GET, "http://localhost:4000/", json={"error": "boom"}, status=500)

        result = RequestsTransport().request("GET", "http://localhost:4000/")

        assert isinstance(result, TransportResponse)
        assert result.status_code == 500

    @responses.activate
    def test_failure_is_returned(self):
        responses.add(responses.GET, "http://localhost:4000/", body=requests.exceptions.ConnectTimeout())

        result = RequestsTransport().request("GET", "http://localhost:4000/")

        assert isinstance(result, TransportFailure)
        assert result.reason is Reason.TIMEOUT
        assert isinstance(result.error, requests.exceptions.ConnectTimeout)

    def test_failure_equality_ignores_error(self):
        assert TransportFailure(Reason.NXDOMAIN, ValueError("a")) == TransportFailure(Reason.NXDOMAIN)

    def test_config_options_are_passed(self):
        session = Mock(spec=requests.Session)
        session.request.return_value = Mock(status_code=200, content=b"", headers={}, raw=None)
        config = ClientConfig(timeout=TimeoutConfig(connect=2, read=7), verify_ssl=False, allow_redirects=False)

        RequestsTransport(config=config, session=session).request("get", "http://localhost:4000/")

        kwargs = session.request.call_args.kwargs
        assert kwargs["method"] == "GET"
        assert kwargs["timeout"] == (2, 7)
        assert kwargs["verify"] is False
        assert kwargs["allow_redirects"] is False

    def test_default_config_has_no_timeout(self):
        session = Mock(spec=requests.Session)
        session.request.return_value = Mock(status_code=200, content=b"", headers={}, raw=None)

        RequestsTransport(session=session).request("GET", "http://localhost:4000/")

        assert "timeout" not in session.request.call_args.kwargs

    def test_injected_session_is_not_closed(self):
        session = Mock(spec=requests.Session)
        session.request.return_value = Mock(status_code=204, content=b"", headers={}, raw=None)

        RequestsTransport(session=session).request("GET", "http://localhost:4000/")

        session.close.assert_not_called()


class TestResponseHeaders:
    """Test response header extraction."""

    def test_raw_headers_keep_duplicates(self):
        response = Mock()
        response.raw.headers.items.return_value = [("Set-Cookie", "a=1"), ("Set-Cookie", "b=2")]

        assert response_headers(response) == [("Set-Cookie", "a=1"), ("Set-Cookie", "b=2")]

    def test_falls_back_to_response_headers(self):
        response = Mock(raw=None, headers={"Content-Type": "text/plain"})

        assert response_headers(response) == [("Content-Type", "text/plain")]


class TestHeaderList:
    """Test header normalisation."""

    @pytest.mark.parametrize("headers, expected", [
        (None, []),
        ([], []),
        ({}, []),
        ({"A": "1"}, [("A", "1")]),
        ([("A", "1"), ("A", "2")], [("A", "1"), ("A", "2")]),
        ((("A", "1"),), [("A", "1")]),
    ])
    def test_header_list(self, headers, expected):
        assert header_list(headers) == expected
