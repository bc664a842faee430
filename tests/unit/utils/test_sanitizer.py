"""Tests for sensitive data masking."""

import pytest

from myclient.utils.sanitizer import (
    MASK,
    is_sensitive_key,
    mask_headers,
    mask_sensitive_data,
    mask_string,
    mask_url,
)


class TestIsSensitiveKey:
    """Test key detection."""

    @pytest.mark.parametrize("key", ["password", "Authorization", "X-API-KEY", "token", "Cookie"])
    def test_sensitive(self, key):
        assert is_sensitive_key(key)

    @pytest.mark.parametrize("key", ["user", "Content-Type", "version", 42, None])
    def test_not_sensitive(self, key):
        assert not is_sensitive_key(key)


class TestMaskString:
    """Test pattern masking inside strings."""

    def test_bearer(self):
        assert mask_string("Bearer abc.def-123") == f"Bearer {MASK}"

    def test_basic(self):
        assert mask_string("Basic dXNlcjpwYXNz") == f"Basic {MASK}"

    def test_key_value(self):
        assert mask_string("user=andrew&token=abc") == f"user=andrew&token={MASK}"

    def test_plain_text_unchanged(self):
        assert mask_string("Response received") == "Response received"


class TestMaskSensitiveData:
    """Test recursive masking."""

    def test_dict(self):
        data = {"user": "alice", "password": "secret123"}
        assert mask_sensitive_data(data) == {"user": "alice", "password": MASK}

    def test_nested(self):
        data = {"body": {"credentials": [{"api_key": "k"}]}}
        assert mask_sensitive_data(data) == {"body": {"credentials": [{"api_key": MASK}]}}

    def test_header_pairs(self):
        headers = [("Authorization", "Bearer abc"), ("Accept", "application/json")]
        assert mask_sensitive_data(headers) == [("Authorization", MASK), ("Accept", "application/json")]

    def test_original_is_not_modified(self):
        data = {"token": "abc"}
        mask_sensitive_data(data)
        assert data == {"token": "abc"}

    def test_other_values_unchanged(self):
        assert mask_sensitive_data(200) == 200
        assert mask_sensitive_data(None) is None
        assert mask_sensitive_data(b"raw") == b"raw"

    def test_custom_mask(self):
        assert mask_sensitive_data({"secret": "x"}, mask="***") == {"secret": "***"}


class TestMaskUrl:
    """Test URL query masking."""

    def test_sensitive_param(self):
        url = "http://api.local/data?user=andrew&token=abc"
        assert mask_url(url) == f"http://api.local/data?user=andrew&token={MASK}"

    def test_no_query(self):
        assert mask_url("http://localhost:4000/") == "http://localhost:4000/"

    def test_empty(self):
        assert mask_url("") == ""


class TestMaskHeaders:
    """Test header masking."""

    def test_mapping(self):
        assert mask_headers({"X-Api-Key": "k", "Accept": "*/*"}) == [("X-Api-Key", MASK), ("Accept", "*/*")]

    def test_pairs_keep_duplicates(self):
        headers = [("Cookie", "a=1"), ("Cookie", "b=2")]
        assert mask_headers(headers) == [("Cookie", MASK), ("Cookie", MASK)]

    def test_none(self):
        assert mask_headers(None) == []
