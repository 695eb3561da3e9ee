"""Tests for API rate limiting configuration."""

from starlette.requests import Request

from src.api.rate_limit import _get_rate_limit_key


class TestRateLimitKeyExtraction:
    def test_uses_api_key_when_present(self):
        scope = {
            "type": "http",
            "method": "POST",
            "path": "/events",
            "headers": [(b"x-api-key", b"test-key-123")],
        }
        assert _get_rate_limit_key(Request(scope)) == "test-key-123"

    def test_falls_back_to_ip(self):
        scope = {
            "type": "http",
            "method": "POST",
            "path": "/events",
            "headers": [],
            "client": ("192.168.1.100", 12345),
        }
        assert _get_rate_limit_key(Request(scope)) == "192.168.1.100"
