"""Tests for structured logging helpers."""

import structlog

from src.observability.logging import bind_context, clear_context


class TestContext:
    def test_bind_and_clear(self):
        bind_context(request_id="req-1")
        assert structlog.contextvars.get_contextvars()["request_id"] == "req-1"

        clear_context()
        assert structlog.contextvars.get_contextvars() == {}
