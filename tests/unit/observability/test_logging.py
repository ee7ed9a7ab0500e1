"""Unit tests for observability logging and correlation."""

from __future__ import annotations

import asyncio
import json
import logging

import pytest
import structlog
from fastapi import FastAPI
from fastapi.testclient import TestClient
from structlog.testing import capture_logs

from flagengine.adapters.fastapi import FastAPICorrelationIdMiddleware
from flagengine.observability.correlation import CorrelationContext, RequestContext
from flagengine.observability.logging import CorrelationProcessor, JsonLoggerFactory, get_logger


@pytest.fixture(autouse=True)
def _reset_context() -> None:
    CorrelationContext.clear()


# ---------------------------------------------------------------------------
# CorrelationContext
# ---------------------------------------------------------------------------


class TestCorrelationContext:
    def test_empty_by_default(self) -> None:
        assert CorrelationContext.get() is None

    def test_set_get_clear(self) -> None:
        CorrelationContext.set(RequestContext("cid-1"))
        ctx = CorrelationContext.get()
        assert ctx is not None and ctx.correlation_id == "cid-1"
        CorrelationContext.clear()
        assert CorrelationContext.get() is None

    def test_new_generates_distinct_ids(self) -> None:
        assert RequestContext.new().correlation_id != RequestContext.new().correlation_id

    def test_isolated_per_task(self) -> None:
        async def worker(cid: str) -> str | None:
            CorrelationContext.set(RequestContext(cid))
            await asyncio.sleep(0)
            ctx = CorrelationContext.get()
            return ctx.correlation_id if ctx else None

        async def run() -> list[str | None]:
            return list(await asyncio.gather(worker("a"), worker("b")))

        assert asyncio.run(run()) == ["a", "b"]


# ---------------------------------------------------------------------------
# CorrelationProcessor / get_logger
# ---------------------------------------------------------------------------


class TestCorrelationProcessor:
    def test_adds_correlation_id(self) -> None:
        CorrelationContext.set(RequestContext("cid-42"))
        event = CorrelationProcessor()(None, "info", {"event": "x"})
        assert event["correlation_id"] == "cid-42"

    def test_no_context_leaves_event_alone(self) -> None:
        assert CorrelationProcessor()(None, "info", {"event": "x"}) == {"event": "x"}

    def test_does_not_overwrite_explicit_value(self) -> None:
        CorrelationContext.set(RequestContext("ambient"))
        event = CorrelationProcessor()(None, "info", {"event": "x", "correlation_id": "explicit"})
        assert event["correlation_id"] == "explicit"


class TestGetLogger:
    def test_bound_values_are_emitted(self) -> None:
        with capture_logs() as logs:
            get_logger("flags.test", component="cache").info("flag_cache.hit", key="flag:f")
        assert logs == [
            {"component": "cache", "key": "flag:f", "event": "flag_cache.hit", "log_level": "info"}
        ]


class TestJsonLoggerFactory:
    def test_renders_json_with_correlation(self, capsys: pytest.CaptureFixture[str]) -> None:
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            JsonLoggerFactory.configure("debug")
            assert root.level == logging.DEBUG
            CorrelationContext.set(RequestContext("cid-json"))
            logging.getLogger("flags.stdlib").info("plain message")
            line = capsys.readouterr().err.strip().splitlines()[-1]
            payload = json.loads(line)
            assert payload["event"] == "plain message"
            assert payload["correlation_id"] == "cid-json"
            assert payload["level"] == "info"
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
            structlog.reset_defaults()

    def test_exception_rendered_with_traceback(self, capsys: pytest.CaptureFixture[str]) -> None:
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            JsonLoggerFactory.configure("info")
            try:
                raise RuntimeError("boom")
            except RuntimeError as exc:
                get_logger("flags.errors").error("http.unhandled_error", exc_info=exc)
            line = capsys.readouterr().err.strip().splitlines()[-1]
            payload = json.loads(line)
            assert payload["event"] == "http.unhandled_error"
            assert "exc_info" not in payload
            assert payload["exception"].startswith("Traceback")
            assert "RuntimeError: boom" in payload["exception"]
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
            structlog.reset_defaults()

    def test_unknown_level_falls_back_to_info(self) -> None:
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            JsonLoggerFactory.configure("chatty")
            assert root.level == logging.INFO
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
            structlog.reset_defaults()


# ---------------------------------------------------------------------------
# Middleware → context
# ---------------------------------------------------------------------------


class TestCorrelationMiddleware:
    def test_request_sees_header_id(self) -> None:
        app = FastAPI()
        app.add_middleware(FastAPICorrelationIdMiddleware)
        captured: list[str] = []

        @app.get("/capture")
        async def capture() -> dict[str, str]:
            ctx = CorrelationContext.get()
            if ctx:
                captured.append(ctx.correlation_id)
            return {"ok": "1"}

        resp = TestClient(app).get("/capture", headers={"X-Correlation-ID": "abc"})
        assert resp.headers["x-correlation-id"] == "abc"
        assert captured == ["abc"]
