"""
Request diagnostics middleware: response headers, access log level, and the
SQL statement counter hook.
"""
import logging

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy import event

from blog_api.middleware import (
    RequestDiagnosticsMiddleware,
    _count_statement,
    install_query_counter,
)


async def _plain_app(scope, receive, send):
    await send({
        "type": "http.response.start",
        "status": 204,
        "headers": [(b"x-app", b"plain")],
    })
    await send({"type": "http.response.body", "body": b""})


def _client(slow_request_ms: float) -> AsyncClient:
    app = RequestDiagnosticsMiddleware(_plain_app, slow_request_ms=slow_request_ms)
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest.mark.asyncio
async def test_headers_appended_to_app_headers():
    async with _client(slow_request_ms=10_000) as client:
        resp = await client.get("/anything")
    assert resp.status_code == 204
    assert resp.headers["x-app"] == "plain"
    assert float(resp.headers["x-response-time-ms"]) >= 0
    assert resp.headers["x-query-count"] == "0"


@pytest.mark.asyncio
async def test_access_line_logged_at_info(caplog):
    caplog.set_level(logging.INFO, logger="blog_api.middleware")
    async with _client(slow_request_ms=10_000) as client:
        await client.get("/fast")

    records = [r for r in caplog.records if r.name == "blog_api.middleware"]
    assert len(records) == 1
    assert records[0].levelno == logging.INFO
    assert "GET /fast -> 204" in records[0].getMessage()


@pytest.mark.asyncio
async def test_slow_request_logged_at_warning(caplog):
    """A zero threshold makes every request count as slow."""
    caplog.set_level(logging.INFO, logger="blog_api.middleware")
    async with _client(slow_request_ms=0) as client:
        await client.delete("/slow")

    records = [r for r in caplog.records if r.name == "blog_api.middleware"]
    assert len(records) == 1
    assert records[0].levelno == logging.WARNING
    assert "DELETE /slow -> 204" in records[0].getMessage()


@pytest.mark.asyncio
async def test_access_line_reports_app_queries(async_client: AsyncClient, caplog):
    caplog.set_level(logging.INFO, logger="blog_api.middleware")
    resp = await async_client.get("/api/v1/categories")
    assert resp.status_code == 200

    records = [r for r in caplog.records if r.name == "blog_api.middleware"]
    assert len(records) == 1
    message = records[0].getMessage()
    assert "GET /api/v1/categories -> 200" in message
    assert f"{resp.headers['x-query-count']} queries" in message


@pytest.mark.asyncio
async def test_install_query_counter_is_idempotent(async_client: AsyncClient, sqlite_engine):
    first = await async_client.get("/api/v1/categories")

    install_query_counter(sqlite_engine)
    install_query_counter(sqlite_engine)

    second = await async_client.get("/api/v1/categories")
    assert event.contains(sqlite_engine.sync_engine, "before_cursor_execute", _count_statement)
    assert second.headers["x-query-count"] == first.headers["x-query-count"]
