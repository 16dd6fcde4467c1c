"""
Request diagnostics: SQL statement counting and per-request access logging.

Statements are counted through a SQLAlchemy ``before_cursor_execute`` hook
into a ``ContextVar`` that the middleware resets at the start of every
HTTP request.  The middleware is plain ASGI so the endpoint runs in the
same task and its counter updates stay visible.
"""
import logging
import time
from contextvars import ContextVar

from sqlalchemy import event
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from blog_api.config import settings

logger = logging.getLogger(__name__)

query_count_var: ContextVar[int] = ContextVar("query_count", default=0)


def _count_statement(conn, cursor, statement, parameters, context, executemany):
    query_count_var.set(query_count_var.get() + 1)


def install_query_counter(engine) -> None:
    """Hook statement counting onto *engine*.  Safe to call more than once."""
    sync_engine = engine.sync_engine
    if not event.contains(sync_engine, "before_cursor_execute", _count_statement):
        event.listen(sync_engine, "before_cursor_execute", _count_statement)


def _diagnostic_headers(duration_ms: float, queries: int) -> list[tuple[bytes, bytes]]:
    return [
        (b"x-response-time-ms", str(duration_ms).encode()),
        (b"x-query-count", str(queries).encode()),
    ]


class RequestDiagnosticsMiddleware:
    """
    Adds ``X-Response-Time-Ms`` and ``X-Query-Count`` to every HTTP
    response and logs one access line per request.  Requests slower than
    ``settings.SLOW_REQUEST_MS`` are logged at WARNING instead of INFO.
    """

    def __init__(self, app: ASGIApp, slow_request_ms: float | None = None) -> None:
        self.app = app
        self.slow_request_ms = (
            settings.SLOW_REQUEST_MS if slow_request_ms is None else slow_request_ms
        )

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        query_count_var.set(0)
        started = time.perf_counter()

        async def send_with_diagnostics(message: Message) -> None:
            if message["type"] == "http.response.start":
                duration_ms = round((time.perf_counter() - started) * 1000, 2)
                queries = query_count_var.get()
                message["headers"] = [
                    *message.get("headers", []),
                    *_diagnostic_headers(duration_ms, queries),
                ]
                self._log_request(scope, message["status"], duration_ms, queries)
            await send(message)

        await self.app(scope, receive, send_with_diagnostics)

    def _log_request(self, scope: Scope, status: int, duration_ms: float, queries: int) -> None:
        level = logging.WARNING if duration_ms >= self.slow_request_ms else logging.INFO
        logger.log(
            level,
            "%s %s -> %s (%.2f ms, %d queries)",
            scope["method"],
            scope["path"],
            status,
            duration_ms,
            queries,
        )
