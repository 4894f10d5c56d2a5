"""Trace middleware: one trace ID per request.

- Honors an incoming X-Trace-Id header, otherwise generates one
- Stores it on request.state for error responses
- Binds it into structlog's context so every log line carries it
- Echoes it back in the X-Trace-Id response header
"""

from __future__ import annotations

from typing import Awaitable, Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from uuid_extensions import uuid7


class TraceMiddleware(BaseHTTPMiddleware):
    """Starlette middleware that tags each request with a trace ID."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        trace_id = request.headers.get("X-Trace-Id") or str(uuid7())
        request.state.trace_id = trace_id
        structlog.contextvars.bind_contextvars(trace_id=trace_id)
        try:
            response = await call_next(request)
            response.headers["X-Trace-Id"] = trace_id
            return response
        finally:
            structlog.contextvars.clear_contextvars()
