"""
HTTP middleware: access logging and per‑request deadlines.

``log_requests`` writes one line per request in the form
``GET /api/v1/users -> 200 (0.412ms)`` to the ``user_api.access``
logger.  ``TimeoutMiddleware`` answers ``503`` when a request takes
longer than its deadline to be read and handled.
"""

import asyncio
import logging
import time
from typing import Awaitable, Callable

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send


access_logger = logging.getLogger("user_api.access")
logger = logging.getLogger(__name__)


async def log_requests(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Log method, path, status and duration of every request."""
    start = time.perf_counter()
    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        return response
    finally:
        duration_ms = (time.perf_counter() - start) * 1000
        access_logger.info(
            "%s %s -> %d (%.3fms)",
            request.method,
            request.url.path,
            status_code,
            duration_ms,
        )


class TimeoutMiddleware:
    """Abort requests that exceed ``timeout`` seconds.

    If the deadline passes before the response has started, the client
    receives ``503 {"error": "request timeout"}``.  Once the response
    has started there is nothing left to send, so the request is just
    dropped.
    """

    def __init__(self, app: ASGIApp, timeout: float) -> None:
        self.app = app
        self.timeout = timeout

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def send_wrapper(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await asyncio.wait_for(self.app(scope, receive, send_wrapper), self.timeout)
        except asyncio.TimeoutError:
            logger.warning(
                "Request %s %s exceeded %.1fs deadline",
                scope.get("method"),
                scope.get("path"),
                self.timeout,
            )
            if not response_started:
                response = JSONResponse({"error": "request timeout"}, status_code=503)
                await response(scope, receive, send)
