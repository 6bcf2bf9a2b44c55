"""
Request logging middleware.

Logs one line per request once the response is known, with its duration.
Liveness probes are not logged. The duration is also returned to the
client in the X-Process-Time header (milliseconds).

Dependencies: fastapi, starlette
System role: Request/response observability
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

UNLOGGED_PATHS = frozenset({"/health"})


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and elapsed time of each request."""

    async def dispatch(self, request: Request, call_next) -> Response:
        started = time.perf_counter()
        path = request.url.path

        try:
            response: Response = await call_next(request)
        except Exception:
            logger.exception(
                "%s %s failed",
                request.method,
                path,
                extra={"elapsed_ms": _elapsed_ms(started)},
            )
            raise

        elapsed_ms = _elapsed_ms(started)
        response.headers["X-Process-Time"] = str(elapsed_ms)
        if path not in UNLOGGED_PATHS:
            level = logging.WARNING if response.status_code >= 500 else logging.INFO
            logger.log(
                level,
                "%s %s -> %d (%.2f ms)",
                request.method,
                path,
                response.status_code,
                elapsed_ms,
                extra={
                    "status_code": response.status_code,
                    "client_host": request.client.host if request.client else None,
                },
            )
        return response


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)
