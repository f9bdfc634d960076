"""
Access Logging Middleware

Writes one access line per request to the "shortlinks.access" logger:

    GET /abc123 302 0.41ms IP:10.0.0.7 ref:https://news.example.com

The level follows the outcome so failed lookups stand out without enabling
debug output: 5xx is ERROR, 4xx (unknown or expired codes, bad input) is
WARNING, everything else INFO. Health checks are logged at DEBUG.
Handling time is also returned in the X-Process-Time header (seconds).
"""

import logging
import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("shortlinks.access")

QUIET_PATHS = frozenset({"/health"})


def get_client_ip(request: Request) -> str:
    """First X-Forwarded-For hop if behind a proxy, else the peer address."""
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


def level_for(path: str, status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    if path in QUIET_PATHS:
        return logging.DEBUG
    return logging.INFO


class AccessLogMiddleware(BaseHTTPMiddleware):

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - started

        path = request.url.path
        logger.log(
            level_for(path, response.status_code),
            "%s %s %d %.2fms IP:%s ref:%s",
            request.method,
            path,
            response.status_code,
            elapsed * 1000,
            get_client_ip(request),
            request.headers.get("Referer", "-"),
        )
        response.headers["X-Process-Time"] = f"{elapsed:.6f}"
        return response


def add_logging_middleware(app):
    """Install access logging on a FastAPI app."""
    app.add_middleware(AccessLogMiddleware)
