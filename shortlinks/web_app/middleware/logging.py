"""Request logging middleware."""

import time
import logging
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from typing import Callable

from shortlinks.lib.common.headers import client_ip


class LoggingMiddleware(BaseHTTPMiddleware):
    """Writes one access line per request to the shortlinks.access logger."""

    def __init__(self, app, logger: logging.Logger = None):
        """Initialize logging middleware."""
        super().__init__(app)
        self.logger = logger or logging.getLogger("shortlinks.access")

    async def dispatch(self, request: Request, call_next: Callable):
        """Log request and response."""
        start_time = time.perf_counter()
        peer = request.client.host if request.client else None
        ip = client_ip(request.headers, fallback=peer)
        path = request.url.path
        if request.url.query:
            path = f"{path}?{request.url.query}"

        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (time.perf_counter() - start_time) * 1000
            self.logger.error(
                f"[{request.method}] {path} 500 - IP: {ip} ({duration_ms:.2f}ms)"
            )
            raise

        duration_ms = (time.perf_counter() - start_time) * 1000
        self.logger.info(
            f"[{request.method}] {path} {response.status_code} - IP: {ip} ({duration_ms:.2f}ms)"
        )

        return response
