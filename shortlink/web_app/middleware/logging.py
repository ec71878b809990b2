"""Logging middleware."""

import time
import logging
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from typing import Callable


class LoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for request/response logging."""

    def __init__(self, app, logger: logging.Logger = None):
        """Initialize logging middleware."""
        super().__init__(app)
        self.logger = logger or logging.getLogger("shortlink.web.middleware")
        self.logger.info("logger middleware enabled")

    async def dispatch(self, request: Request, call_next: Callable):
        """Log one line per completed request."""
        start_time = time.time()

        client_ip = request.client.host if request.client else "unknown"
        user_agent = request.headers.get("user-agent", "")

        # Process request
        response = await call_next(request)

        duration_ms = (time.time() - start_time) * 1000
        request_id = getattr(request.state, "request_id", None)
        response_bytes = response.headers.get("content-length", "0")

        self.logger.info(
            f"request completed: {request.method} {request.url.path} "
            f"remote_addr={client_ip} user_agent={user_agent!r} request_id={request_id} "
            f"status={response.status_code} bytes={response_bytes} duration={duration_ms:.2f}ms"
        )

        return response
