"""Request ID middleware."""

import uuid
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request


REQUEST_ID_HEADER = "X-Request-ID"


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Middleware to tag every request with an ID.

    An incoming X-Request-ID header is reused, otherwise a new ID is
    generated. The ID is stored in request state and echoed back in the
    response headers.
    """

    async def dispatch(self, request: Request, call_next: Callable):
        """Assign request ID and process request."""
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
