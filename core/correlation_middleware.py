"""
Correlation ID Middleware

Injects correlation IDs into requests for distributed tracing and logs one
line per completed request. The correlation ID is propagated through all
log entries for the request.
"""

import time
import uuid
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from core.logging import get_logger, set_correlation_id

log = get_logger("http")


class CorrelationMiddleware(BaseHTTPMiddleware):
    """
    Middleware to inject and propagate correlation IDs.

    - Reads X-Correlation-ID from incoming request headers
    - Generates a new UUID if not present
    - Sets the correlation ID in context for logging
    - Adds X-Correlation-ID to response headers
    """

    HEADER_NAME = "X-Correlation-ID"

    async def dispatch(self, request: Request, call_next) -> Response:
        correlation_id = request.headers.get(self.HEADER_NAME) or str(uuid.uuid4())
        set_correlation_id(correlation_id)

        started = time.perf_counter()
        response = await call_next(request)

        log.info(
            "request_completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 1),
        )
        response.headers[self.HEADER_NAME] = correlation_id
        return response
