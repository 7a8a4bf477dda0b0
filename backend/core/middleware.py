"""Per-request log context.

Every log line emitted while a request is handled carries its correlation id,
method and path. The id is taken from ``X-Correlation-ID`` when the client
sends one and echoed back on the response.
"""
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from core.logging import api_logger, bound_context, generate_correlation_id

log = api_logger()


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs one ``request_completed`` line per request, with timing."""

    def __init__(self, app, slow_threshold_ms: float = 1000):
        super().__init__(app)
        self.slow_threshold_ms = slow_threshold_ms

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        correlation_id = request.headers.get("X-Correlation-ID") or generate_correlation_id()

        with bound_context(correlation_id=correlation_id, method=request.method, path=request.url.path):
            start = time.perf_counter()
            response = await call_next(request)
            duration_ms = round((time.perf_counter() - start) * 1000, 2)

            response.headers["X-Correlation-ID"] = correlation_id
            status = response.status_code
            emit = log.info if status < 400 else log.warning
            emit(
                "request_completed",
                status=status,
                duration_ms=duration_ms,
                query=str(request.query_params) or None,
            )
            if duration_ms > self.slow_threshold_ms:
                log.warning("slow_request", duration_ms=duration_ms, threshold_ms=self.slow_threshold_ms)

        return response
