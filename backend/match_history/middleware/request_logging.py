"""Request logging middleware with request id and timing headers."""

import time
import uuid

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp
from structlog import contextvars as structlog_contextvars

logger = structlog.get_logger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs each request and tags the response with its id and duration."""

    def __init__(self, app: ASGIApp, slow_request_threshold: float = 2.0):
        """
        Initialize request logging middleware.

        Args:
            app: ASGI application
            slow_request_threshold: Seconds after which a request is logged as slow
        """
        super().__init__(app)
        self.slow_request_threshold = slow_request_threshold

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Process an incoming request with timing and request id binding."""
        start_time = time.perf_counter()
        request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex[:16]

        structlog_contextvars.bind_contextvars(request_id=request_id)
        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "Request failed",
                method=request.method,
                path=request.url.path,
                duration_seconds=round(time.perf_counter() - start_time, 3),
                error=str(e),
            )
            raise
        finally:
            structlog_contextvars.unbind_contextvars("request_id")

        duration = time.perf_counter() - start_time
        logger.info(
            "Request completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=round(duration * 1000),
            request_id=request_id,
        )
        if duration > self.slow_request_threshold:
            logger.warning(
                "Slow request detected",
                duration_seconds=round(duration, 3),
                threshold=self.slow_request_threshold,
                path=request.url.path,
                request_id=request_id,
            )

        response.headers["X-Response-Time"] = f"{duration:.3f}s"
        response.headers["X-Request-ID"] = request_id
        return response
