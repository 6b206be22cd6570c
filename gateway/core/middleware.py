"""
Middleware components for the application.
"""
import time
import logging
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from gateway.core.responses import CORS_HEADERS, preflight_response

logger = logging.getLogger(__name__)


class LoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for logging request/response details."""

    async def dispatch(self, request: Request, call_next):
        """Process the request/response and log details."""
        start_time = time.time()

        try:
            response = await call_next(request)
            process_time = time.time() - start_time

            logger.info("Request completed", extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "process_time": f"{process_time:.3f}s"
            })

            return response
        except Exception as e:
            process_time = time.time() - start_time
            logger.error("Request failed", extra={
                "method": request.method,
                "path": request.url.path,
                "error": str(e),
                "process_time": f"{process_time:.3f}s"
            })
            raise


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """Answers OPTIONS probes on any path and stamps CORS headers on every response."""

    async def dispatch(self, request: Request, call_next):
        if request.method == "OPTIONS":
            return preflight_response()

        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response
