"""
Core FastAPI application instance and configuration.
"""
import logging
from typing import Optional

from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException as StarletteHTTPException

from gateway.core.config import Settings, get_settings
from gateway.core.exceptions import GatewayError
from gateway.core.logging_config import setup_logger
from gateway.core.middleware import CORSHeadersMiddleware, LoggingMiddleware
from gateway.core.responses import error_response
from gateway.middleware.upload_limit import UploadLimitMiddleware
from gateway.routers import generate
from gateway.services.model_client import ModelClient

logger = logging.getLogger(__name__)

ROUTE_ERROR_MESSAGES = {
    404: "Not found",
    405: "Method not allowed",
}


def create_application(
    settings: Optional[Settings] = None,
    model_client: Optional[ModelClient] = None
) -> FastAPI:
    """Create and configure FastAPI application.

    Settings are validated here, so a missing API key fails before any
    listener starts.
    """
    settings = settings or get_settings()
    setup_logger(
        log_level=settings.LOG_LEVEL,
        log_file=settings.LOG_FILE,
        json_format=settings.LOG_JSON,
        max_bytes=settings.LOG_MAX_BYTES,
        backup_count=settings.LOG_BACKUP_COUNT
    )

    app = FastAPI(
        title=settings.PROJECT_NAME,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False
    )
    app.state.settings = settings
    app.state.model_client = model_client or ModelClient(
        api_key=settings.GEMINI_API_KEY,
        timeout=settings.MODEL_TIMEOUT_SECONDS or None
    )

    # Add middleware (last added runs first)
    app.add_middleware(
        UploadLimitMiddleware,
        max_request_size=settings.max_request_size,
        max_file_size=settings.MAX_FILE_SIZE
    )
    app.add_middleware(CORSHeadersMiddleware)
    app.add_middleware(LoggingMiddleware)

    # Add exception handlers
    @app.exception_handler(GatewayError)
    async def gateway_exception_handler(request: Request, exc: GatewayError):
        # 5xx causes are logged where they are raised
        if exc.status_code < 500:
            logger.warning("Request rejected", extra={
                "status_code": exc.status_code,
                "detail": exc.message,
                "path": request.url.path
            })
        return error_response(exc.message, exc.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        message = ROUTE_ERROR_MESSAGES.get(exc.status_code, exc.detail)
        return error_response(message, exc.status_code, headers=exc.headers)

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.error("Unhandled Exception", extra={
            "error": str(exc),
            "type": type(exc).__name__,
            "path": request.url.path
        }, exc_info=True)
        return error_response("Internal server error", 500)

    app.include_router(generate.router)

    logger.info("Application configured", extra={
        "text_model": settings.GEMINI_MODEL,
        "vision_model": settings.GEMINI_VISION_MODEL
    })
    return app
