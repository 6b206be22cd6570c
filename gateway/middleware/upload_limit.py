"""
Upload size ceiling middleware.
"""
import logging

from starlette.datastructures import Headers
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from gateway.core.exceptions import PayloadTooLargeError
from gateway.core.responses import error_response

logger = logging.getLogger(__name__)


class UploadLimitMiddleware:
    """Caps POST bodies at ``max_request_size`` bytes.

    A declared ``Content-Length`` over the cap is rejected before the body is
    read. Otherwise body chunks are counted as the app pulls them, and the
    first chunk past the cap raises ``PayloadTooLargeError``, so chunked
    bodies are never buffered beyond the cap.
    """

    def __init__(self, app: ASGIApp, max_request_size: int, max_file_size: int):
        self.app = app
        self.max_request_size = max_request_size
        self.max_file_size = max_file_size

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or scope["method"] != "POST":
            await self.app(scope, receive, send)
            return

        declared = Headers(scope=scope).get("content-length")
        if declared is not None:
            try:
                length = int(declared)
            except ValueError:
                response = error_response("Invalid Content-Length header", 400)
                await response(scope, receive, send)
                return

            if length > self.max_request_size:
                self._log_rejection(scope, length)
                await self._reject(scope, receive, send)
                return

        received = 0
        response_started = False

        async def limited_receive() -> Message:
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self.max_request_size:
                    self._log_rejection(scope, received)
                    raise PayloadTooLargeError.for_limit(self.max_file_size)
            return message

        async def tracking_send(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, limited_receive, tracking_send)
        except PayloadTooLargeError:
            # Normally answered by the app's exception handler
            if response_started:
                raise
            await self._reject(scope, receive, send)

    async def _reject(self, scope: Scope, receive: Receive, send: Send) -> None:
        exc = PayloadTooLargeError.for_limit(self.max_file_size)
        response = error_response(exc.message, exc.status_code)
        await response(scope, receive, send)

    def _log_rejection(self, scope: Scope, size: int) -> None:
        logger.warning("Request body too large", extra={
            "path": scope.get("path"),
            "body_bytes": size,
            "limit": self.max_request_size,
        })
