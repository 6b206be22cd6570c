"""
Request extraction: turns a raw request into a ``GenerationRequest``.

The declared file type is trusted as-is; file contents are only read, never
inspected.
"""
import logging

from fastapi import Request
from starlette.datastructures import UploadFile

from gateway.core.exceptions import PayloadTooLargeError, ValidationError
from gateway.schemas.generation import BinaryPayload, GenerationRequest

logger = logging.getLogger(__name__)

MISSING_TEXT = "Text prompt is required"
BAD_CONTENT_TYPE = "Content type must be application/json"
INVALID_JSON = "Invalid JSON body"


def _require_text(value) -> str:
    if not isinstance(value, str) or not value:
        raise ValidationError(MISSING_TEXT)
    return value


async def extract_json_request(request: Request) -> GenerationRequest:
    """Extract ``{text}`` from a JSON body."""
    content_type = request.headers.get("content-type", "")
    if "application/json" not in content_type:
        raise ValidationError(BAD_CONTENT_TYPE)

    try:
        body = await request.json()
    except ValueError:
        raise ValidationError(INVALID_JSON)

    text = body.get("text") if isinstance(body, dict) else None
    return GenerationRequest(text=_require_text(text))


async def read_capped(upload: UploadFile, max_size: int) -> bytes:
    """Read at most ``max_size + 1`` bytes; more than ``max_size`` is rejected."""
    data = await upload.read(max_size + 1)
    if len(data) > max_size:
        logger.warning(
            f"Rejected upload '{upload.filename}': exceeds {max_size} bytes"
        )
        raise PayloadTooLargeError.for_limit(max_size)
    return data


async def extract_multipart_request(
    request: Request,
    file_field: str,
    max_size: int
) -> GenerationRequest:
    """Extract ``text`` and the ``file_field`` upload from a multipart form."""
    async with request.form() as form:
        text = _require_text(form.get("text"))

        upload = form.get(file_field)
        if not isinstance(upload, UploadFile):
            raise ValidationError(f"{file_field.capitalize()} file is required")

        data = await read_capped(upload, max_size)
        payload = BinaryPayload(
            data=data,
            mime_type=upload.content_type or "",
            filename=upload.filename or "",
            size=len(data),
        )

    return GenerationRequest(text=text, file=payload)
