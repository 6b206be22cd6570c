"""
JSON response envelope builders.

All responses, including 404/405 and preflight, carry the same CORS header set.
"""
from types import MappingProxyType
from typing import Mapping, Optional

from fastapi.responses import JSONResponse, Response

from gateway.schemas.generation import GenerationResponse

CORS_HEADERS: Mapping[str, str] = MappingProxyType({
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
})


def _with_cors(headers: Optional[Mapping[str, str]] = None) -> dict:
    merged = dict(headers or {})
    merged.update(CORS_HEADERS)
    return merged


def success_response(data: str, model: str) -> JSONResponse:
    """Wrap generated text into a 200 success envelope."""
    envelope = GenerationResponse(success=True, data=data, model=model)
    return JSONResponse(
        status_code=200,
        content=envelope.model_dump(exclude_none=True),
        headers=_with_cors(),
    )


def error_response(
    message: str,
    status_code: int,
    headers: Optional[Mapping[str, str]] = None
) -> JSONResponse:
    """Wrap an error message into a failure envelope."""
    envelope = GenerationResponse(success=False, error=message)
    return JSONResponse(
        status_code=status_code,
        content=envelope.model_dump(exclude_none=True),
        headers=_with_cors(headers),
    )


def preflight_response() -> Response:
    """Empty 200 answer to an OPTIONS probe."""
    return Response(status_code=200, headers=_with_cors())
