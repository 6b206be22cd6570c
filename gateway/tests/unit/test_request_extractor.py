"""
Unit tests for JSON request extraction and capped file reads.
"""
import json
from io import BytesIO

import pytest
from starlette.datastructures import UploadFile
from starlette.requests import Request

from gateway.core.exceptions import PayloadTooLargeError, ValidationError
from gateway.services.request_extractor import extract_json_request, read_capped


def make_request(body: bytes, content_type: str = "application/json") -> Request:
    """Build a bare POST request with the given body."""
    scope = {
        "type": "http",
        "method": "POST",
        "path": "/api/generate-text",
        "query_string": b"",
        "headers": [(b"content-type", content_type.encode())] if content_type else [],
    }

    async def receive():
        return {"type": "http.request", "body": body, "more_body": False}

    return Request(scope, receive)


@pytest.mark.asyncio
async def test_extracts_text():
    request = make_request(json.dumps({"text": "hello"}).encode())
    payload = await extract_json_request(request)
    assert payload.text == "hello"
    assert payload.file is None


@pytest.mark.asyncio
async def test_content_type_with_charset_is_accepted():
    request = make_request(b'{"text": "hi"}', "application/json; charset=utf-8")
    payload = await extract_json_request(request)
    assert payload.text == "hi"


@pytest.mark.asyncio
@pytest.mark.parametrize("content_type", ["text/plain", "multipart/form-data", ""])
async def test_rejects_non_json_content_type(content_type):
    request = make_request(b'{"text": "hi"}', content_type)
    with pytest.raises(ValidationError) as exc_info:
        await extract_json_request(request)
    assert exc_info.value.message == "Content type must be application/json"


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [b"{}", b'{"text": ""}', b'{"text": null}', b'{"text": 42}', b'["hello"]'])
async def test_missing_or_empty_text(body):
    with pytest.raises(ValidationError) as exc_info:
        await extract_json_request(make_request(body))
    assert exc_info.value.message == "Text prompt is required"


@pytest.mark.asyncio
async def test_malformed_json():
    with pytest.raises(ValidationError) as exc_info:
        await extract_json_request(make_request(b"{not json"))
    assert exc_info.value.message == "Invalid JSON body"


@pytest.mark.asyncio
async def test_read_capped_accepts_exact_limit():
    upload = UploadFile(BytesIO(b"x" * 64), filename="exact.bin")
    data = await read_capped(upload, 64)
    assert len(data) == 64


@pytest.mark.asyncio
async def test_read_capped_rejects_one_byte_over():
    upload = UploadFile(BytesIO(b"x" * 65), filename="over.bin")
    with pytest.raises(PayloadTooLargeError):
        await read_capped(upload, 64)
