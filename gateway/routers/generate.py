"""
Generation endpoints.

Only POST is registered; other methods on these paths answer 405, and any
other path answers 404. Paths are matched exactly.
"""
from fastapi import APIRouter, Depends, Request

from gateway.core.config import Settings
from gateway.dependencies.clients import get_app_settings, get_model_client
from gateway.schemas.generation import Category
from gateway.services import generation
from gateway.services.mime_validator import validate_mime_type
from gateway.services.model_client import ModelClient
from gateway.services.request_extractor import (
    extract_json_request,
    extract_multipart_request,
)

router = APIRouter(prefix="/api")

FILE_FIELDS = {
    Category.IMAGE: "image",
    Category.DOCUMENT: "document",
    Category.AUDIO: "audio",
}


async def _generate_from_file(
    category: Category,
    request: Request,
    client: ModelClient,
    settings: Settings
):
    payload = await extract_multipart_request(
        request,
        FILE_FIELDS[category],
        settings.MAX_FILE_SIZE
    )
    validate_mime_type(payload.file.mime_type, category)
    return await generation.generate(category, payload, client, settings)


@router.post("/generate-text")
async def generate_text(
    request: Request,
    client: ModelClient = Depends(get_model_client),
    settings: Settings = Depends(get_app_settings)
):
    """Generate text from a JSON ``{text}`` prompt."""
    payload = await extract_json_request(request)
    return await generation.generate(Category.TEXT, payload, client, settings)


@router.post("/generate-from-image")
async def generate_from_image(
    request: Request,
    client: ModelClient = Depends(get_model_client),
    settings: Settings = Depends(get_app_settings)
):
    """Generate content from a prompt and an uploaded image."""
    return await _generate_from_file(Category.IMAGE, request, client, settings)


@router.post("/generate-from-document")
async def generate_from_document(
    request: Request,
    client: ModelClient = Depends(get_model_client),
    settings: Settings = Depends(get_app_settings)
):
    """Generate content from a prompt and an uploaded document."""
    return await _generate_from_file(Category.DOCUMENT, request, client, settings)


@router.post("/generate-from-audio")
async def generate_from_audio(
    request: Request,
    client: ModelClient = Depends(get_model_client),
    settings: Settings = Depends(get_app_settings)
):
    """Generate content from a prompt and an uploaded audio file."""
    return await _generate_from_file(Category.AUDIO, request, client, settings)
