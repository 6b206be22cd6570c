"""
Generation orchestration shared by the four generation endpoints.

Payload strategy per category:
- text: the raw prompt, text model
- image: ``[prompt, inline image part]``, vision model
- document: a text prompt describing the document, text model
- audio: ``[prompt, inline audio part]``, text model
"""
import logging

from fastapi.responses import JSONResponse

from gateway.core.config import Settings
from gateway.core.exceptions import UpstreamError
from gateway.core.responses import success_response
from gateway.schemas.generation import Category, GenerationRequest
from gateway.services.model_client import Contents, ModelClient

logger = logging.getLogger(__name__)

FAILURE_MESSAGES = {
    Category.TEXT: "Failed to generate text",
    Category.IMAGE: "Failed to generate content from image",
    Category.DOCUMENT: "Failed to generate content from document",
    Category.AUDIO: "Failed to generate content from audio",
}


def model_for(category: Category, settings: Settings) -> str:
    """Vision model for images, text model for everything else."""
    if category is Category.IMAGE:
        return settings.GEMINI_VISION_MODEL
    return settings.GEMINI_MODEL


def build_document_prompt(request: GenerationRequest) -> str:
    document = request.file
    return (
        f"Document name: {document.filename}\n"
        f"Document type: {document.mime_type}\n"
        f"File size: {document.size} bytes\n"
        f"User prompt: {request.text}\n"
        "\n"
        "Process this document according to the user's request."
    )


def build_contents(
    category: Category,
    request: GenerationRequest,
    client: ModelClient
) -> Contents:
    """Build the model-call payload for ``category``."""
    if category is Category.TEXT:
        return request.text
    if category is Category.DOCUMENT:
        return build_document_prompt(request)
    return [request.text, client.inline_part(request.file.data, request.file.mime_type)]


async def generate(
    category: Category,
    request: GenerationRequest,
    client: ModelClient,
    settings: Settings
) -> JSONResponse:
    """Call the model and wrap its text; failures become a generic 500."""
    model = model_for(category, settings)
    contents = build_contents(category, request, client)

    try:
        data = await client.generate(contents, model)
    except Exception as e:
        logger.error(
            f"Error generating from {category.value}: {str(e)}",
            extra={"model": model, "error_type": type(e).__name__},
            exc_info=True
        )
        raise UpstreamError(FAILURE_MESSAGES[category]) from e

    logger.info(f"Generated {category.value} response", extra={"model": model})
    return success_response(data, model)
