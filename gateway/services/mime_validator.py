"""
Declared MIME type validation against fixed per-category allow-lists.

Membership is an exact, case-sensitive string match: parameters such as
``; charset=utf-8`` are not stripped, so ``text/plain; charset=utf-8`` is
rejected even though ``text/plain`` is allowed.
"""
from types import MappingProxyType
from typing import FrozenSet, Mapping

from gateway.core.exceptions import ValidationError
from gateway.schemas.generation import Category

ALLOWED_MIME_TYPES: Mapping[Category, FrozenSet[str]] = MappingProxyType({
    Category.IMAGE: frozenset({
        "image/jpeg",
        "image/png",
        "image/webp",
        "image/heic",
        "image/heif",
    }),
    Category.DOCUMENT: frozenset({
        "application/pdf",
        "application/msword",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",  # docx
        "text/plain",
        "text/markdown",
    }),
    Category.AUDIO: frozenset({
        "audio/mpeg",  # mp3
        "audio/mp4",
        "audio/wav",
        "audio/ogg",
        "audio/webm",
    }),
})

SUPPORTED_FORMATS: Mapping[Category, str] = MappingProxyType({
    Category.IMAGE: "JPEG, PNG, WEBP, HEIC, HEIF",
    Category.DOCUMENT: "PDF, DOC, DOCX, TXT, MD",
    Category.AUDIO: "MP3, MP4, WAV, OGG, WEBM",
})


def is_allowed(mime_type: str, category: Category) -> bool:
    """Return True if ``mime_type`` is in the allow-list for ``category``."""
    allowed = ALLOWED_MIME_TYPES.get(category)
    if allowed is None:
        raise ValueError(f"No MIME allow-list for category: {category.value}")
    return mime_type in allowed


def invalid_format_message(category: Category) -> str:
    return (
        f"Invalid {category.value} format. "
        f"Supported formats: {SUPPORTED_FORMATS[category]}"
    )


def validate_mime_type(mime_type: str, category: Category) -> None:
    """Raise ``ValidationError`` listing the accepted formats on rejection."""
    if not is_allowed(mime_type, category):
        raise ValidationError(invalid_format_message(category))
