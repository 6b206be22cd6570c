"""
Generation request and response schemas.
"""
from enum import Enum
from typing import Optional

from pydantic import BaseModel


class Category(str, Enum):
    """Input category; selects the handler, allow-list and model."""
    TEXT = "text"
    IMAGE = "image"
    DOCUMENT = "document"
    AUDIO = "audio"


class BinaryPayload(BaseModel):
    """Uploaded file as declared by the caller."""
    data: bytes
    mime_type: str
    filename: str
    size: int


class GenerationRequest(BaseModel):
    text: str
    file: Optional[BinaryPayload] = None


class GenerationResponse(BaseModel):
    """Response envelope. ``data``/``model`` on success, ``error`` otherwise."""
    success: bool
    data: Optional[str] = None
    error: Optional[str] = None
    model: Optional[str] = None
