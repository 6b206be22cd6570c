"""
Gemini model client.
"""
import asyncio
import logging
from typing import Any, List, Optional, Union

from google import genai
from google.genai import types

from gateway.core.exceptions import ModelClientError

logger = logging.getLogger(__name__)

Contents = Union[str, List[Any]]


class ModelClient:
    """Single process-wide wrapper around the Gemini SDK client."""

    def __init__(
        self,
        api_key: str,
        timeout: Optional[float] = None,
        client: Optional[genai.Client] = None
    ):
        self._client = client or genai.Client(api_key=api_key)
        self.timeout = timeout
        logger.info("Gemini client initialized successfully")

    @staticmethod
    def inline_part(data: bytes, mime_type: str) -> types.Part:
        """Build an inline binary part for a multimodal request."""
        return types.Part.from_bytes(data=data, mime_type=mime_type)

    async def generate(self, contents: Contents, model: str) -> str:
        """Generate text with ``model``, bounded by ``self.timeout`` seconds."""
        logger.debug(f"Sending request to Gemini model {model}")
        try:
            response = await asyncio.wait_for(
                self._client.aio.models.generate_content(
                    model=model,
                    contents=contents
                ),
                timeout=self.timeout
            )
        except asyncio.TimeoutError:
            raise ModelClientError(
                f"Gemini model {model} did not respond within {self.timeout}s"
            )

        text = response.text
        if not text:
            raise ModelClientError(f"No response generated from Gemini model {model}")

        logger.debug(f"Received response from Gemini model {model}")
        return text
