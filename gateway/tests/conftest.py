import asyncio
import sys
from pathlib import Path
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

# Get the project root directory
root_dir = Path(__file__).parent.parent.parent

# Add the project root to Python path
sys.path.insert(0, str(root_dir))

from gateway.core.application import create_application  # noqa: E402
from gateway.core.config import Settings  # noqa: E402
from gateway.services.model_client import ModelClient  # noqa: E402

TEXT_MODEL = "test-text-model"
VISION_MODEL = "test-vision-model"


class FakeModels:
    """Stands in for ``genai.Client().aio.models``."""

    def __init__(self, text="world", error=None, delay=0.0):
        self.text = text
        self.error = error
        self.delay = delay
        self.calls = []

    async def generate_content(self, model, contents):
        self.calls.append({"model": model, "contents": contents})
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return SimpleNamespace(text=self.text)


class FakeGenaiClient:
    def __init__(self, **kwargs):
        self.models = FakeModels(**kwargs)
        self.aio = SimpleNamespace(models=self.models)


@pytest.fixture
def settings():
    """Settings isolated from the developer's environment and .env file."""
    return Settings(
        _env_file=None,
        GEMINI_API_KEY="test-key",
        GEMINI_MODEL=TEXT_MODEL,
        GEMINI_VISION_MODEL=VISION_MODEL,
        MODEL_TIMEOUT_SECONDS=5.0,
        LOG_FILE=None,
        LOG_JSON=False,
    )


@pytest.fixture
def fake_genai():
    return FakeGenaiClient()


@pytest.fixture
def model_client(fake_genai, settings):
    return ModelClient(
        api_key=settings.GEMINI_API_KEY,
        timeout=settings.MODEL_TIMEOUT_SECONDS,
        client=fake_genai
    )


@pytest.fixture
def client(settings, model_client):
    app = create_application(settings, model_client)
    with TestClient(app) as test_client:
        yield test_client
