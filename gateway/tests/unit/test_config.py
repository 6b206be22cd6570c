"""
Unit tests for settings loading.
"""
import pytest
from pydantic import ValidationError

from gateway.core.application import create_application
from gateway.core.config import Settings


def test_missing_api_key_fails_fast(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_empty_api_key_fails_fast(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_defaults(monkeypatch):
    for name in ("GEMINI_MODEL", "GEMINI_VISION_MODEL", "PORT", "MAX_FILE_SIZE", "MAX_FORM_OVERHEAD"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("GEMINI_API_KEY", "abc")

    settings = Settings(_env_file=None)

    assert settings.GEMINI_API_KEY == "abc"
    assert settings.PORT == 3000
    assert settings.MAX_FILE_SIZE == 10 * 1024 * 1024
    assert settings.max_request_size == 11 * 1024 * 1024


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "abc")
    monkeypatch.setenv("GEMINI_VISION_MODEL", "vision-x")
    monkeypatch.setenv("PORT", "8080")

    settings = Settings(_env_file=None)

    assert settings.GEMINI_VISION_MODEL == "vision-x"
    assert settings.PORT == 8080


def test_negative_timeout_is_rejected(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "abc")
    with pytest.raises(ValidationError):
        Settings(_env_file=None, MODEL_TIMEOUT_SECONDS=-1)


def test_zero_timeout_disables_the_bound(settings):
    settings = settings.model_copy(update={"MODEL_TIMEOUT_SECONDS": 0})
    app = create_application(settings)
    assert app.state.model_client.timeout is None
