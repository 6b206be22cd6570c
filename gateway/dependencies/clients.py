"""
Application-scoped dependencies.

The model client and settings are built once by the application factory and
stored on ``app.state``; endpoints receive them through these dependencies.
"""
from fastapi import Request

from gateway.core.config import Settings
from gateway.services.model_client import ModelClient


def get_model_client(request: Request) -> ModelClient:
    """FastAPI dependency for the shared model client."""
    return request.app.state.model_client


def get_app_settings(request: Request) -> Settings:
    """FastAPI dependency for the settings the app was built with."""
    return request.app.state.settings


__all__ = ['get_model_client', 'get_app_settings']
