"""
Core configuration settings for the application.
"""
from pydantic import Field
from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional


class Settings(BaseSettings):
    """Application settings."""
    PROJECT_NAME: str = "GenAI Gateway"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # API Keys
    GEMINI_API_KEY: str = Field(min_length=1)

    # Model Settings
    GEMINI_MODEL: str = "gemini-2.0-flash"
    GEMINI_VISION_MODEL: str = "gemini-2.0-flash"
    MODEL_TIMEOUT_SECONDS: float = Field(default=60.0, ge=0)  # 0 disables the bound

    # Upload Settings
    MAX_FILE_SIZE: int = 10 * 1024 * 1024  # 10 MB
    MAX_FORM_OVERHEAD: int = 1024 * 1024  # multipart framing + text field

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = "logs/app.log"
    LOG_JSON: bool = True
    LOG_MAX_BYTES: int = Field(default=10 * 1024 * 1024, gt=0)  # 10MB
    LOG_BACKUP_COUNT: int = Field(default=7, ge=0)

    @property
    def max_request_size(self) -> int:
        return self.MAX_FILE_SIZE + self.MAX_FORM_OVERHEAD

    class Config:
        case_sensitive = True
        env_file = ".env"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
