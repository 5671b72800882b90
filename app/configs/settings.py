"""Application settings and configuration constants.

This module contains application settings, constants, and configuration
values for the blog content API.
"""

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = Path(__file__).parent.parent.parent / ".env"

# --- Constants ---
POSTS_COLLECTION = "posts"
TAGS_COLLECTION = "tags"
IMAGE_FIELD_NAME = "image"
IMAGE_MIME_PREFIX = "image/"

# Response constants
DEFAULT_ERROR_MESSAGE = "An unknown error occurred."
INVALID_PARAMETERS_MESSAGE = "Invalid parameters provided."
POST_NOT_FOUND = "Post not found"
TAG_NOT_FOUND = "Tag not found"


class Settings(BaseSettings):
    """Application settings with validation and default values."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    APP_NAME: str = "Blog Content API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Environment
    ENVIRONMENT: Literal["development", "staging", "production", "test"] = "development"
    HOST: str = "127.0.0.1"
    PORT: int = 8000
    PRODUCTION_FRONTEND_URL: str | None = None

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = False
    LOG_FILE: str = "logs/app.log"

    # MongoDB
    MONGODB_URI: str = "mongodb://localhost:27017/blog"
    MONGODB_DEFAULT_DB: str = "blog"
    MONGODB_SERVER_SELECTION_TIMEOUT_MS: int = 5000

    # Media
    MEDIA_IMAGE_MAX_SIZE_MB: int = 5

    # Post listing
    POSTS_DEFAULT_PAGE: int = 1
    POSTS_DEFAULT_LIMIT: int = 10
    POSTS_DEFAULT_SORT: str = "createdAt"

    # Rate limiting
    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_DEFAULT: str = "120/minute"
    RATE_LIMIT_STORAGE_URI: str = "memory://"


settings = Settings()


class LimiterConfig(BaseSettings):
    """Rate limiter configuration."""

    model_config = SettingsConfigDict(env_prefix="RATE_LIMIT_", case_sensitive=False)

    enabled: bool = settings.RATE_LIMIT_ENABLED
    default_limits: list[str] = [settings.RATE_LIMIT_DEFAULT]
    storage_uri: str = settings.RATE_LIMIT_STORAGE_URI
    headers_enabled: bool = False
