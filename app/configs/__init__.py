from app.configs.settings import (
    DEFAULT_ERROR_MESSAGE,
    IMAGE_FIELD_NAME,
    IMAGE_MIME_PREFIX,
    POST_NOT_FOUND,
    POSTS_COLLECTION,
    TAG_NOT_FOUND,
    TAGS_COLLECTION,
    LimiterConfig,
    Settings,
    settings,
)

__all__ = [
    "DEFAULT_ERROR_MESSAGE",
    "IMAGE_FIELD_NAME",
    "IMAGE_MIME_PREFIX",
    "POST_NOT_FOUND",
    "POSTS_COLLECTION",
    "TAG_NOT_FOUND",
    "TAGS_COLLECTION",
    "LimiterConfig",
    "Settings",
    "settings",
]
