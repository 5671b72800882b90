from app.schemas.common import ErrorResponse, HealthCheckResponse, MessageResponse
from app.schemas.post import PostDetailResponse, PostResponse, PostUpdate
from app.schemas.tag import (
    TagConditionRequest,
    TagCreate,
    TagFilter,
    TagResponse,
    TagUpdate,
)

__all__ = [
    "ErrorResponse",
    "HealthCheckResponse",
    "MessageResponse",
    "PostDetailResponse",
    "PostResponse",
    "PostUpdate",
    "TagConditionRequest",
    "TagCreate",
    "TagFilter",
    "TagResponse",
    "TagUpdate",
]
