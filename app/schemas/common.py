from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str = Field(..., examples=["Post deleted successfully"])


class ErrorResponse(BaseModel):
    """Error body returned by every failing endpoint."""

    message: str
    error: object | None = None


class HealthCheckResponse(BaseModel):
    """Health check payload."""

    status: str
    version: str
    timestamp: str
    database: str
