"""Common Pydantic schemas for API requests and responses."""

from datetime import datetime

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response model for health check endpoint."""

    status: str = Field(..., examples=["OK"])
    message: str = Field(..., examples=["Server is running"])
    port: int = Field(..., examples=[3001])
    environment: str = Field(..., examples=["development"])
    deployment: str = Field(..., examples=["local"])
    timestamp: datetime = Field(..., description="Server time of the probe")


class ServiceInfoResponse(BaseModel):
    """Response model for the root banner endpoint."""

    status: str = Field(..., examples=["OK"])
    message: str = Field(..., examples=["Classroom Q&A API"])
    version: str = Field(..., examples=["1.0.0"])
    endpoints: dict[str, str] = Field(..., description="Entry points of the API")


class MessageResponse(BaseModel):
    """Response carrying only a human-readable confirmation."""

    message: str = Field(..., description="Human-readable confirmation")


class ErrorResponse(BaseModel):
    """Standard error response model."""

    error: str = Field(..., description="Human-readable error message")
    details: str | None = Field(None, description="Underlying cause, if any")
    error_code: str = Field(..., description="Machine-readable error code")
    request_id: str | None = Field(None, description="Request tracking ID")
