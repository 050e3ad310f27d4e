"""Pydantic schemas for user endpoints."""

from pydantic import BaseModel, Field

from classroom_qa.models.user import UserRole


class UserCreate(BaseModel):
    """Validated payload for creating a user."""

    name: str
    role: UserRole


class UserResponse(BaseModel):
    """Response model for a user record."""

    id: int = Field(..., description="User ID")
    name: str = Field(..., description="Display name")
    role: UserRole = Field(..., description="Classroom role")

    model_config = {"from_attributes": True}


class UserEnvelope(BaseModel):
    user: UserResponse


class UserCreatedResponse(UserEnvelope):
    message: str = Field(..., examples=["User created successfully"])
