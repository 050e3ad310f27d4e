"""User endpoints."""

from typing import Any

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from classroom_qa.db import get_db
from classroom_qa.schemas.user import UserCreatedResponse, UserEnvelope, UserResponse
from classroom_qa.services.users import UserService
from classroom_qa.services.validation import validate_user_create

router = APIRouter(prefix="/users", tags=["Users"])


@router.post(
    "",
    response_model=UserCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a user",
    description="Register a teacher or a student.",
)
async def create_user(
    payload: dict[str, Any] = Body(...),
    session: AsyncSession = Depends(get_db),
) -> UserCreatedResponse:
    """Validate and insert a new user."""
    user_data = validate_user_create(payload)
    user = await UserService.create_user(session, user_data)
    return UserCreatedResponse(
        message="User created successfully",
        user=UserResponse.model_validate(user),
    )


@router.get(
    "/{user_id}",
    response_model=UserEnvelope,
    summary="Get a user",
)
async def get_user(
    user_id: int,
    session: AsyncSession = Depends(get_db),
) -> UserEnvelope:
    """Return a user by id."""
    user = await UserService.get_user(session, user_id)
    return UserEnvelope(user=UserResponse.model_validate(user))
