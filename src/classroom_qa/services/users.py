"""User operations."""

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from classroom_qa.exceptions import NotFoundError
from classroom_qa.models.user import User
from classroom_qa.repositories.user import UserRepository
from classroom_qa.schemas.user import UserCreate


class UserService:
    """Create and look up teachers and students."""

    @staticmethod
    async def create_user(session: AsyncSession, payload: UserCreate) -> User:
        """Insert a new user."""
        user = await UserRepository.create(session, name=payload.name, role=payload.role)
        logger.info("User created", user_id=user.id, role=user.role.value)
        return user

    @staticmethod
    async def get_user(session: AsyncSession, user_id: int) -> User:
        """Return a user or raise NotFoundError."""
        user = await UserRepository.get_by_id(session, user_id)
        if user is None:
            raise NotFoundError(resource="User", resource_id=user_id)
        return user
