"""Repository for user database operations."""

from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from classroom_qa.models.user import User, UserRole


class UserRepository:
    """Handle user persistence operations."""

    @staticmethod
    async def create(session: AsyncSession, name: str, role: UserRole) -> User:
        """Create a new user record."""
        user = User(name=name, role=role)
        session.add(user)
        await session.flush()
        await session.refresh(user)
        return user

    @staticmethod
    async def get_by_id(session: AsyncSession, user_id: int) -> User | None:
        """Retrieve a user by its ID."""
        result = await session.execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()

    @staticmethod
    async def get_by_ids(session: AsyncSession, user_ids: Iterable[int]) -> list[User]:
        """Retrieve every user whose ID is in ``user_ids`` in one query."""
        ids = list(user_ids)
        if not ids:
            return []
        result = await session.execute(select(User).where(User.id.in_(ids)))
        return list(result.scalars().all())
