"""Role and ownership checks applied before every mutation."""

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from classroom_qa.exceptions import AuthorizationError, NotFoundError
from classroom_qa.models.user import User, UserRole
from classroom_qa.repositories.user import UserRepository


async def require_actor(
    session: AsyncSession,
    actor_id: int,
    role: UserRole,
    action: str,
) -> User:
    """Fetch the acting user and check it holds ``role``.

    Raises:
        NotFoundError: If no user has ``actor_id``.
        AuthorizationError: If the stored role is not ``role``.
    """
    actor = await UserRepository.get_by_id(session, actor_id)
    if actor is None:
        raise NotFoundError(resource="User", resource_id=actor_id)

    if actor.role != role:
        logger.info(
            "Actor rejected for wrong role",
            actor_id=actor_id,
            role=actor.role.value,
            required_role=role.value,
        )
        raise AuthorizationError(
            f"Only {role.value}s can {action}",
            reason=AuthorizationError.WRONG_ROLE,
            details={"required_role": role.value},
        )

    return actor


def ensure_owner(owner_id: int, actor_id: int, resource: str) -> None:
    """Check that the actor is the stored author of a resource."""
    if owner_id != actor_id:
        logger.info(
            "Actor rejected as non-owner",
            actor_id=actor_id,
            owner_id=owner_id,
            resource=resource,
        )
        raise AuthorizationError(
            f"You can only modify your own {resource}s",
            reason=AuthorizationError.NOT_OWNER,
        )
