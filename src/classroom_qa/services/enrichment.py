"""Best-effort attachment of user records to question and answer rows.

The store performs no joins, so the referenced users are fetched with one
batched lookup after the primary read. A failed lookup never fails the
request: every row is paired with ``None`` and the failure is recorded in
:attr:`EnrichmentResult.errors` and logged.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from classroom_qa.models.user import User
from classroom_qa.repositories.user import UserRepository

RowT = TypeVar("RowT")


@dataclass(frozen=True)
class EnrichedRow(Generic[RowT]):
    """A primary row and its related user, if one could be attached."""

    row: RowT
    user: User | None


@dataclass
class EnrichmentResult(Generic[RowT]):
    """Rows paired with their users plus diagnostics from the lookup."""

    rows: list[EnrichedRow[RowT]]
    errors: list[str] = field(default_factory=list)

    @property
    def degraded(self) -> bool:
        return bool(self.errors)


async def enrich_with_users(
    session: AsyncSession,
    rows: Sequence[RowT],
    user_id_of: Callable[[RowT], int],
) -> EnrichmentResult[RowT]:
    """Pair each row with the user referenced by ``user_id_of(row)``."""
    if not rows:
        return EnrichmentResult(rows=[])

    user_ids = sorted({user_id_of(row) for row in rows})
    errors: list[str] = []
    users_by_id: dict[int, User] = {}

    try:
        users = await UserRepository.get_by_ids(session, user_ids)
    except SQLAlchemyError as exc:
        errors.append(str(exc))
        logger.warning(
            "User enrichment failed, continuing without users",
            user_ids=user_ids,
            error=str(exc),
        )
    else:
        users_by_id = {user.id: user for user in users}

    return EnrichmentResult(
        rows=[EnrichedRow(row, users_by_id.get(user_id_of(row))) for row in rows],
        errors=errors,
    )
