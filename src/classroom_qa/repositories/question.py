"""Repository for question database operations."""

from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from classroom_qa.models.question import Question


class QuestionRepository:
    """Handle question persistence operations."""

    @staticmethod
    async def create(
        session: AsyncSession,
        teacher_id: int,
        title: str | None,
        description: str | None,
    ) -> Question:
        """Create a new question owned by a teacher."""
        question = Question(
            teacher_id=teacher_id,
            title=title,
            description=description,
        )
        session.add(question)
        await session.flush()
        await session.refresh(question)
        return question

    @staticmethod
    async def get_all(session: AsyncSession) -> list[Question]:
        """Retrieve all questions, newest first."""
        result = await session.execute(
            select(Question).order_by(Question.created_at.desc(), Question.id.desc())
        )
        return list(result.scalars().all())

    @staticmethod
    async def get_by_id(session: AsyncSession, question_id: int) -> Question | None:
        """Retrieve a question by its ID."""
        result = await session.execute(
            select(Question).where(Question.id == question_id)
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def update(
        session: AsyncSession,
        question: Question,
        values: dict[str, Any],
    ) -> Question:
        """Apply the given column values to a question and persist them."""
        for column, value in values.items():
            setattr(question, column, value)
        await session.flush()
        await session.refresh(question)
        return question

    @staticmethod
    async def delete(session: AsyncSession, question_id: int) -> None:
        """Hard delete a question."""
        await session.execute(delete(Question).where(Question.id == question_id))
        await session.flush()
