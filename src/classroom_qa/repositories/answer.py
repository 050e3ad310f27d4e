"""Repository for answer database operations."""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from classroom_qa.models.answer import Answer


class AnswerRepository:
    """Handle answer persistence operations."""

    @staticmethod
    async def create(
        session: AsyncSession,
        question_id: int,
        student_id: int,
        answer: str,
    ) -> Answer:
        """Create a new answer record."""
        db_answer = Answer(
            question_id=question_id,
            student_id=student_id,
            answer=answer,
        )
        session.add(db_answer)
        await session.flush()
        await session.refresh(db_answer)
        return db_answer

    @staticmethod
    async def get_by_question_id(
        session: AsyncSession,
        question_id: int,
    ) -> list[Answer]:
        """Retrieve all answers for a question, newest first."""
        result = await session.execute(
            select(Answer)
            .where(Answer.question_id == question_id)
            .order_by(Answer.created_at.desc(), Answer.id.desc())
        )
        return list(result.scalars().all())

    @staticmethod
    async def get_by_id_and_question_id(
        session: AsyncSession,
        answer_id: int,
        question_id: int,
    ) -> Answer | None:
        """Retrieve an answer by id scoped to a specific question."""
        result = await session.execute(
            select(Answer).where(
                Answer.id == answer_id,
                Answer.question_id == question_id,
            )
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def update_text(
        session: AsyncSession,
        answer: Answer,
        text: str,
    ) -> Answer:
        """Replace the text of an answer."""
        answer.answer = text
        await session.flush()
        await session.refresh(answer)
        return answer

    @staticmethod
    async def delete(session: AsyncSession, answer_id: int) -> None:
        """Hard delete an answer."""
        await session.execute(delete(Answer).where(Answer.id == answer_id))
        await session.flush()
