"""Question operations with teacher role and ownership checks."""

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from classroom_qa.exceptions import NotFoundError
from classroom_qa.models.question import Question
from classroom_qa.models.user import UserRole
from classroom_qa.repositories.question import QuestionRepository
from classroom_qa.schemas.question import QuestionCreate, QuestionUpdate
from classroom_qa.services.authorization import ensure_owner, require_actor
from classroom_qa.services.enrichment import (
    EnrichedRow,
    EnrichmentResult,
    enrich_with_users,
)
from classroom_qa.services.validation import ensure_question_has_content


def _teacher_id(question: Question) -> int:
    return question.teacher_id


class QuestionService:
    """Create, read, update and delete questions."""

    @staticmethod
    async def get_question_or_404(session: AsyncSession, question_id: int) -> Question:
        question = await QuestionRepository.get_by_id(session, question_id)
        if question is None:
            raise NotFoundError(resource="Question", resource_id=question_id)
        return question

    @staticmethod
    async def create_question(
        session: AsyncSession,
        payload: QuestionCreate,
    ) -> Question:
        """Insert a question after checking the actor is a teacher."""
        await require_actor(
            session, payload.teacher_id, UserRole.TEACHER, "create questions"
        )

        question = await QuestionRepository.create(
            session,
            teacher_id=payload.teacher_id,
            title=payload.title,
            description=payload.description,
        )
        logger.info(
            "Question created",
            question_id=question.id,
            teacher_id=question.teacher_id,
        )
        return question

    @staticmethod
    async def list_questions(session: AsyncSession) -> EnrichmentResult[Question]:
        """Return all questions, newest first, each paired with its teacher."""
        questions = await QuestionRepository.get_all(session)
        return await enrich_with_users(session, questions, _teacher_id)

    @staticmethod
    async def get_question(
        session: AsyncSession,
        question_id: int,
    ) -> EnrichedRow[Question]:
        """Return one question paired with its teacher."""
        question = await QuestionService.get_question_or_404(session, question_id)
        result = await enrich_with_users(session, [question], _teacher_id)
        return result.rows[0]

    @staticmethod
    async def update_question(
        session: AsyncSession,
        question_id: int,
        payload: QuestionUpdate,
    ) -> Question:
        """Apply a partial update on behalf of the question's teacher."""
        question = await QuestionService.get_question_or_404(session, question_id)
        ensure_owner(question.teacher_id, payload.teacher_id, "question")
        await require_actor(
            session, payload.teacher_id, UserRole.TEACHER, "modify questions"
        )

        changes = payload.changes()
        ensure_question_has_content(
            changes.get("title", question.title),
            changes.get("description", question.description),
        )

        question = await QuestionRepository.update(session, question, changes)
        logger.info(
            "Question updated",
            question_id=question_id,
            fields=sorted(changes),
        )
        return question

    @staticmethod
    async def delete_question(
        session: AsyncSession,
        question_id: int,
        teacher_id: int,
    ) -> None:
        """Hard delete a question owned by ``teacher_id``."""
        question = await QuestionService.get_question_or_404(session, question_id)
        ensure_owner(question.teacher_id, teacher_id, "question")
        await require_actor(session, teacher_id, UserRole.TEACHER, "delete questions")

        await QuestionRepository.delete(session, question_id)
        logger.info("Question deleted", question_id=question_id, teacher_id=teacher_id)
