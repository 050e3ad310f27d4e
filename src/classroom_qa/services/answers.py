"""Answer operations with student role and ownership checks."""

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from classroom_qa.exceptions import NotFoundError
from classroom_qa.models.answer import Answer
from classroom_qa.models.user import UserRole
from classroom_qa.repositories.answer import AnswerRepository
from classroom_qa.schemas.answer import AnswerCreate, AnswerUpdate
from classroom_qa.services.authorization import ensure_owner, require_actor
from classroom_qa.services.enrichment import EnrichmentResult, enrich_with_users
from classroom_qa.services.questions import QuestionService


def _student_id(answer: Answer) -> int:
    return answer.student_id


class AnswerService:
    """Post, list, update and delete answers to a question."""

    @staticmethod
    async def get_answer_or_404(
        session: AsyncSession,
        question_id: int,
        answer_id: int,
    ) -> Answer:
        await QuestionService.get_question_or_404(session, question_id)
        answer = await AnswerRepository.get_by_id_and_question_id(
            session, answer_id=answer_id, question_id=question_id
        )
        if answer is None:
            raise NotFoundError(
                resource="Answer",
                resource_id=answer_id,
                details={"question_id": str(question_id)},
            )
        return answer

    @staticmethod
    async def create_answer(
        session: AsyncSession,
        question_id: int,
        payload: AnswerCreate,
    ) -> Answer:
        """Insert an answer after checking the question and the student."""
        await QuestionService.get_question_or_404(session, question_id)
        await require_actor(
            session, payload.student_id, UserRole.STUDENT, "answer questions"
        )

        answer = await AnswerRepository.create(
            session,
            question_id=question_id,
            student_id=payload.student_id,
            answer=payload.answer,
        )
        logger.info(
            "Answer created",
            answer_id=answer.id,
            question_id=question_id,
            student_id=payload.student_id,
        )
        return answer

    @staticmethod
    async def list_answers(
        session: AsyncSession,
        question_id: int,
    ) -> EnrichmentResult[Answer]:
        """Return a question's answers, newest first, each paired with its student."""
        await QuestionService.get_question_or_404(session, question_id)
        answers = await AnswerRepository.get_by_question_id(session, question_id)
        return await enrich_with_users(session, answers, _student_id)

    @staticmethod
    async def update_answer(
        session: AsyncSession,
        question_id: int,
        answer_id: int,
        payload: AnswerUpdate,
    ) -> Answer:
        """Replace an answer's text on behalf of its student."""
        answer = await AnswerService.get_answer_or_404(session, question_id, answer_id)
        ensure_owner(answer.student_id, payload.student_id, "answer")
        await require_actor(
            session, payload.student_id, UserRole.STUDENT, "modify answers"
        )

        answer = await AnswerRepository.update_text(session, answer, payload.answer)
        logger.info("Answer updated", answer_id=answer_id, question_id=question_id)
        return answer

    @staticmethod
    async def delete_answer(
        session: AsyncSession,
        question_id: int,
        answer_id: int,
        student_id: int,
    ) -> None:
        """Hard delete an answer owned by ``student_id``."""
        answer = await AnswerService.get_answer_or_404(session, question_id, answer_id)
        ensure_owner(answer.student_id, student_id, "answer")
        await require_actor(session, student_id, UserRole.STUDENT, "delete answers")

        await AnswerRepository.delete(session, answer_id)
        logger.info("Answer deleted", answer_id=answer_id, question_id=question_id)
