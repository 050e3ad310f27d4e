"""Answer endpoints, nested under their question."""

from typing import Any

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from classroom_qa.db import get_db
from classroom_qa.models.answer import Answer
from classroom_qa.schemas.answer import (
    AnswerListEnvelope,
    AnswerResponse,
    AnswerWithStudent,
    AnswerWriteResponse,
)
from classroom_qa.schemas.common import MessageResponse
from classroom_qa.schemas.user import UserResponse
from classroom_qa.services.answers import AnswerService
from classroom_qa.services.enrichment import EnrichedRow
from classroom_qa.services.validation import (
    validate_actor,
    validate_answer_create,
    validate_answer_update,
)

router = APIRouter(prefix="/questions/{question_id}/answers", tags=["Answers"])


def _with_student(item: EnrichedRow[Answer]) -> AnswerWithStudent:
    return AnswerWithStudent(
        **AnswerResponse.model_validate(item.row).model_dump(),
        student=UserResponse.model_validate(item.user) if item.user else None,
    )


@router.post(
    "",
    response_model=AnswerWriteResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Answer a question",
    description="Post an answer. Only students may answer questions.",
)
async def create_answer(
    question_id: int,
    payload: dict[str, Any] = Body(...),
    session: AsyncSession = Depends(get_db),
) -> AnswerWriteResponse:
    """Validate and insert an answer on behalf of a student."""
    answer_data = validate_answer_create(payload)
    answer = await AnswerService.create_answer(session, question_id, answer_data)
    return AnswerWriteResponse(
        message="Answer created successfully",
        answer=AnswerResponse.model_validate(answer),
    )


@router.get(
    "",
    response_model=AnswerListEnvelope,
    summary="List answers",
    description="Return a question's answers, newest first, each with its student.",
)
async def list_answers(
    question_id: int,
    session: AsyncSession = Depends(get_db),
) -> AnswerListEnvelope:
    """List all answers to a question."""
    result = await AnswerService.list_answers(session, question_id)
    return AnswerListEnvelope(
        question_id=question_id,
        answers=[_with_student(item) for item in result.rows],
    )


@router.put(
    "/{answer_id}",
    response_model=AnswerWriteResponse,
    summary="Update an answer",
    description="Replace an answer's text. Only the student who wrote it may update it.",
)
async def update_answer(
    question_id: int,
    answer_id: int,
    payload: dict[str, Any] = Body(...),
    session: AsyncSession = Depends(get_db),
) -> AnswerWriteResponse:
    """Replace the text of an answer."""
    update_data = validate_answer_update(payload)
    answer = await AnswerService.update_answer(
        session, question_id, answer_id, update_data
    )
    return AnswerWriteResponse(
        message="Answer updated successfully",
        answer=AnswerResponse.model_validate(answer),
    )


@router.delete(
    "/{answer_id}",
    response_model=MessageResponse,
    summary="Delete an answer",
    description="Hard delete an answer. Only the student who wrote it may delete it.",
)
async def delete_answer(
    question_id: int,
    answer_id: int,
    payload: dict[str, Any] | None = Body(None),
    session: AsyncSession = Depends(get_db),
) -> MessageResponse:
    """Delete an answer owned by the acting student."""
    student_id = validate_actor(payload, "student_id")
    await AnswerService.delete_answer(session, question_id, answer_id, student_id)
    return MessageResponse(message="Answer deleted successfully")
