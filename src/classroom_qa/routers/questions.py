"""Question endpoints."""

from typing import Any

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from classroom_qa.db import get_db
from classroom_qa.models.question import Question
from classroom_qa.schemas.common import MessageResponse
from classroom_qa.schemas.question import (
    QuestionEnvelope,
    QuestionListEnvelope,
    QuestionResponse,
    QuestionWithTeacher,
    QuestionWriteResponse,
)
from classroom_qa.schemas.user import UserResponse
from classroom_qa.services.enrichment import EnrichedRow
from classroom_qa.services.questions import QuestionService
from classroom_qa.services.validation import (
    validate_actor,
    validate_question_create,
    validate_question_update,
)

router = APIRouter(prefix="/questions", tags=["Questions"])


def _with_teacher(item: EnrichedRow[Question]) -> QuestionWithTeacher:
    return QuestionWithTeacher(
        **QuestionResponse.model_validate(item.row).model_dump(),
        teacher=UserResponse.model_validate(item.user) if item.user else None,
    )


@router.post(
    "",
    response_model=QuestionWriteResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a question",
    description="Create a question. Only teachers may create questions.",
)
async def create_question(
    payload: dict[str, Any] = Body(...),
    session: AsyncSession = Depends(get_db),
) -> QuestionWriteResponse:
    """Validate and insert a question on behalf of a teacher."""
    question_data = validate_question_create(payload)
    question = await QuestionService.create_question(session, question_data)
    return QuestionWriteResponse(
        message="Question created successfully",
        question=QuestionResponse.model_validate(question),
    )


@router.get(
    "",
    response_model=QuestionListEnvelope,
    summary="List questions",
    description="Return all questions, newest first, each with its teacher.",
)
async def list_questions(
    session: AsyncSession = Depends(get_db),
) -> QuestionListEnvelope:
    """List all questions."""
    result = await QuestionService.list_questions(session)
    return QuestionListEnvelope(questions=[_with_teacher(item) for item in result.rows])


@router.get(
    "/{question_id}",
    response_model=QuestionEnvelope,
    summary="Get a question",
)
async def get_question(
    question_id: int,
    session: AsyncSession = Depends(get_db),
) -> QuestionEnvelope:
    """Return one question with its teacher."""
    item = await QuestionService.get_question(session, question_id)
    return QuestionEnvelope(question=_with_teacher(item))


@router.put(
    "/{question_id}",
    response_model=QuestionWriteResponse,
    summary="Update a question",
    description=(
        "Partially update a question. Only the teacher who created it may "
        "update it, and it must keep a title or a description."
    ),
)
async def update_question(
    question_id: int,
    payload: dict[str, Any] = Body(...),
    session: AsyncSession = Depends(get_db),
) -> QuestionWriteResponse:
    """Apply the fields present in the body to a question."""
    update_data = validate_question_update(payload)
    question = await QuestionService.update_question(session, question_id, update_data)
    return QuestionWriteResponse(
        message="Question updated successfully",
        question=QuestionResponse.model_validate(question),
    )


@router.delete(
    "/{question_id}",
    response_model=MessageResponse,
    summary="Delete a question",
    description="Hard delete a question. Only the teacher who created it may delete it.",
)
async def delete_question(
    question_id: int,
    payload: dict[str, Any] | None = Body(None),
    session: AsyncSession = Depends(get_db),
) -> MessageResponse:
    """Delete a question owned by the acting teacher."""
    teacher_id = validate_actor(payload, "teacher_id")
    await QuestionService.delete_question(session, question_id, teacher_id)
    return MessageResponse(message="Question deleted successfully")
