"""Pydantic schemas for answer endpoints."""

from datetime import datetime

from pydantic import BaseModel, Field

from classroom_qa.schemas.user import UserResponse


class AnswerCreate(BaseModel):
    """Validated payload for posting an answer."""

    student_id: int
    answer: str


class AnswerUpdate(AnswerCreate):
    """Validated payload for replacing an answer's text."""


class AnswerResponse(BaseModel):
    """Response model for a stored answer."""

    id: int = Field(..., description="Answer ID")
    question_id: int = Field(..., description="Answered question ID")
    student_id: int = Field(..., description="Author student ID")
    answer: str = Field(..., description="Answer text")
    created_at: datetime = Field(..., description="Submission timestamp")

    model_config = {"from_attributes": True}


class AnswerWithStudent(AnswerResponse):
    """Answer enriched with its author, or ``None`` if unavailable."""

    student: UserResponse | None = Field(None, description="Author student")


class AnswerListEnvelope(BaseModel):
    question_id: int
    answers: list[AnswerWithStudent]


class AnswerWriteResponse(BaseModel):
    message: str = Field(..., examples=["Answer created successfully"])
    answer: AnswerResponse
