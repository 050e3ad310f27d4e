"""Pydantic schemas for question endpoints."""

from datetime import datetime

from pydantic import BaseModel, Field

from classroom_qa.schemas.user import UserResponse


class QuestionCreate(BaseModel):
    """Validated payload for creating a question."""

    teacher_id: int
    title: str | None = None
    description: str | None = None


class QuestionUpdate(BaseModel):
    """Validated payload for a partial question update.

    Only fields explicitly set are applied; ``None`` clears a field.
    """

    teacher_id: int
    title: str | None = None
    description: str | None = None

    def changes(self) -> dict[str, str | None]:
        """Return the column values the caller asked to change."""
        return self.model_dump(exclude_unset=True, exclude={"teacher_id"})


class QuestionResponse(BaseModel):
    """Response model for a stored question."""

    id: int = Field(..., description="Question ID")
    teacher_id: int = Field(..., description="Author teacher ID")
    title: str | None = Field(None, description="Question title")
    description: str | None = Field(None, description="Question body")
    created_at: datetime = Field(..., description="Creation timestamp")

    model_config = {"from_attributes": True}


class QuestionWithTeacher(QuestionResponse):
    """Question enriched with its author, or ``None`` if unavailable."""

    teacher: UserResponse | None = Field(None, description="Author teacher")


class QuestionEnvelope(BaseModel):
    question: QuestionWithTeacher


class QuestionListEnvelope(BaseModel):
    questions: list[QuestionWithTeacher]


class QuestionWriteResponse(BaseModel):
    message: str = Field(..., examples=["Question created successfully"])
    question: QuestionResponse
