"""Pydantic schemas for the Classroom Q&A API."""

from classroom_qa.schemas.answer import (
    AnswerCreate,
    AnswerListEnvelope,
    AnswerResponse,
    AnswerUpdate,
    AnswerWithStudent,
    AnswerWriteResponse,
)
from classroom_qa.schemas.common import (
    ErrorResponse,
    HealthResponse,
    MessageResponse,
    ServiceInfoResponse,
)
from classroom_qa.schemas.question import (
    QuestionCreate,
    QuestionEnvelope,
    QuestionListEnvelope,
    QuestionResponse,
    QuestionUpdate,
    QuestionWithTeacher,
    QuestionWriteResponse,
)
from classroom_qa.schemas.user import (
    UserCreate,
    UserCreatedResponse,
    UserEnvelope,
    UserResponse,
)

__all__ = [
    "AnswerCreate",
    "AnswerListEnvelope",
    "AnswerResponse",
    "AnswerUpdate",
    "AnswerWithStudent",
    "AnswerWriteResponse",
    "ErrorResponse",
    "HealthResponse",
    "MessageResponse",
    "QuestionCreate",
    "QuestionEnvelope",
    "QuestionListEnvelope",
    "QuestionResponse",
    "QuestionUpdate",
    "QuestionWithTeacher",
    "QuestionWriteResponse",
    "ServiceInfoResponse",
    "UserCreate",
    "UserCreatedResponse",
    "UserEnvelope",
    "UserResponse",
]
