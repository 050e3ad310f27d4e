"""Database models package."""

from classroom_qa.models.answer import Answer
from classroom_qa.models.base import Base
from classroom_qa.models.question import Question
from classroom_qa.models.user import User, UserRole

__all__ = ["Answer", "Base", "Question", "User", "UserRole"]
