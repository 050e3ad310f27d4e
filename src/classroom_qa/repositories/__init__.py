"""Repository layer for database operations."""

from classroom_qa.repositories.answer import AnswerRepository
from classroom_qa.repositories.question import QuestionRepository
from classroom_qa.repositories.user import UserRepository

__all__ = ["AnswerRepository", "QuestionRepository", "UserRepository"]
