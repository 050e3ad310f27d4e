"""Service layer for business logic."""

from classroom_qa.services.answers import AnswerService
from classroom_qa.services.questions import QuestionService
from classroom_qa.services.users import UserService

__all__ = ["AnswerService", "QuestionService", "UserService"]
