"""API routers."""

from classroom_qa.routers.answers import router as answers_router
from classroom_qa.routers.questions import router as questions_router
from classroom_qa.routers.users import router as users_router

__all__ = ["answers_router", "questions_router", "users_router"]
