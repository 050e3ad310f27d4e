"""User model for teachers and students."""

from enum import StrEnum

from sqlalchemy import Enum, String
from sqlalchemy.orm import Mapped, mapped_column

from classroom_qa.models.base import Base


class UserRole(StrEnum):
    """Role a user holds in the classroom."""

    TEACHER = "teacher"
    STUDENT = "student"


class User(Base):
    """Represents a teacher or a student."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    role: Mapped[UserRole] = mapped_column(
        Enum(
            UserRole,
            native_enum=False,
            length=20,
            values_callable=lambda roles: [role.value for role in roles],
        ),
        nullable=False,
    )
