"""Request body validation for users, questions and answers.

Every function here is pure: it inspects the decoded JSON body and either
returns a typed payload or raises :class:`DomainValidationError` for the
first rule that fails. Content rules are checked before the actor id.
"""

from typing import Any

from classroom_qa.exceptions import DomainValidationError
from classroom_qa.models.user import UserRole
from classroom_qa.schemas.answer import AnswerCreate, AnswerUpdate
from classroom_qa.schemas.question import QuestionCreate, QuestionUpdate
from classroom_qa.schemas.user import UserCreate

MAX_NAME_LENGTH = 100
MAX_TITLE_LENGTH = 200

_MISSING = object()


def _is_non_blank(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def _parse_id(payload: dict[str, Any] | None, field: str) -> int:
    """Read a positive integer id, accepting numeric strings."""
    value = (payload or {}).get(field)
    parsed: int | None = None

    # bool is an int subclass and never a valid id
    if isinstance(value, int) and not isinstance(value, bool):
        parsed = value
    elif isinstance(value, str) and value.strip().isdecimal():
        parsed = int(value.strip())

    if parsed is None or parsed <= 0:
        raise DomainValidationError(
            f"{field} is required and must be a positive integer",
            field=field,
        )
    return parsed


def _check_title_length(title: str) -> None:
    if len(title) > MAX_TITLE_LENGTH:
        raise DomainValidationError(
            f"Title must be at most {MAX_TITLE_LENGTH} characters",
            field="title",
            details={"max_length": MAX_TITLE_LENGTH},
        )


def validate_user_create(payload: dict[str, Any]) -> UserCreate:
    """Validate a user creation body."""
    name = payload.get("name")
    if not _is_non_blank(name):
        raise DomainValidationError(
            "Name is required and must be a non-empty string",
            field="name",
        )

    name = name.strip()
    if len(name) > MAX_NAME_LENGTH:
        raise DomainValidationError(
            f"Name must be at most {MAX_NAME_LENGTH} characters",
            field="name",
            details={"max_length": MAX_NAME_LENGTH},
        )

    role = payload.get("role")
    if not isinstance(role, str) or role not in {r.value for r in UserRole}:
        raise DomainValidationError(
            'Role must be "teacher" or "student"',
            field="role",
        )

    return UserCreate(name=name, role=UserRole(role))


def validate_question_create(payload: dict[str, Any]) -> QuestionCreate:
    """Validate a question creation body.

    At least one of ``title`` or ``description`` must be a non-blank string.
    Blank values of the other field are stored as ``None``.
    """
    title = payload.get("title")
    description = payload.get("description")
    has_title = _is_non_blank(title)
    has_description = _is_non_blank(description)

    if not has_title and not has_description:
        raise DomainValidationError(
            "At least one of title or description is required"
        )

    if title is not None and not isinstance(title, str):
        raise DomainValidationError("Title must be a string", field="title")
    if has_title:
        _check_title_length(title.strip())

    if description is not None and not isinstance(description, str):
        raise DomainValidationError(
            "Description must be a string",
            field="description",
        )

    return QuestionCreate(
        teacher_id=_parse_id(payload, "teacher_id"),
        title=title.strip() if has_title else None,
        description=description.strip() if has_description else None,
    )


def validate_question_update(payload: dict[str, Any]) -> QuestionUpdate:
    """Validate a partial question update body.

    Omitted fields are left untouched; ``null`` or a blank string clears the
    field. Whether the merged question still has content is checked later by
    :func:`ensure_question_has_content`, once the stored row is known.
    """
    changes: dict[str, str | None] = {}

    for field in ("title", "description"):
        value = payload.get(field, _MISSING)
        if value is _MISSING:
            continue
        if value is not None and not isinstance(value, str):
            raise DomainValidationError(
                f"{field.capitalize()} must be a string or null",
                field=field,
            )
        cleaned = value.strip() if value is not None else ""
        if field == "title":
            _check_title_length(cleaned)
        changes[field] = cleaned or None

    return QuestionUpdate(teacher_id=_parse_id(payload, "teacher_id"), **changes)


def ensure_question_has_content(title: str | None, description: str | None) -> None:
    """Reject a question that would end up with neither title nor description."""
    if not title and not description:
        raise DomainValidationError(
            "A question must keep at least a title or a description"
        )


def _validate_answer_text(payload: dict[str, Any]) -> str:
    answer = payload.get("answer")
    if not _is_non_blank(answer):
        raise DomainValidationError(
            "Answer is required and must be a non-empty string",
            field="answer",
        )
    return answer.strip()


def validate_answer_create(payload: dict[str, Any]) -> AnswerCreate:
    """Validate an answer creation body."""
    answer = _validate_answer_text(payload)
    return AnswerCreate(student_id=_parse_id(payload, "student_id"), answer=answer)


def validate_answer_update(payload: dict[str, Any]) -> AnswerUpdate:
    """Validate an answer update body."""
    answer = _validate_answer_text(payload)
    return AnswerUpdate(student_id=_parse_id(payload, "student_id"), answer=answer)


def validate_actor(payload: dict[str, Any] | None, field: str) -> int:
    """Validate the actor id carried by a delete request."""
    return _parse_id(payload, field)
