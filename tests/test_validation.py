"""Unit tests for request body validation."""

import pytest

from classroom_qa.exceptions import DomainValidationError
from classroom_qa.models.user import UserRole
from classroom_qa.services.validation import (
    ensure_question_has_content,
    validate_actor,
    validate_answer_create,
    validate_answer_update,
    validate_question_create,
    validate_question_update,
    validate_user_create,
)


class TestValidateUserCreate:
    def test_trims_name(self) -> None:
        """Verify the name is trimmed and the role parsed."""
        user = validate_user_create({"name": "  Ana  ", "role": "teacher"})

        assert user.name == "Ana"
        assert user.role is UserRole.TEACHER

    @pytest.mark.parametrize("name", [None, "", "   ", 42])
    def test_rejects_missing_or_blank_name(self, name) -> None:
        """Verify a missing, blank or non-string name is rejected."""
        with pytest.raises(DomainValidationError) as exc_info:
            validate_user_create({"name": name, "role": "student"})

        assert exc_info.value.field == "name"

    def test_name_length_limit(self) -> None:
        """Verify names longer than 100 characters are rejected."""
        validate_user_create({"name": "a" * 100, "role": "student"})

        with pytest.raises(DomainValidationError) as exc_info:
            validate_user_create({"name": "a" * 101, "role": "student"})

        assert "100" in exc_info.value.message

    @pytest.mark.parametrize("role", [None, "admin", "Teacher", ["teacher"]])
    def test_rejects_unknown_role(self, role) -> None:
        """Verify only the exact teacher/student roles are accepted."""
        with pytest.raises(DomainValidationError) as exc_info:
            validate_user_create({"name": "Ana", "role": role})

        assert exc_info.value.field == "role"

    def test_name_is_checked_before_role(self) -> None:
        """Verify name errors are reported before role errors."""
        with pytest.raises(DomainValidationError) as exc_info:
            validate_user_create({"name": "", "role": "admin"})

        assert exc_info.value.field == "name"


class TestValidateQuestionCreate:
    def test_title_only(self) -> None:
        """Verify a question with only a title is accepted."""
        question = validate_question_create({"teacher_id": 1, "title": " X "})

        assert question.title == "X"
        assert question.description is None

    def test_description_only_drops_blank_title(self) -> None:
        """Verify a blank title becomes None when a description is given."""
        question = validate_question_create(
            {"teacher_id": "1", "title": "  ", "description": "Body"}
        )

        assert question.teacher_id == 1
        assert question.title is None
        assert question.description == "Body"

    def test_requires_title_or_description(self) -> None:
        """Verify a question needs a title or a description."""
        with pytest.raises(DomainValidationError) as exc_info:
            validate_question_create({"teacher_id": 1, "title": "", "description": None})

        assert "title or description" in exc_info.value.message

    def test_title_length_limit(self) -> None:
        """Verify titles longer than 200 characters are rejected."""
        with pytest.raises(DomainValidationError) as exc_info:
            validate_question_create({"teacher_id": 1, "title": "t" * 201})

        assert exc_info.value.field == "title"

    def test_description_must_be_string(self) -> None:
        """Verify a non-string description is rejected."""
        with pytest.raises(DomainValidationError) as exc_info:
            validate_question_create({"teacher_id": 1, "title": "X", "description": 5})

        assert exc_info.value.field == "description"

    def test_content_checked_before_teacher_id(self) -> None:
        """Verify the content rule runs before the teacher id check."""
        with pytest.raises(DomainValidationError) as exc_info:
            validate_question_create({"title": ""})

        assert exc_info.value.field is None

    @pytest.mark.parametrize("teacher_id", [None, "abc", True, 0, -3, 1.5])
    def test_rejects_invalid_teacher_id(self, teacher_id) -> None:
        """Verify malformed teacher ids are rejected."""
        with pytest.raises(DomainValidationError) as exc_info:
            validate_question_create({"teacher_id": teacher_id, "title": "X"})

        assert exc_info.value.field == "teacher_id"


class TestValidateQuestionUpdate:
    def test_only_present_fields_are_changes(self) -> None:
        """Verify omitted fields are not part of the change set."""
        update = validate_question_update({"teacher_id": 1, "title": " New "})

        assert update.changes() == {"title": "New"}

    def test_null_and_blank_clear_fields(self) -> None:
        """Verify null and blank values clear a field."""
        update = validate_question_update(
            {"teacher_id": 1, "title": None, "description": "   "}
        )

        assert update.changes() == {"title": None, "description": None}

    def test_no_fields_is_an_empty_change(self) -> None:
        """Verify an update without fields changes nothing."""
        update = validate_question_update({"teacher_id": 1})

        assert update.changes() == {}

    def test_rejects_non_string_title(self) -> None:
        """Verify a non-string title is rejected on update."""
        with pytest.raises(DomainValidationError) as exc_info:
            validate_question_update({"teacher_id": 1, "title": ["X"]})

        assert exc_info.value.field == "title"

    def test_title_length_limit(self) -> None:
        """Verify the title limit also applies on update."""
        with pytest.raises(DomainValidationError):
            validate_question_update({"teacher_id": 1, "title": "t" * 201})


class TestEnsureQuestionHasContent:
    def test_accepts_either_field(self) -> None:
        """Verify either a title or a description is enough."""
        ensure_question_has_content("X", None)
        ensure_question_has_content(None, "Body")

    def test_rejects_both_empty(self) -> None:
        """Verify a question with neither field is rejected."""
        with pytest.raises(DomainValidationError):
            ensure_question_has_content(None, "")


class TestValidateAnswer:
    def test_create_trims_answer(self) -> None:
        """Verify answer text is trimmed."""
        answer = validate_answer_create({"student_id": 2, "answer": "  Y "})

        assert answer.answer == "Y"
        assert answer.student_id == 2

    @pytest.mark.parametrize("text", [None, "", "  ", 7])
    def test_rejects_blank_answer(self, text) -> None:
        """Verify a missing, blank or non-string answer is rejected."""
        with pytest.raises(DomainValidationError) as exc_info:
            validate_answer_create({"student_id": 2, "answer": text})

        assert exc_info.value.field == "answer"

    def test_update_requires_student_id(self) -> None:
        """Verify an answer update must name the student."""
        with pytest.raises(DomainValidationError) as exc_info:
            validate_answer_update({"answer": "Y"})

        assert exc_info.value.field == "student_id"


class TestValidateActor:
    def test_missing_body(self) -> None:
        """Verify a missing body is reported against the actor field."""
        with pytest.raises(DomainValidationError) as exc_info:
            validate_actor(None, "teacher_id")

        assert exc_info.value.field == "teacher_id"

    def test_numeric_string(self) -> None:
        """Verify a numeric string id is accepted."""
        assert validate_actor({"student_id": " 12 "}, "student_id") == 12
