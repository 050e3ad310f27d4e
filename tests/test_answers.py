"""Tests for answer endpoints."""

from unittest.mock import AsyncMock, patch

from httpx import AsyncClient
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from classroom_qa.models.answer import Answer


async def _count_answers(session_factory) -> int:
    async with session_factory() as session:
        result = await session.execute(select(func.count()).select_from(Answer))
        return result.scalar_one()


class TestCreateAnswer:
    """Tests for POST /api/questions/{question_id}/answers."""

    async def test_student_answers(
        self, client: AsyncClient, question: dict, student: dict
    ) -> None:
        """Verify a student can answer a question."""
        response = await client.post(
            f"/api/questions/{question['id']}/answers",
            json={"student_id": student["id"], "answer": "  Because.  "},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["message"] == "Answer created successfully"
        assert data["answer"]["answer"] == "Because."
        assert data["answer"]["question_id"] == question["id"]
        assert data["answer"]["student_id"] == student["id"]

    async def test_teacher_cannot_answer(
        self, client: AsyncClient, question: dict, teacher: dict, session_factory
    ) -> None:
        """Verify a teacher gets 403 when answering."""
        response = await client.post(
            f"/api/questions/{question['id']}/answers",
            json={"student_id": teacher["id"], "answer": "Y"},
        )

        assert response.status_code == 403
        assert await _count_answers(session_factory) == 0

    async def test_unknown_question_returns_404(
        self, client: AsyncClient, student: dict
    ) -> None:
        """Verify answering an unknown question returns 404."""
        response = await client.post(
            "/api/questions/999/answers",
            json={"student_id": student["id"], "answer": "Y"},
        )

        assert response.status_code == 404
        assert response.json()["resource"] == "Question"

    async def test_blank_answer_returns_400(
        self, client: AsyncClient, question: dict, student: dict
    ) -> None:
        """Verify a blank answer returns 400."""
        response = await client.post(
            f"/api/questions/{question['id']}/answers",
            json={"student_id": student["id"], "answer": "   "},
        )

        assert response.status_code == 400
        assert response.json()["field"] == "answer"


class TestListAnswers:
    """Tests for GET /api/questions/{question_id}/answers."""

    async def test_empty_list(self, client: AsyncClient, question: dict) -> None:
        """Verify a question without answers lists none."""
        response = await client.get(f"/api/questions/{question['id']}/answers")

        assert response.status_code == 200
        assert response.json() == {"question_id": question["id"], "answers": []}

    async def test_newest_first_with_student(
        self,
        client: AsyncClient,
        question: dict,
        student: dict,
        other_student: dict,
    ) -> None:
        """Verify answers are listed newest first with their student."""
        url = f"/api/questions/{question['id']}/answers"
        await client.post(url, json={"student_id": student["id"], "answer": "one"})
        await client.post(url, json={"student_id": other_student["id"], "answer": "two"})

        answers = (await client.get(url)).json()["answers"]

        assert [a["answer"] for a in answers] == ["two", "one"]
        assert answers[0]["student"] == other_student
        assert answers[1]["student"] == student

    async def test_unknown_question_returns_404(self, client: AsyncClient) -> None:
        """Verify listing answers of an unknown question returns 404."""
        response = await client.get("/api/questions/999/answers")

        assert response.status_code == 404

    async def test_user_lookup_failure_keeps_answers(
        self, client: AsyncClient, answer: dict
    ) -> None:
        """Verify answers are still listed when the user lookup fails."""
        failure = OperationalError("SELECT users", {}, Exception("timeout"))
        with patch(
            "classroom_qa.services.enrichment.UserRepository.get_by_ids",
            new=AsyncMock(side_effect=failure),
        ):
            response = await client.get(
                f"/api/questions/{answer['question_id']}/answers"
            )

        assert response.status_code == 200
        answers = response.json()["answers"]
        assert answers[0]["id"] == answer["id"]
        assert answers[0]["student"] is None


class TestUpdateAnswer:
    """Tests for PUT /api/questions/{question_id}/answers/{answer_id}."""

    async def test_owner_updates(
        self, client: AsyncClient, answer: dict, student: dict
    ) -> None:
        """Verify the owning student can edit the answer."""
        response = await client.put(
            f"/api/questions/{answer['question_id']}/answers/{answer['id']}",
            json={"student_id": student["id"], "answer": "Revised"},
        )

        assert response.status_code == 200
        assert response.json()["message"] == "Answer updated successfully"
        assert response.json()["answer"]["answer"] == "Revised"

    async def test_non_owner_is_forbidden_and_answer_unchanged(
        self, client: AsyncClient, answer: dict, other_student: dict
    ) -> None:
        """Verify another student gets 403 and the answer is unchanged."""
        url = f"/api/questions/{answer['question_id']}/answers"
        response = await client.put(
            f"{url}/{answer['id']}",
            json={"student_id": other_student["id"], "answer": "Hijack"},
        )

        assert response.status_code == 403
        assert response.json()["reason"] == "not_owner"
        answers = (await client.get(url)).json()["answers"]
        assert answers[0]["answer"] == answer["answer"]

    async def test_non_owner_check_precedes_actor_lookup(
        self, client: AsyncClient, answer: dict
    ) -> None:
        """Verify ownership is checked before the actor lookup."""
        response = await client.put(
            f"/api/questions/{answer['question_id']}/answers/{answer['id']}",
            json={"student_id": 777, "answer": "Hijack"},
        )

        assert response.status_code == 403

    async def test_answer_of_another_question_is_not_found(
        self, client: AsyncClient, answer: dict, student: dict, teacher: dict
    ) -> None:
        """Verify an answer addressed through another question returns 404."""
        other = await client.post(
            "/api/questions", json={"teacher_id": teacher["id"], "title": "Other"}
        )
        other_id = other.json()["question"]["id"]

        response = await client.put(
            f"/api/questions/{other_id}/answers/{answer['id']}",
            json={"student_id": student["id"], "answer": "Moved"},
        )

        assert response.status_code == 404
        assert response.json()["resource"] == "Answer"


class TestDeleteAnswer:
    """Tests for DELETE /api/questions/{question_id}/answers/{answer_id}."""

    async def test_owner_deletes(
        self, client: AsyncClient, answer: dict, student: dict, session_factory
    ) -> None:
        """Verify the owning student can delete the answer."""
        response = await client.request(
            "DELETE",
            f"/api/questions/{answer['question_id']}/answers/{answer['id']}",
            json={"student_id": student["id"]},
        )

        assert response.status_code == 200
        assert response.json() == {"message": "Answer deleted successfully"}
        assert await _count_answers(session_factory) == 0

    async def test_non_owner_cannot_delete(
        self, client: AsyncClient, answer: dict, other_student: dict, session_factory
    ) -> None:
        """Verify another student cannot delete the answer."""
        response = await client.request(
            "DELETE",
            f"/api/questions/{answer['question_id']}/answers/{answer['id']}",
            json={"student_id": other_student["id"]},
        )

        assert response.status_code == 403
        assert await _count_answers(session_factory) == 1
