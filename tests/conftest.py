"""Shared fixtures: an in-memory SQLite store and an ASGI client bound to it."""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from classroom_qa.config import Settings
from classroom_qa.db import create_session_factory
from classroom_qa.main import create_app
from classroom_qa.models.base import Base

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def test_engine():
    """Create an async SQLite engine for testing."""
    engine = create_async_engine(TEST_DATABASE_URL, echo=False, poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(test_engine) -> async_sessionmaker[AsyncSession]:
    """Create the session factory."""
    return create_session_factory(test_engine)


@pytest.fixture
async def test_session(session_factory):
    """Create a test session."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        database_url=TEST_DATABASE_URL,
        environment="test",
        port=3001,
    )


@pytest.fixture
def test_app(test_settings: Settings, session_factory):
    """Application wired to the test store without running the lifespan."""
    app = create_app(test_settings)
    app.state.session_factory = session_factory
    return app


@pytest.fixture
async def client(test_app):
    """Async HTTP client for the test application."""
    async with AsyncClient(
        transport=ASGITransport(app=test_app), base_url="http://test"
    ) as http_client:
        yield http_client


async def _create_user(client: AsyncClient, name: str, role: str) -> dict:
    response = await client.post("/api/users", json={"name": name, "role": role})
    assert response.status_code == 201
    return response.json()["user"]


@pytest.fixture
async def teacher(client: AsyncClient) -> dict:
    return await _create_user(client, "Ana", "teacher")


@pytest.fixture
async def other_teacher(client: AsyncClient) -> dict:
    return await _create_user(client, "Carlos", "teacher")


@pytest.fixture
async def student(client: AsyncClient) -> dict:
    return await _create_user(client, "Bia", "student")


@pytest.fixture
async def other_student(client: AsyncClient) -> dict:
    return await _create_user(client, "Davi", "student")


@pytest.fixture
async def question(client: AsyncClient, teacher: dict) -> dict:
    response = await client.post(
        "/api/questions",
        json={"teacher_id": teacher["id"], "title": "X", "description": "About X"},
    )
    assert response.status_code == 201
    return response.json()["question"]


@pytest.fixture
async def answer(client: AsyncClient, question: dict, student: dict) -> dict:
    response = await client.post(
        f"/api/questions/{question['id']}/answers",
        json={"student_id": student["id"], "answer": "Y"},
    )
    assert response.status_code == 201
    return response.json()["answer"]
