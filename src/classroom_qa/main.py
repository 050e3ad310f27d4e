"""Classroom Q&A FastAPI Application Entry Point."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import FastAPI, Request
from loguru import logger

from classroom_qa import __version__
from classroom_qa.config import Settings, get_settings
from classroom_qa.db import create_session_factory, create_store_engine
from classroom_qa.exception_handlers import register_exception_handlers
from classroom_qa.middleware import configure_logging, register_middleware
from classroom_qa.routers import answers_router, questions_router, users_router
from classroom_qa.schemas import HealthResponse, ServiceInfoResponse


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Build the store client once at startup and dispose it on shutdown."""
    settings: Settings = app.state.settings
    configure_logging(
        "DEBUG" if settings.debug else "INFO",
        serialize=settings.is_production,
    )

    engine = create_store_engine(settings.database_url, echo=settings.debug)
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)

    logger.info(
        "Application starting",
        environment=settings.environment,
        port=settings.port,
        debug=settings.debug,
    )
    yield
    await engine.dispose()
    logger.info("Application shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Assemble the application for the given settings."""
    settings = settings or get_settings()

    app = FastAPI(
        title="Classroom Q&A API",
        description="Teachers post questions, students answer them",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings

    register_middleware(app, settings)
    register_exception_handlers(app)

    app.include_router(users_router, prefix="/api")
    app.include_router(questions_router, prefix="/api")
    app.include_router(answers_router, prefix="/api")

    @app.get(
        "/",
        response_model=ServiceInfoResponse,
        tags=["Health"],
        summary="Service banner",
    )
    async def root() -> ServiceInfoResponse:
        """Describe the service and its entry points."""
        return ServiceInfoResponse(
            status="OK",
            message="Classroom Q&A API",
            version=__version__,
            endpoints={
                "health": "/health",
                "api": "/api",
                "users": "/api/users",
                "questions": "/api/questions",
                "answers": "/api/questions/{question_id}/answers",
            },
        )

    @app.get(
        "/health",
        response_model=HealthResponse,
        tags=["Health"],
        summary="Health check endpoint",
    )
    async def health_check(request: Request) -> HealthResponse:
        """Liveness probe reporting port and environment."""
        current: Settings = request.app.state.settings
        return HealthResponse(
            status="OK",
            message="Server is running",
            port=current.port,
            environment=current.environment,
            deployment=current.deployment_url or "local",
            timestamp=datetime.now(UTC),
        )

    return app


app = create_app()
