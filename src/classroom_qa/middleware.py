"""Middleware for FastAPI application."""

import sys
import time
import uuid

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from classroom_qa.config import Settings

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level> | "
    "{extra}"
)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log each request with its request id and the route that served it.

    The request id is bound to the loguru context, so log lines emitted by
    services while handling the request carry it too.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id

        with logger.contextualize(request_id=request_id):
            start_time = time.perf_counter()
            logger.debug("Request started", method=request.method, path=request.url.path)

            response = await call_next(request)
            duration_ms = round((time.perf_counter() - start_time) * 1000, 2)

            route = request.scope.get("route")
            level = "WARNING" if response.status_code >= 500 else "INFO"
            logger.log(
                level,
                "Request completed",
                method=request.method,
                route=getattr(route, "name", None) or "unmatched",
                path=request.url.path,
                status_code=response.status_code,
                duration_ms=duration_ms,
            )

        response.headers["X-Request-ID"] = request_id
        return response


def configure_logging(level: str = "INFO", serialize: bool = False) -> None:
    """Install the single loguru sink.

    Production emits one JSON object per line; elsewhere a colored line with
    the bound context (request id, route, ids) is printed.
    """
    logger.remove()
    logger.add(
        sink=sys.stderr,
        format=LOG_FORMAT,
        level=level,
        serialize=serialize,
        backtrace=False,
    )


def register_middleware(app: FastAPI, settings: Settings) -> None:
    """Register all middleware with the app."""
    app.add_middleware(RequestLoggingMiddleware)

    # Outside production every origin is accepted for local testing.
    allowed_origins = settings.allowed_origins if settings.is_production else ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=settings.is_production,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )
