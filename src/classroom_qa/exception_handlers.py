"""Exception handlers for FastAPI application."""

from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError

from classroom_qa.exceptions import (
    AuthorizationError,
    ClassroomQAException,
    DomainValidationError,
    NotFoundError,
    StoreError,
)

STATUS_BY_EXCEPTION: dict[type[ClassroomQAException], int] = {
    DomainValidationError: status.HTTP_400_BAD_REQUEST,
    AuthorizationError: status.HTTP_403_FORBIDDEN,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    StoreError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def get_request_id(request: Request) -> str | None:
    """Extract request_id from request state if available."""
    return getattr(request.state, "request_id", None)


def _error_body(
    request: Request,
    error: str,
    error_code: str,
    details: str | None = None,
    **extra: Any,
) -> dict[str, Any]:
    body: dict[str, Any] = {
        "error": error,
        "error_code": error_code,
        "request_id": get_request_id(request),
        **extra,
    }
    if details is not None:
        body["details"] = details
    return body


async def classroom_exception_handler(
    request: Request,
    exc: ClassroomQAException,
) -> JSONResponse:
    """Handle custom Classroom Q&A exceptions."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    for exc_type, mapped_status in STATUS_BY_EXCEPTION.items():
        if isinstance(exc, exc_type):
            status_code = mapped_status
            break

    context = dict(exc.details)
    cause = context.pop("cause", None)

    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(
            "Request failed",
            request_id=get_request_id(request),
            error_code=exc.error_code,
            cause=cause,
        )

    return JSONResponse(
        status_code=status_code,
        content=_error_body(request, exc.message, exc.error_code, cause, **context),
    )


async def store_exception_handler(
    request: Request,
    exc: SQLAlchemyError,
) -> JSONResponse:
    """Handle store failures that escaped a route as StoreError responses."""
    store_error = StoreError(
        operation=f"{request.method} {request.url.path}",
        message=str(exc.__cause__ or exc),
    )
    return await classroom_exception_handler(request, store_error)


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Handle malformed requests rejected before reaching a route."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body(
            request,
            "Invalid request",
            "VALIDATION_ERROR",
            errors=jsonable_encoder(exc.errors()),
        ),
    )


async def generic_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Handle unexpected exceptions.

    Runs outside the request logging middleware, so the request id header
    is attached here.
    """
    request_id = get_request_id(request)
    logger.opt(exception=exc).error("Unhandled exception", request_id=request_id)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(request, "Internal server error", "INTERNAL_ERROR"),
        headers={"X-Request-ID": request_id} if request_id else None,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the app."""
    app.add_exception_handler(ClassroomQAException, classroom_exception_handler)
    app.add_exception_handler(SQLAlchemyError, store_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
