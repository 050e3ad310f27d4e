"""Custom exceptions for the Classroom Q&A application."""

from typing import Any


class ClassroomQAException(Exception):
    """Base exception for all Classroom Q&A errors."""

    def __init__(
        self,
        message: str,
        error_code: str = "INTERNAL_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(message)


class NotFoundError(ClassroomQAException):
    """Resource not found."""

    def __init__(
        self,
        resource: str,
        resource_id: Any,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=f"{resource} with id '{resource_id}' not found",
            error_code="NOT_FOUND",
            details={
                "resource": resource,
                "resource_id": str(resource_id),
                **(details or {}),
            },
        )


class DomainValidationError(ClassroomQAException):
    """Input validation failed."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code="VALIDATION_ERROR",
            details={"field": field, **(details or {})} if field else details,
        )

    @property
    def field(self) -> str | None:
        return self.details.get("field")


class AuthorizationError(ClassroomQAException):
    """Actor is not allowed to perform the operation."""

    WRONG_ROLE = "wrong_role"
    NOT_OWNER = "not_owner"

    def __init__(
        self,
        message: str,
        reason: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code="FORBIDDEN",
            details={"reason": reason, **(details or {})},
        )

    @property
    def reason(self) -> str:
        return self.details["reason"]


class StoreError(ClassroomQAException):
    """The external store call failed."""

    def __init__(
        self,
        operation: str,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=f"Store error during {operation}",
            error_code="STORE_ERROR",
            details={"operation": operation, "cause": message, **(details or {})},
        )
