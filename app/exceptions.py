# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every domain error carries an HTTP status, a machine-readable code and,
# where useful, a suggestion telling the client how to fix the request.
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse


class EcoPointException(Exception):
    """
    Base exception for the EcoPoint API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "ECOPOINT_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Request Exceptions
# =============================================================================

class InvalidIdError(EcoPointException):
    """Raised when a path identifier is not a positive integer."""

    def __init__(self, value: str, resource: str = "resource"):
        super().__init__(
            message="Invalid ID",
            code="INVALID_ID",
            status_code=400,
            suggestion=f"Use the numeric id of the {resource}",
            details={"id": value}
        )


class PermissionDeniedError(EcoPointException):
    """Raised when an authenticated user may not touch a resource."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            message=message,
            code="PERMISSION_DENIED",
            status_code=403,
            details=details
        )


# =============================================================================
# Not Found Exceptions
# =============================================================================

class ResourceNotFoundError(EcoPointException):
    """Common base for 404s so callers can catch them together."""

    def __init__(self, resource: str, resource_id: int, code: str):
        super().__init__(
            message=f"{resource} not found",
            code=code,
            status_code=404,
            suggestion=f"Check that the {resource.lower()} id is correct",
            details={"id": resource_id}
        )


class ReviewNotFoundError(ResourceNotFoundError):
    def __init__(self, review_id: int):
        super().__init__("Review", review_id, "REVIEW_NOT_FOUND")


class CollectionPointNotFoundError(ResourceNotFoundError):
    def __init__(self, collection_point_id: int):
        super().__init__("Collection point", collection_point_id, "COLLECTION_POINT_NOT_FOUND")


class ReportNotFoundError(ResourceNotFoundError):
    def __init__(self, report_id: int):
        super().__init__("Report", report_id, "REPORT_NOT_FOUND")


class WasteTypeNotFoundError(ResourceNotFoundError):
    def __init__(self, waste_type_id: int):
        super().__init__("Waste type", waste_type_id, "WASTE_TYPE_NOT_FOUND")


class UserNotFoundError(ResourceNotFoundError):
    def __init__(self, user_id: int):
        super().__init__("User", user_id, "USER_NOT_FOUND")


# =============================================================================
# Conflict / Validation Exceptions
# =============================================================================

class EmailAlreadyRegisteredError(EcoPointException):
    """Raised when registering an email that already has an account."""

    def __init__(self, email: str):
        super().__init__(
            message=f"Email already registered: {email}",
            code="EMAIL_ALREADY_REGISTERED",
            status_code=409,
            suggestion="Log in with this email or use a different one",
            details={"email": email}
        )


class DuplicateReviewError(EcoPointException):
    """Raised when a user reviews the same collection point twice."""

    def __init__(self, collection_point_id: int):
        super().__init__(
            message="You have already reviewed this collection point",
            code="DUPLICATE_REVIEW",
            status_code=409,
            suggestion="Edit your existing review with PATCH /api/reviews/{id}",
            details={"collection_point_id": collection_point_id}
        )


class DuplicateWasteTypeError(EcoPointException):
    """Raised when creating a waste type whose name is taken."""

    def __init__(self, name: str):
        super().__init__(
            message=f"Waste type already exists: {name}",
            code="DUPLICATE_WASTE_TYPE",
            status_code=409,
            details={"name": name}
        )


class UnknownWasteTypeError(EcoPointException):
    """Raised when a collection point references waste types that don't exist."""

    def __init__(self, missing_ids: list[int]):
        super().__init__(
            message=f"Unknown waste type ids: {', '.join(str(i) for i in missing_ids)}",
            code="UNKNOWN_WASTE_TYPE",
            status_code=400,
            suggestion="List valid ids with GET /api/waste-types",
            details={"missing_ids": missing_ids}
        )


class InvalidStatusTransitionError(EcoPointException):
    """Raised when a report status change is not allowed."""

    def __init__(self, current: str, requested: str):
        super().__init__(
            message=f"Cannot move report from {current} to {requested}",
            code="INVALID_STATUS_TRANSITION",
            status_code=400,
            suggestion="Reopen a resolved report by moving it back to PENDING first",
            details={"current": current, "requested": requested}
        )


class InvalidCredentialsError(EcoPointException):
    """Raised when login fails. Never says which half was wrong."""

    def __init__(self):
        super().__init__(
            message="Invalid email or password",
            code="INVALID_CREDENTIALS",
            status_code=401
        )


# =============================================================================
# Server Exceptions
# =============================================================================

class ReviewDeleteError(EcoPointException):
    """Raised when deleting a review fails for an unexpected reason."""

    def __init__(self, review_id: int):
        super().__init__(
            message="Failed to delete review",
            code="REVIEW_DELETE_FAILED",
            status_code=500,
            suggestion="Try again later or contact support if the issue persists",
            details={"id": review_id}
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def ecopoint_exception_handler(
    request: Request,
    exc: EcoPointException
) -> JSONResponse:
    """
    Convert EcoPointException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle request validation errors.

    Converts validation errors to user-friendly messages.
    """
    return JSONResponse(
        status_code=422,
        content={
            "detail": "Validation error",
            "code": "VALIDATION_ERROR",
            "errors": str(exc)
        }
    )
