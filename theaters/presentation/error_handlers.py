"""Centralized error handling for the presentation layer."""

from typing import Any

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..domain.exceptions import DomainError, TheaterNotFoundError, ValidationError


class ErrorCodes:
    """Machine-readable codes for field errors."""

    FIELD_REQUIRED = "field_required"
    FIELD_TOO_LONG = "field_too_long"
    FIELD_INVALID_VALUE = "field_invalid_value"


def error_response(
    status_code: int, detail: str, errors: list[dict[str, str]] | None = None
) -> JSONResponse:
    content: dict[str, Any] = {"detail": detail}
    if errors:
        content["errors"] = errors
    return JSONResponse(status_code=status_code, content=content)


def status_for_domain_error(error: DomainError) -> int:
    if isinstance(error, TheaterNotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(error, ValidationError):
        return status.HTTP_400_BAD_REQUEST
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def handle_domain_error(error: DomainError, request: Request) -> JSONResponse:
    """Convert domain errors to appropriate HTTP responses."""
    status_code = status_for_domain_error(error)
    if status_code == status.HTTP_500_INTERNAL_SERVER_ERROR:
        return error_response(
            status_code, "An unexpected error occurred. Please try again."
        )
    return error_response(
        status_code, str(error), _extract_field_errors(error) or None
    )


def handle_request_validation_error(
    error: RequestValidationError, request: Request
) -> JSONResponse:
    """Malformed bodies and path parameters are reported as 400 Bad Request."""
    field_errors = []
    for err in error.errors():
        locations = [str(loc) for loc in err["loc"] if loc not in ("body", "path")]
        field_name = ".".join(locations)
        field_errors.append(
            {
                "field": field_name or "body",
                "code": err["type"],
                "message": err["msg"],
            }
        )
    return error_response(
        status.HTTP_400_BAD_REQUEST, "Invalid theater data.", field_errors
    )


def _extract_field_errors(error: DomainError) -> list[dict[str, str]]:
    """Extract field-specific errors from a ValidationError."""
    if not isinstance(error, ValidationError):
        return []

    error_msg = str(error).lower()
    if "required" in error_msg and "name and location" in error_msg:
        return [
            {
                "field": "name",
                "code": ErrorCodes.FIELD_REQUIRED,
                "message": "Name is required",
            },
            {
                "field": "location",
                "code": ErrorCodes.FIELD_REQUIRED,
                "message": "Location is required",
            },
        ]
    if "too long" in error_msg:
        return [
            {
                "field": "name",
                "code": ErrorCodes.FIELD_TOO_LONG,
                "message": "Name is too long",
            }
        ]
    if "does not match" in error_msg:
        return [
            {
                "field": "id",
                "code": ErrorCodes.FIELD_INVALID_VALUE,
                "message": "ID must equal the ID in the path",
            }
        ]
    return []
