"""
Standardized JSON error responses.

Usage:
    from app.shared.errors import not_found_error

    return not_found_error(
        message="Document not found",
        resource_type="document",
        resource_id=file_name,
        correlation_id=request_correlation_id(request),
    )

Payload shape:
    {"error": {"code": "NOT_FOUND", "message": "...", "details": {...}, "correlation_id": "..."}}
"""

from enum import Enum
from typing import Any, Optional

from fastapi import Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel


class ErrorCode(str, Enum):
    """Error codes used by the document service."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    BAD_REQUEST = "BAD_REQUEST"


class ErrorDetail(BaseModel):
    code: str
    message: str
    details: Optional[dict[str, Any]] = None
    correlation_id: Optional[str] = None


def request_correlation_id(request: Optional[Request] = None) -> Optional[str]:
    """Correlation ID stored on the request by CorrelationMiddleware, if any."""
    if request is None:
        return None
    return getattr(request.state, "correlation_id", None)


def error_response(
    code: ErrorCode,
    message: str,
    status_code: int,
    details: Optional[dict[str, Any]] = None,
    correlation_id: Optional[str] = None,
) -> JSONResponse:
    """
    Create a standardized JSON error response.

    Args:
        code: Error code from ErrorCode enum
        message: Human-readable error message
        status_code: HTTP status code
        details: Optional additional error details
        correlation_id: Request correlation ID for tracing
    """
    error_detail = ErrorDetail(
        code=code.value,
        message=message,
        details=details,
        correlation_id=correlation_id,
    )
    return JSONResponse(
        status_code=status_code,
        content={"error": error_detail.model_dump(exclude_none=True)},
    )


def not_found_error(
    message: str,
    resource_type: Optional[str] = None,
    resource_id: Optional[str] = None,
    correlation_id: Optional[str] = None,
) -> JSONResponse:
    """404 response naming the missing resource."""
    details = {}
    if resource_type:
        details["resource_type"] = resource_type
    if resource_id:
        details["resource_id"] = resource_id

    return error_response(
        code=ErrorCode.NOT_FOUND,
        message=message,
        status_code=404,
        details=details or None,
        correlation_id=correlation_id,
    )


def bad_request_error(
    message: str,
    correlation_id: Optional[str] = None,
) -> JSONResponse:
    """400 response for a request that failed while being served."""
    return error_response(
        code=ErrorCode.BAD_REQUEST,
        message=message,
        status_code=400,
        correlation_id=correlation_id,
    )


def validation_error(
    message: str,
    details: Optional[dict[str, Any]] = None,
    correlation_id: Optional[str] = None,
) -> JSONResponse:
    """422 response for a request body that failed validation."""
    return error_response(
        code=ErrorCode.VALIDATION_ERROR,
        message=message,
        status_code=422,
        details=details,
        correlation_id=correlation_id,
    )
