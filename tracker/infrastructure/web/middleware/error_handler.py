"""
Global error handling for the FastAPI application.
Every failure reaches the client as JSON with an ``error`` key.
"""

import json
import logging
import traceback
from typing import Any, Dict, Optional

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from tracker.application.use_cases.base_use_case import UseCaseResult
from tracker.config import settings

logger = logging.getLogger(__name__)


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    Middleware to handle all uncaught exceptions and format error responses.
    """

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            return await self.handle_exception(request, exc)

    async def handle_exception(self, request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            f"Unhandled exception: {type(exc).__name__}: {str(exc)}",
            exc_info=True,
            extra={
                "request_path": request.url.path,
                "request_method": request.method,
                "client_host": request.client.host if request.client else None
            }
        )

        error_response = self.format_error_response(exc)
        status_code = error_response.pop("status_code")

        if settings.debug:
            error_response["debug"] = {
                "exception_type": type(exc).__name__,
                "traceback": traceback.format_exc().split("\n")
            }

        return JSONResponse(status_code=status_code, content=error_response)

    def format_error_response(self, exc: Exception) -> Dict[str, Any]:
        """
        Format exception into a consistent error response structure.
        """
        error_response = {
            "error": "Internal Server Error",
            "message": str(exc) or "An unexpected error occurred",
            "status_code": status.HTTP_500_INTERNAL_SERVER_ERROR
        }

        if isinstance(exc, json.JSONDecodeError):
            error_response.update({
                "error": "Invalid JSON",
                "message": "The request body contains invalid JSON",
                "status_code": status.HTTP_400_BAD_REQUEST
            })
        elif isinstance(exc, TimeoutError):
            error_response.update({
                "error": "Request Timeout",
                "message": "The request took too long to process",
                "status_code": status.HTTP_408_REQUEST_TIMEOUT
            })

        return error_response


class BusinessException(Exception):
    """
    Base exception for business logic errors.
    """
    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class ValidationException(BusinessException):
    """Exception raised for validation errors."""
    def __init__(self, message: str, **kwargs):
        super().__init__(
            message=message,
            error_code="VALIDATION_ERROR",
            status_code=status.HTTP_400_BAD_REQUEST,
            **kwargs
        )


class NotFoundException(BusinessException):
    """Exception raised when a resource is not found."""
    def __init__(self, message: str, **kwargs):
        super().__init__(
            message=message,
            error_code="NOT_FOUND",
            status_code=status.HTTP_404_NOT_FOUND,
            **kwargs
        )


def unwrap_result(result: UseCaseResult) -> Any:
    """Return the data of a successful result, or raise the matching HTTP error."""
    if result.success:
        return result.data
    if result.error_code == "ENTITY_NOT_FOUND":
        raise NotFoundException(result.error)
    if result.error_code in ("VALIDATION_ERROR", "BUSINESS_RULE_VIOLATION"):
        raise ValidationException(result.error)
    raise BusinessException(
        result.error or "Request failed",
        error_code=result.error_code,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


async def business_exception_handler(request: Request, exc: BusinessException) -> JSONResponse:
    content: Dict[str, Any] = {"error": exc.message}
    if exc.details:
        content["details"] = exc.details
    return JSONResponse(status_code=exc.status_code, content=content)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies are client errors (400), like domain validation failures."""
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Request validation failed")
    logger.warning(f"Request validation failed on {request.url.path}: {errors}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": f"{location}: {message}" if location else message,
            "details": jsonable_errors(errors),
        },
    )


def jsonable_errors(errors) -> list:
    """Drop the non-serializable parts pydantic puts in ``ctx``."""
    cleaned = []
    for error in errors:
        item = {key: value for key, value in error.items() if key in ("loc", "msg", "type")}
        item["loc"] = list(item.get("loc", ()))
        cleaned.append(item)
    return cleaned
