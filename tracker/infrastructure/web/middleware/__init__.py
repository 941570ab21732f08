from .error_handler import (
    ErrorHandlerMiddleware,
    BusinessException,
    ValidationException,
    NotFoundException,
    business_exception_handler,
    request_validation_handler,
    unwrap_result,
)

__all__ = [
    "ErrorHandlerMiddleware",
    "BusinessException",
    "ValidationException",
    "NotFoundException",
    "business_exception_handler",
    "request_validation_handler",
    "unwrap_result",
]
