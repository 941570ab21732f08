"""
Base use case classes for the application layer.
Provides common patterns and structure for use case implementations.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Generic, Optional, TypeVar

from tracker.domain.models.base import (
    BusinessRuleViolation,
    DomainException,
    EntityNotFoundError,
    ValidationError,
    utcnow,
)

logger = logging.getLogger(__name__)

T = TypeVar('T')
R = TypeVar('R')
P = TypeVar('P')


@dataclass
class UseCaseResult(Generic[T]):
    """Result wrapper for use case operations."""

    success: bool
    data: Optional[T] = None
    error: Optional[str] = None
    error_code: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None

    @classmethod
    def success_result(cls, data: T, metadata: Optional[Dict[str, Any]] = None) -> "UseCaseResult[T]":
        """Create a successful result."""
        return cls(success=True, data=data, metadata=metadata)

    @classmethod
    def error_result(
        cls,
        error: str,
        error_code: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None
    ) -> "UseCaseResult[T]":
        """Create an error result."""
        return cls(
            success=False,
            error=error,
            error_code=error_code,
            metadata=metadata
        )

    @classmethod
    def from_exception(cls, exc: DomainException) -> "UseCaseResult[T]":
        """Create error result from a domain exception."""
        if isinstance(exc, ValidationError):
            return cls.error_result(exc.message, "VALIDATION_ERROR")
        elif isinstance(exc, EntityNotFoundError):
            return cls.error_result(exc.message, "ENTITY_NOT_FOUND")
        elif isinstance(exc, BusinessRuleViolation):
            return cls.error_result(exc.message, "BUSINESS_RULE_VIOLATION")
        return cls.error_result(exc.message, exc.code)


@dataclass(frozen=True)
class ByIdRequest(Generic[P]):
    """Request addressing a single record, with an optional payload."""

    id: str
    payload: Optional[P] = None


class BaseUseCase(ABC, Generic[T, R]):
    """
    Base class for all use cases.
    Domain errors become failed results; anything else propagates.
    """

    async def execute(self, request: T) -> UseCaseResult[R]:
        started = utcnow()

        try:
            await self._validate_request(request)
            result = await self._execute_business_logic(request)
        except DomainException as exc:
            logger.warning(f"{type(self).__name__} rejected: {exc.message}")
            error_result = UseCaseResult.from_exception(exc)
            error_result.metadata = {
                "execution_time_seconds": (utcnow() - started).total_seconds(),
                "exception_type": type(exc).__name__,
            }
            return error_result

        finished = utcnow()
        return UseCaseResult.success_result(
            result,
            metadata={
                "execution_time_seconds": (finished - started).total_seconds(),
                "executed_at": finished.isoformat(),
            }
        )

    async def _validate_request(self, request: T) -> None:
        """
        Validate the request. Override in subclasses if needed.
        """

    @abstractmethod
    async def _execute_business_logic(self, request: T) -> R:
        """
        Execute the core business logic. Must be implemented by subclasses.
        """


class QueryUseCase(BaseUseCase[T, R]):
    """Base class for query use cases (read operations)."""


class CommandUseCase(BaseUseCase[T, R]):
    """Base class for command use cases (write operations)."""

    async def _execute_business_logic(self, request: T) -> R:
        return await self._execute_command_logic(request)

    @abstractmethod
    async def _execute_command_logic(self, request: T) -> R:
        """Execute the command logic. Must be implemented by subclasses."""


class CreateUseCase(CommandUseCase[T, R]):
    """Base class for entity creation use cases."""


class UpdateUseCase(CommandUseCase[T, R]):
    """Base class for entity update use cases."""


class DeleteUseCase(CommandUseCase[T, R]):
    """Base class for entity deletion use cases."""


class GetByIdUseCase(QueryUseCase[T, R]):
    """Base class for get-by-id use cases."""

    async def _validate_request(self, request: T) -> None:
        identifier = getattr(request, "id", request)
        if not identifier or not str(identifier).strip():
            raise ValidationError("ID is required", "id")


class ListUseCase(QueryUseCase[T, R]):
    """Base class for list use cases."""
