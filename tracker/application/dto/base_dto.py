"""
Base DTOs for the application layer.
Fields are snake_case in Python and camelCase on the wire.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class BaseDTO(BaseModel):
    """Base DTO with common configuration."""

    model_config = ConfigDict(
        # Accept both 'clientName' and 'client_name'
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
    )


class RequestDTO(BaseDTO):
    """
    Base class for request DTOs.
    Unknown keys are ignored and blank strings count as absent, so the
    domain validator reports which required field is missing.
    """

    model_config = ConfigDict(extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def blank_to_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def changes(self) -> dict:
        """Only the fields the caller actually sent."""
        return self.model_dump(exclude_unset=True, by_alias=False)


class ResponseDTO(BaseDTO):
    """Base class for response DTOs."""

    id: Optional[str] = Field(default=None, alias="_id")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class MessageResponseDTO(BaseDTO):
    """Plain confirmation message."""

    message: str
