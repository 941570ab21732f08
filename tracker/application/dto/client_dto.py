"""
Client DTOs for the application layer.
"""

from typing import Optional

from pydantic import EmailStr, Field

from tracker.domain.models.client import Client
from .base_dto import RequestDTO, ResponseDTO


class CreateClientRequestDTO(RequestDTO):
    """DTO for client creation."""

    name: Optional[str] = Field(default=None, max_length=255, description="Client name")
    email: Optional[EmailStr] = Field(default=None, description="Contact email")
    phone: Optional[str] = Field(default=None, max_length=50)
    address: Optional[str] = None


class ClientResponseDTO(ResponseDTO):
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None

    @classmethod
    def from_domain(cls, client: Client) -> "ClientResponseDTO":
        return cls(
            id=client.id,
            name=client.name,
            email=client.email,
            phone=client.phone,
            address=client.address,
            created_at=client.created_at,
        )
